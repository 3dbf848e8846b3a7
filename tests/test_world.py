import math
import random

import pytest

from ghostmaze.maze import Maze, Wall
from ghostmaze.player import Keys
from ghostmaze.vectors import Vec3
from ghostmaze.world import (
    DANGER_LIGHT,
    NORMAL_LIGHT,
    TRAIL_HEIGHT,
    Trail,
    World,
    flashlight_color,
)

_UP = Vec3(0.0, 1.0, 0.0)
_NORMAL = (0.61, 0.60, 0.59)
_DANGER = (0.99, 0.60, 0.59)


def _wall(points):
    return Wall(tuple(points), tuple(_UP for _ in points))


def _maze(size=100.0):
    s = size
    back = _wall([
        Vec3(-s, 0, -s), Vec3(s, 0, -s), Vec3(s, 5, -s),
        Vec3(s, 5, -s), Vec3(-s, 5, -s), Vec3(-s, 0, -s),
    ])
    side = _wall([
        Vec3(s, 0, -s), Vec3(s, 0, s), Vec3(s, 5, s),
        Vec3(s, 5, s), Vec3(s, 5, -s), Vec3(s, 0, -s),
    ])
    return Maze(Vec3(0.0, 0.0, 0.0), 0.0, (back, side), back)


def _world(count=10, seed=1):
    return World(_maze(), ghost_count=count, rng=random.Random(seed))


def test_flashlight_far_is_normal():
    assert tuple(flashlight_color(30.0)) == pytest.approx(_NORMAL)
    assert tuple(flashlight_color(500.0)) == pytest.approx(_NORMAL)


def test_flashlight_close_is_danger():
    assert tuple(flashlight_color(10.0)) == pytest.approx(_DANGER)
    assert tuple(flashlight_color(2.0)) == pytest.approx(_DANGER)


def test_flashlight_values_from_source():
    assert tuple(flashlight_color(40.0)) == pytest.approx((0.61, 0.60, 0.59))
    assert tuple(flashlight_color(0.0)) == pytest.approx((0.99, 0.60, 0.59))


def test_flashlight_blends_monotonically():
    reds = [flashlight_color(d).x for d in (10.0, 15.0, 20.0, 25.0, 30.0)]
    assert reds == sorted(reds, reverse=True)
    middle = flashlight_color(20.0)
    assert NORMAL_LIGHT.x < middle.x < DANGER_LIGHT.x
    assert middle.y == pytest.approx(NORMAL_LIGHT.y)
    assert middle.z == pytest.approx(NORMAL_LIGHT.z)


def test_trail_records_at_fixed_height():
    trail = Trail()
    trail.record(Vec3(3.0, 0.0, -4.0), 45.0)
    assert list(trail) == [(Vec3(3.0, TRAIL_HEIGHT, -4.0), 45.0)]


def test_trail_drops_oldest_when_full():
    trail = Trail(capacity=3)
    for yaw in range(5):
        trail.record(Vec3(float(yaw), 0.0, 0.0), float(yaw))
    assert len(trail) == 3
    assert [yaw for _, yaw in trail] == [2.0, 3.0, 4.0]


def test_default_trail_capacity():
    trail = Trail()
    for yaw in range(600):
        trail.record(Vec3(), float(yaw))
    assert len(trail) == 500


def test_ghosts_start_away_from_start():
    world = _world(count=50)
    assert len(world.ghosts) == 50
    for ghost in world.ghosts:
        assert (ghost.pos - world.start_position).length() > 30.0


def test_cramped_maze_is_rejected():
    with pytest.raises(ValueError):
        World(_maze(size=5.0), ghost_count=3, rng=random.Random(0))


def test_needs_a_ghost():
    with pytest.raises(ValueError):
        World(_maze(), ghost_count=0)


def test_nearest_ghost_distance_is_minimum():
    world = _world(count=20)
    nearest = world.nearest_ghost_distance()
    distances = [(g.pos - world.player.position).length() for g in world.ghosts]
    assert all(nearest <= d for d in distances)
    assert any(nearest == pytest.approx(d) for d in distances)


def test_first_step_only_starts_clock():
    world = _world()
    positions = [g.pos for g in world.ghosts]
    assert world.step(0.0) is False
    assert [g.pos for g in world.ghosts] == positions
    assert world.step(0.01) is True


def test_far_ghosts_keep_normal_light():
    world = _world()
    world.step(0.0)
    world.step(0.01)
    assert tuple(world.light_color) == pytest.approx(_NORMAL)


def test_visible_ghosts_are_nearest_fifth_plus_one():
    world = _world(count=10)
    world.step(0.0)
    world.step(0.01)
    assert len(world.visible_ghosts) == 3
    drawn = {id(g) for g, _ in world.visible_ghosts}
    assert drawn == {id(g) for g in world.ghosts[:3]}


def test_caught_player_returns_to_start():
    world = _world()
    world.step(0.0)
    world.player.position = Vec3(50.0, 0.0, 50.0)
    world.ghosts[0].pos = Vec3(50.0, 2.5, 52.0)
    world.step(0.01)
    assert world.player.position == world.start_position
    assert world.player.velocity == Vec3()


def test_ghost_near_start_turns_away():
    world = _world()
    world.step(0.0)
    ghost = world.ghosts[0]
    ghost.pos = Vec3(5.0, 2.5, 0.0)
    world.step(0.01)
    assert ghost.yaw == pytest.approx(math.atan2(ghost.pos.x, ghost.pos.z))
    assert tuple(world.light_color) == pytest.approx(_DANGER)


def test_quit_key_stops_world():
    world = _world()
    world.step(0.0)
    assert world.running
    world.step(0.01, Keys(quit=True))
    assert world.running is False


def test_fps_and_trail_each_second():
    world = _world()
    assert world.fps is None
    for t in (0.0, 0.1, 0.2):
        world.step(t)
    assert len(world.trail) == 0
    world.step(1.0)
    assert world.fps == 4
    assert len(world.trail) == 1
    (marker, yaw), = list(world.trail)
    assert marker.y == TRAIL_HEIGHT
    assert yaw == world.player.yaw


def test_walking_moves_player():
    world = _world()
    world.step(0.0)
    world.step(0.1, Keys(forward=True))
    world.step(0.2, Keys(forward=True))
    assert world.player.position.x > 0.0
    assert world.player.position.z == pytest.approx(0.0)