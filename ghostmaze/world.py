"""Game state of a running maze: player, ghosts, trail and flashlight tint."""

from __future__ import annotations

import logging
import random
from collections import deque
from typing import Iterator, List, Optional, Tuple

from .ghost import BASE_HEIGHT, Ghost
from .maze import Maze
from .player import Keys, Player
from .vectors import Matrix, Vec3

logger = logging.getLogger(__name__)

GHOST_COUNT = 800
TRAIL_MAX = 500
TRAIL_HEIGHT = 6.5
CATCH_DISTANCE = 10.0
SAFE_RADIUS = 30.0
DANGER_DISTANCE = 10.0
NORMAL_LIGHT = Vec3(0.61, 0.60, 0.59)
DANGER_LIGHT = Vec3(0.99, 0.60, 0.59)


def flashlight_color(distance: float) -> Vec3:
    """Flashlight tint for the distance to the nearest ghost.

    Normal at SAFE_RADIUS and beyond, fully red-shifted at DANGER_DISTANCE and
    closer, blended linearly in between.
    """
    factor = 1.0
    if distance < SAFE_RADIUS:
        factor = (distance - DANGER_DISTANCE) / (SAFE_RADIUS - DANGER_DISTANCE)
        factor = min(1.0, max(0.0, factor))
    return DANGER_LIGHT * (1.0 - factor) + NORMAL_LIGHT * factor


class Trail:
    """Markers left behind the player, oldest dropped once full."""

    def __init__(self, capacity: int = TRAIL_MAX) -> None:
        self._markers: deque = deque(maxlen=capacity)

    def record(self, position: Vec3, yaw: float) -> None:
        """Leave a marker above `position`, pointing along `yaw` degrees."""
        self._markers.append((Vec3(position.x, TRAIL_HEIGHT, position.z), yaw))

    def __len__(self) -> int:
        return len(self._markers)

    def __iter__(self) -> Iterator[Tuple[Vec3, float]]:
        return iter(self._markers)


def _distance(a: Vec3, b: Vec3) -> float:
    return (a - b).length()


class World:
    """Everything that changes from frame to frame while the game runs."""

    def __init__(
        self,
        maze: Maze,
        ghost_count: int = GHOST_COUNT,
        rng: Optional[random.Random] = None,
    ) -> None:
        if ghost_count < 1:
            raise ValueError("a world needs at least one ghost")
        self.maze = maze
        self.start_position = maze.start_position
        self.start_yaw = maze.start_yaw
        self.player = Player(maze.start_position, maze.start_yaw, maze.walls)
        self.trail = Trail()
        self.rng = rng if rng is not None else random.Random()

        xmin, xmax, zmin, zmax = maze.bounds()
        corners = [Vec3(x, BASE_HEIGHT, z) for x in (xmin, xmax) for z in (zmin, zmax)]
        if all(_distance(c, self.start_position) <= SAFE_RADIUS for c in corners):
            raise ValueError("the maze leaves no room for ghosts away from the start")

        self.ghosts: List[Ghost] = []
        for _ in range(ghost_count):
            ghost = Ghost(xmin, xmax, zmin, zmax, self.rng)
            while _distance(ghost.pos, self.start_position) <= SAFE_RADIUS:
                ghost.regenerate_position()
            self.ghosts.append(ghost)

        self.running = True
        self.fps: Optional[int] = None
        self.light_color = NORMAL_LIGHT
        self.visible_ghosts: List[Tuple[Ghost, Matrix]] = []
        self._second = 0
        self._frames = 1
        self._last_time = 0.0
        self._started = False

    def nearest_ghost_distance(self) -> float:
        """Distance from the player to the closest ghost."""
        position = self.player.position
        return min(_distance(ghost.pos, position) for ghost in self.ghosts)

    def _count_frame(self, current_time: float) -> None:
        second = int(current_time)
        if second == self._second:
            self._frames += 1
            return
        self.fps = self._frames
        position = self.player.position
        logger.debug(
            "FPS: %d; player at (%f, %f, %f) facing (%f, %f)",
            self._frames, position.x, position.y, position.z,
            self.player.yaw, self.player.pitch,
        )
        self._second = second
        self._frames = 1
        self.trail.record(position, self.player.yaw)

    def step(self, current_time: float, keys: Keys = Keys()) -> bool:
        """Advance the world to `current_time` seconds with the given controls.

        Returns False for the very first frame, which only starts the clock,
        and True once the world has been simulated.
        """
        self._count_frame(current_time)
        elapsed = current_time - self._last_time
        self._last_time = current_time
        if not self._started:
            self._started = True
            return False

        if keys.quit:
            self.running = False
        self.player.process_input(keys)

        position = self.player.position
        self.ghosts.sort(key=lambda ghost: _distance(ghost.pos, position))
        self.light_color = flashlight_color(_distance(self.ghosts[0].pos, position))

        camera_pos = self.player.camera_pos
        nearby = self.ghosts[: len(self.ghosts) // 5 + 1]
        self.visible_ghosts = []
        for ghost in reversed(nearby):
            model = ghost.model_matrix(camera_pos)
            ghost.apply_movement(current_time, elapsed)
            if _distance(ghost.pos, self.player.position) <= CATCH_DISTANCE:
                self.player.reset_position(self.start_position, self.start_yaw)
            if _distance(ghost.pos, self.start_position) <= SAFE_RADIUS:
                ghost.reverse_direction_from(self.start_position)
            self.visible_ghosts.append((ghost, model))

        self.player.apply_movement(elapsed)
        return True