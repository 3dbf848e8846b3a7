"""Wandering ghosts confined to a rectangular area of the maze."""

from __future__ import annotations

import itertools
import math
import random
from typing import Optional

from .vectors import Matrix, Vec3, identity, rotate, translate

BASE_HEIGHT = 2.5
DIRECTION_PERSIST_FACTOR = 0.02
YAW_JITTER = 0.05

_UP = Vec3(0.0, 1.0, 0.0)
_ids = itertools.count()


def rand_float(rng: random.Random, low: float, high: float) -> float:
    """Uniform random value between `low` and `high`."""
    return rng.random() * (high - low) + low


class Ghost:
    """A ghost drifting around inside the box [xmin, xmax] x [zmin, zmax]."""

    def __init__(
        self,
        xmin: float,
        xmax: float,
        zmin: float,
        zmax: float,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.ghost_id = next(_ids)
        self.rng = rng if rng is not None else random.Random()
        self.xmin = xmin
        self.xmax = xmax
        self.zmin = zmin
        self.zmax = zmax

        self.pos = Vec3(
            rand_float(self.rng, xmin, xmax),
            BASE_HEIGHT,
            rand_float(self.rng, zmin, zmax),
        )
        self.y_offset = rand_float(self.rng, 0.0, math.pi)
        self.yaw = rand_float(self.rng, 0.0, math.pi * 2.0)
        self.moved = Vec3()
        self.direction_persist = 0.0

    def apply_movement(self, current_time: float, elapsed: float) -> None:
        """Bob up and down, drift along the heading and bounce off the bounds."""
        self.moved = Vec3(
            -math.sin(self.yaw) + math.cos(self.yaw),
            0.0,
            math.cos(self.yaw) + math.sin(self.yaw),
        )
        height = BASE_HEIGHT + math.sin(current_time + self.y_offset)
        x = self.pos.x + self.moved.x * elapsed
        z = self.pos.z + self.moved.z * elapsed

        hit_edge = False
        if x < self.xmin:
            hit_edge, x = True, self.xmin
        elif x > self.xmax:
            hit_edge, x = True, self.xmax
        if z < self.zmin:
            hit_edge, z = True, self.zmin
        elif z > self.zmax:
            hit_edge, z = True, self.zmax

        self.pos = Vec3(x, height, z)
        if hit_edge:
            self.yaw = rand_float(self.rng, 0.0, math.pi * 2.0)
        else:
            self.yaw += rand_float(self.rng, -YAW_JITTER, YAW_JITTER)

    def model_matrix(self, camera_pos: Vec3) -> Matrix:
        """Placement of the ghost's billboard, turned to face the camera."""
        model = translate(identity(), self.pos)
        to_player = self.pos - camera_pos
        crossed = to_player.cross(self.moved)
        theta = math.atan2(to_player.x, to_player.z)

        step = -DIRECTION_PERSIST_FACTOR if crossed.y < 0.0 else DIRECTION_PERSIST_FACTOR
        self.direction_persist = (1.0 - DIRECTION_PERSIST_FACTOR) * self.direction_persist + step
        if self.direction_persist < 0.0:
            theta += math.pi
        return rotate(model, theta, _UP)

    def reverse_direction_from(self, target: Vec3) -> None:
        """Point the heading directly away from `target`."""
        direction = self.pos - target
        self.yaw = math.atan2(direction.x, direction.z)

    def regenerate_position(self) -> None:
        """Move to a fresh random spot within the bounds, keeping the height."""
        self.pos = Vec3(
            rand_float(self.rng, self.xmin, self.xmax),
            self.pos.y,
            rand_float(self.rng, self.zmin, self.zmax),
        )