"""The player: first-person camera, flashlight, walking, jumping and wall collisions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Sequence

from .collisions import segment_hits_triangle
from .maze import Wall
from .vectors import Vec3

LIGHT_OFFSET_MAX = 15.0
LIGHT_PERSIST_FACTOR = 0.99
LIGHT_OFFSET_FACTOR = 0.01
LIGHT_MOVEMENT_MULTIPLIER = 128.0
JUMP_VELOCITY = 8.104849
VERTICAL_ACCELERATION = -13.4058
HORIZONTAL_VELOCITY = 10.0

MOUSE_SENSITIVITY = 0.1
PITCH_LIMIT = 89.0
FOV_MIN = 1.0
FOV_MAX = 90.0
DEFAULT_FOV = 60.0
ARM_LENGTH = 0.5
CAMERA_OFFSET = Vec3(0.0, 2.5, 0.0)
CAMERA_UP = Vec3(0.0, 1.0, 0.0)
COLLISION_REACH = 20.0


@dataclass(frozen=True)
class Keys:
    """Which controls are held down during a frame."""

    forward: bool = False
    back: bool = False
    left: bool = False
    right: bool = False
    jump: bool = False
    quit: bool = False


def _front(yaw: float, pitch: float) -> Vec3:
    yaw_r = math.radians(yaw)
    pitch_r = math.radians(pitch)
    return Vec3(
        math.cos(yaw_r) * math.cos(pitch_r),
        math.sin(pitch_r),
        math.sin(yaw_r) * math.cos(pitch_r),
    ).normalized()


def _clamp(value: float, limit: float) -> float:
    return max(-limit, min(limit, value))


class Player:
    """A walker in the maze, viewing through a camera and holding a flashlight."""

    def __init__(self, start: Vec3, yaw: float, walls: Sequence[Wall] = ()) -> None:
        self.position = start
        self.yaw = yaw
        self.pitch = 0.0
        self.fov = DEFAULT_FOV
        self.walls = tuple(walls)
        self.velocity = Vec3()
        self.camera_front = _front(yaw, 0.0)
        self.light_yaw_offset = 0.0
        self.light_pitch_offset = 0.0
        self._previous_mouse: Optional[tuple] = None
        self._mouse_offset = (0.0, 0.0)

    @property
    def camera_up(self) -> Vec3:
        return CAMERA_UP

    @property
    def camera_pos(self) -> Vec3:
        """Eye position, raised above the feet."""
        return self.position + CAMERA_OFFSET

    @property
    def light_front(self) -> Vec3:
        """Flashlight direction, lagging behind the view direction."""
        return _front(self.yaw + self.light_yaw_offset, self.pitch + self.light_pitch_offset)

    @property
    def light_pos(self) -> Vec3:
        """Flashlight position, held out at arm's length from the eye."""
        return self.camera_pos + self.light_front * ARM_LENGTH

    def mouse_moved(self, x: float, y: float) -> None:
        """Turn the view by the cursor motion since the previous report."""
        if self._previous_mouse is None:
            self._previous_mouse = (x, y)
        prev_x, prev_y = self._previous_mouse
        x_offset = (x - prev_x) * MOUSE_SENSITIVITY
        y_offset = (prev_y - y) * MOUSE_SENSITIVITY
        self._previous_mouse = (x, y)

        self.yaw += x_offset
        self.pitch = _clamp(self.pitch + y_offset, PITCH_LIMIT)
        self._mouse_offset = (x_offset, y_offset)

    def scrolled(self, offset: float) -> None:
        """Zoom the field of view, kept within its limits."""
        self.fov = min(FOV_MAX, max(FOV_MIN, self.fov - offset))

    def process_input(self, keys: Keys) -> None:
        """Set the velocity from the held keys; ignored while in the air."""
        if self.is_in_air():
            return
        if keys.jump:
            self.velocity = Vec3(self.velocity.x, JUMP_VELOCITY, self.velocity.z)
            return

        if keys.forward:
            rel_z = 1.0
        elif keys.back:
            rel_z = -1.0
        else:
            rel_z = 0.0
        if keys.left:
            rel_x = -1.0
        elif keys.right:
            rel_x = 1.0
        else:
            rel_x = 0.0

        if rel_x == 0.0 and rel_z == 0.0:
            self.velocity = Vec3()
            return

        relative = Vec3(rel_x, 0.0, rel_z).normalized() * HORIZONTAL_VELOCITY
        yaw_r = math.radians(self.yaw)
        self.velocity = Vec3(
            -relative.x * math.sin(yaw_r) + relative.z * math.cos(yaw_r),
            0.0,
            relative.x * math.cos(yaw_r) + relative.z * math.sin(yaw_r),
        )

    def is_in_air(self) -> bool:
        return self.position.y > 0.0

    def _update_light(self) -> None:
        x_offset, y_offset = (v * LIGHT_MOVEMENT_MULTIPLIER for v in self._mouse_offset)
        self.light_yaw_offset = _clamp(
            self.light_yaw_offset * LIGHT_PERSIST_FACTOR + x_offset * LIGHT_OFFSET_FACTOR,
            LIGHT_OFFSET_MAX,
        )
        self.light_pitch_offset = _clamp(
            self.light_pitch_offset * LIGHT_PERSIST_FACTOR + y_offset * LIGHT_OFFSET_FACTOR,
            LIGHT_OFFSET_MAX,
        )
        self._mouse_offset = (0.0, 0.0)

    def _blocked_movement(self, movement: Vec3) -> Vec3:
        """The movement with the x and z parts zeroed where a wall is in the way."""
        start = self.camera_pos
        stop = start + movement * COLLISION_REACH
        res_x, res_z = movement.x, movement.z
        blocked_x = blocked_z = False

        for wall in self.walls:
            if blocked_x and blocked_z:
                break
            normal = wall.normal
            p1, p2, p3 = wall.positions[1], wall.positions[0], wall.positions[2]
            if not blocked_x and (
                (movement.x > 0 and normal.x < 0) or (movement.x < 0 and normal.x > 0)
            ):
                if segment_hits_triangle(start, stop, p1, p2, p3):
                    blocked_x, res_x = True, 0.0
            if not blocked_z and (
                (movement.z > 0 and normal.z < 0) or (movement.z < 0 and normal.z > 0)
            ):
                if segment_hits_triangle(start, stop, p1, p2, p3):
                    blocked_z, res_z = True, 0.0
        return Vec3(res_x, movement.y, res_z)

    def apply_movement(self, elapsed: float) -> None:
        """Advance the view, the flashlight and the position by `elapsed` seconds."""
        self.camera_front = _front(self.yaw, self.pitch)
        self._update_light()

        movement = self.velocity * elapsed
        step = self._blocked_movement(movement)
        vx, vy, vz = self.velocity
        dx, dy, dz = step
        if self.is_in_air():
            if dx == 0.0:
                vx = 0.0
            if dz == 0.0:
                vz = 0.0
        else:
            if dx != movement.x:
                dx = -movement.x
            if dz != movement.z:
                dz = -movement.z

        y = self.position.y + dy
        if y <= 0.0:
            y, vy = 0.0, 0.0
        else:
            vy += elapsed * VERTICAL_ACCELERATION

        self.position = Vec3(self.position.x + dx, y, self.position.z + dz)
        self.velocity = Vec3(vx, vy, vz)

    def reset_position(self, start: Vec3, yaw: float) -> None:
        """Put the player back at `start`, facing `yaw`, standing still."""
        self.position = start
        self.yaw = yaw
        self.velocity = Vec3()