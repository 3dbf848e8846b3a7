"""Small 3D vector and 4x4 matrix helpers used by the game world."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Tuple

Column = Tuple[float, float, float, float]
Matrix = Tuple[Column, Column, Column, Column]


@dataclass(frozen=True, slots=True)
class Vec3:
    """An immutable three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vec3:
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec3:
        return Vec3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def dot(self, other: Vec3) -> float:
        """Scalar product with another vector."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        """Vector product with another vector."""
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.dot(self))

    def normalized(self) -> Vec3:
        """Unit vector in the same direction; a zero vector has none."""
        size = self.length()
        if size == 0.0:
            raise ValueError("cannot normalize a zero-length vector")
        return self / size


def identity() -> Matrix:
    """The 4x4 identity matrix, stored as four columns."""
    return tuple(
        tuple(1.0 if row == col else 0.0 for row in range(4)) for col in range(4)
    )  # type: ignore[return-value]


def _combine(terms) -> Column:
    """Sum of columns, each scaled by its weight."""
    result = [0.0, 0.0, 0.0, 0.0]
    for column, weight in terms:
        for row, value in enumerate(column):
            result[row] += value * weight
    return tuple(result)  # type: ignore[return-value]


def translate(matrix: Matrix, offset: Vec3) -> Matrix:
    """Post-multiply a matrix by a translation."""
    m0, m1, m2, m3 = matrix
    moved = _combine([(m0, offset.x), (m1, offset.y), (m2, offset.z), (m3, 1.0)])
    return (m0, m1, m2, moved)


def rotate(matrix: Matrix, angle: float, axis: Vec3) -> Matrix:
    """Post-multiply a matrix by a rotation of `angle` radians about `axis`."""
    c = math.cos(angle)
    s = math.sin(angle)
    ax, ay, az = axis.normalized()
    tx, ty, tz = (1.0 - c) * ax, (1.0 - c) * ay, (1.0 - c) * az

    r0 = (c + tx * ax, tx * ay + s * az, tx * az - s * ay)
    r1 = (ty * ax - s * az, c + ty * ay, ty * az + s * ax)
    r2 = (tz * ax + s * ay, tz * ay - s * ax, c + tz * az)

    m0, m1, m2, m3 = matrix
    columns = tuple(_combine(zip((m0, m1, m2), r)) for r in (r0, r1, r2))
    return (columns[0], columns[1], columns[2], m3)