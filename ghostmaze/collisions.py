"""Segment against triangle intersection used for wall collisions."""

from __future__ import annotations

from .vectors import Vec3

_EPSILON = 0.0000001


def _negative(value: float) -> bool:
    return value < 0


def segment_hits_triangle(start: Vec3, stop: Vec3, p1: Vec3, p2: Vec3, p3: Vec3) -> bool:
    """Whether the segment from `start` to `stop` crosses the plane patch of the triangle.

    The barycentric coordinates are only checked to lie in [0, 1] each, so the
    test covers the parallelogram spanned by the two triangle edges at `p1`.
    """
    lba = start - stop
    v01 = p2 - p1
    v02 = p3 - p1
    cross12 = v01.cross(v02)
    det = lba.dot(cross12)
    if abs(det) < _EPSILON:
        return False

    diff_start = start - p1
    for numerator in (
        cross12.dot(diff_start),
        v02.cross(lba).dot(diff_start),
        lba.cross(v01).dot(diff_start),
    ):
        if _negative(numerator) != _negative(det) or abs(det) < abs(numerator):
            return False
    return True