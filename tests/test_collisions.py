import pytest

from ghostmaze.collisions import segment_hits_triangle
from ghostmaze.vectors import Vec3

P1 = Vec3(0.0, 0.0, 0.0)
P2 = Vec3(1.0, 0.0, 0.0)
P3 = Vec3(0.0, 1.0, 0.0)


def test_segment_through_triangle_hits():
    assert segment_hits_triangle(Vec3(0.2, 0.2, 1.0), Vec3(0.2, 0.2, -1.0), P1, P2, P3) is True


def test_direction_of_segment_does_not_matter():
    assert segment_hits_triangle(Vec3(0.2, 0.2, -1.0), Vec3(0.2, 0.2, 1.0), P1, P2, P3) is True


def test_segment_stopping_before_plane_misses():
    assert segment_hits_triangle(Vec3(0.2, 0.2, 1.0), Vec3(0.2, 0.2, 0.5), P1, P2, P3) is False


def test_segment_starting_past_plane_misses():
    assert segment_hits_triangle(Vec3(0.2, 0.2, -0.5), Vec3(0.2, 0.2, -1.0), P1, P2, P3) is False


def test_parallel_segment_misses():
    assert segment_hits_triangle(Vec3(0.2, 0.2, 0.5), Vec3(0.8, 0.2, 0.5), P1, P2, P3) is False


@pytest.mark.parametrize(
    "x, y",
    [(2.0, 0.2), (0.2, 2.0), (-0.2, 0.2), (0.2, -0.2)],
)
def test_points_outside_edges_miss(x, y):
    assert segment_hits_triangle(Vec3(x, y, 1.0), Vec3(x, y, -1.0), P1, P2, P3) is False


def test_far_corner_of_parallelogram_counts_as_hit():
    assert segment_hits_triangle(Vec3(0.9, 0.9, 1.0), Vec3(0.9, 0.9, -1.0), P1, P2, P3) is True


def test_degenerate_triangle_misses():
    assert segment_hits_triangle(Vec3(0.0, 0.0, 1.0), Vec3(0.0, 0.0, -1.0), P1, P2, P2) is False