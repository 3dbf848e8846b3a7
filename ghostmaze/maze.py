"""Maze description: player start, wall quads and floor, read from a text file."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from typing import Iterator, Tuple, Union

from .vectors import Vec3

VERTICES_PER_WALL = 6
FLOATS_PER_VERTEX = 6
_BOUND_SENTINEL = 9999.9


@dataclass(frozen=True)
class Wall:
    """Two triangles of a surface: six vertex positions with their normals."""

    positions: Tuple[Vec3, ...]
    normals: Tuple[Vec3, ...]

    def __post_init__(self) -> None:
        if len(self.positions) != VERTICES_PER_WALL or len(self.normals) != VERTICES_PER_WALL:
            raise ValueError(f"a wall needs exactly {VERTICES_PER_WALL} vertices")

    @property
    def normal(self) -> Vec3:
        """The normal of the first vertex, which stands for the whole surface."""
        return self.normals[0]

    @property
    def vertex_data(self) -> Tuple[float, ...]:
        """Interleaved position and normal floats, as laid out in the file."""
        return tuple(
            value
            for position, normal in zip(self.positions, self.normals)
            for value in (*position, *normal)
        )


@dataclass(frozen=True)
class Maze:
    """Everything a maze file describes."""

    start_position: Vec3
    start_yaw: float
    walls: Tuple[Wall, ...]
    floor: Wall

    def bounds(self) -> Tuple[float, float, float, float]:
        """(xmin, xmax, zmin, zmax) gathered over the wall vertices.

        A vertex that lowers the minimum is not also considered for the
        maximum, so with a single distinct coordinate the maximum keeps its
        starting sentinel.
        """
        xmin, xmax = _BOUND_SENTINEL, -_BOUND_SENTINEL
        zmin, zmax = _BOUND_SENTINEL, -_BOUND_SENTINEL
        for wall in self.walls:
            for position in wall.positions:
                if position.x < xmin:
                    xmin = position.x
                elif position.x > xmax:
                    xmax = position.x
                if position.z < zmin:
                    zmin = position.z
                elif position.z > zmax:
                    zmax = position.z
        return xmin, xmax, zmin, zmax


def _next_word(words: Iterator[str], what: str) -> str:
    try:
        return next(words)
    except StopIteration:
        raise ValueError(f"maze data ended while reading {what}") from None


def _next_float(words: Iterator[str], what: str) -> float:
    word = _next_word(words, what)
    try:
        return float(word)
    except ValueError:
        raise ValueError(f"invalid number {word!r} in {what}") from None


def _read_surface(words: Iterator[str], what: str) -> Wall:
    positions = []
    normals = []
    for _ in range(VERTICES_PER_WALL):
        values = [_next_float(words, what) for _ in range(FLOATS_PER_VERTEX)]
        positions.append(Vec3(*values[:3]))
        normals.append(Vec3(*values[3:]))
    return Wall(tuple(positions), tuple(normals))


def parse_maze(text: str) -> Maze:
    """Build a maze from the whitespace-separated numbers of a maze file.

    Raises ValueError if the data is short or holds something not a number.
    """
    words = iter(text.split())
    start = Vec3(*(_next_float(words, "the start position") for _ in range(3)))
    yaw = _next_float(words, "the start yaw")

    count_text = _next_word(words, "the wall count")
    try:
        wall_count = int(count_text)
    except ValueError:
        raise ValueError(f"invalid wall count {count_text!r}") from None
    if wall_count < 0:
        raise ValueError(f"wall count must not be negative, got {wall_count}")

    walls = tuple(_read_surface(words, f"wall {index}") for index in range(wall_count))
    floor = _read_surface(words, "the floor")
    return Maze(start, yaw, walls, floor)


def load_maze(path: Union[str, "PathLike[str]"]) -> Maze:
    """Read and parse a maze file. Raises OSError if it cannot be read."""
    with open(path, encoding="utf-8") as handle:
        return parse_maze(handle.read())