"""Grid coordinates and line segments. No engine imports beyond errors."""

from __future__ import annotations

import numbers
import operator
from collections.abc import Iterable
from dataclasses import dataclass

from ventmap.engine.errors import EmptyInputError


@dataclass(frozen=True)
class Coordinate:
    """A grid cell. Numpy integer scalars are accepted and stored as int."""

    x: int
    y: int

    def __post_init__(self) -> None:
        for name in ("x", "y"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise ValueError(f"Coordinate.{name} must be an integer, got {value!r}")
            value = operator.index(value)
            if value < 0:
                raise ValueError(f"Coordinate.{name} must be non-negative, got {value}")
            object.__setattr__(self, name, value)

    def __str__(self) -> str:
        return f"{self.x},{self.y}"


@dataclass(frozen=True)
class Segment:
    """One drawn line between two cells, inclusive of both endpoints."""

    start: Coordinate
    end: Coordinate

    @classmethod
    def from_points(cls, x1: int, y1: int, x2: int, y2: int) -> Segment:
        return cls(Coordinate(x1, y1), Coordinate(x2, y2))

    @property
    def dx(self) -> int:
        return self.end.x - self.start.x

    @property
    def dy(self) -> int:
        return self.end.y - self.start.y

    @property
    def is_axis_aligned(self) -> bool:
        return self.dx == 0 or self.dy == 0

    @property
    def is_diagonal(self) -> bool:
        return self.dx != 0 and abs(self.dx) == abs(self.dy)

    @property
    def length(self) -> int:
        """Number of cells covered when the segment is rasterizable."""
        return max(abs(self.dx), abs(self.dy)) + 1

    def __str__(self) -> str:
        return f"{self.start} -> {self.end}"


def grid_extent(segments: Iterable[Segment]) -> tuple[int, int]:
    """(width, height) of the smallest grid anchored at the origin holding every endpoint."""
    max_x = max_y = -1
    for seg in segments:
        max_x = max(max_x, seg.start.x, seg.end.x)
        max_y = max(max_y, seg.start.y, seg.end.y)
    if max_x < 0:
        raise EmptyInputError()
    return max_x + 1, max_y + 1
