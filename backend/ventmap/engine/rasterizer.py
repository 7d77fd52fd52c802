"""Segment rasterization — enumerate every cell a segment covers.

Two policies:
    allow_diagonal=False  horizontal/vertical only; anything else is skipped
    allow_diagonal=True   horizontal/vertical/45°; anything else raises

Validation happens when ``rasterize`` is called, emission happens lazily.
"""

from __future__ import annotations

import enum
from collections.abc import Iterator

from ventmap.engine.errors import NonConformingShapeError
from ventmap.engine.segments import Coordinate, Segment


class SegmentShape(enum.Enum):
    POINT = "point"
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    DIAGONAL = "diagonal"
    OTHER = "other"


def classify(segment: Segment) -> SegmentShape:
    dx, dy = segment.dx, segment.dy
    if dx == 0 and dy == 0:
        return SegmentShape.POINT
    if dy == 0:
        return SegmentShape.HORIZONTAL
    if dx == 0:
        return SegmentShape.VERTICAL
    if abs(dx) == abs(dy):
        return SegmentShape.DIAGONAL
    return SegmentShape.OTHER


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class SegmentRaster:
    """Lazy, restartable cell sequence for one segment.

    Every ``iter()`` walks from the start endpoint again; nothing mutable is
    captured between walks.
    """

    __slots__ = ("segment", "excluded", "_steps", "_step_x", "_step_y")

    def __init__(self, segment: Segment, excluded: bool = False) -> None:
        self.segment = segment
        self.excluded = excluded
        self._steps = max(abs(segment.dx), abs(segment.dy))
        self._step_x = _sign(segment.dx)
        self._step_y = _sign(segment.dy)

    def __iter__(self) -> Iterator[Coordinate]:
        if self.excluded:
            return
        x0, y0 = self.segment.start.x, self.segment.start.y
        for i in range(self._steps + 1):
            yield Coordinate(x0 + i * self._step_x, y0 + i * self._step_y)

    def __len__(self) -> int:
        return 0 if self.excluded else self._steps + 1

    def __repr__(self) -> str:
        flag = ", excluded" if self.excluded else ""
        return f"SegmentRaster({self.segment}{flag})"


def rasterize(segment: Segment, allow_diagonal: bool) -> SegmentRaster:
    """Cells covered by ``segment`` under the given policy, both endpoints included.

    Raises:
        NonConformingShapeError: allow_diagonal is True and the segment is
            neither axis-aligned nor exactly 45°.
    """
    shape = classify(segment)
    if shape is SegmentShape.OTHER:
        if allow_diagonal:
            raise NonConformingShapeError(segment)
        return SegmentRaster(segment, excluded=True)
    if shape is SegmentShape.DIAGONAL and not allow_diagonal:
        return SegmentRaster(segment, excluded=True)
    return SegmentRaster(segment)
