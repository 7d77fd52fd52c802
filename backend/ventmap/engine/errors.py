"""Exception taxonomy for the density engine.

InputError subclasses are data problems the caller can fix.
InvariantViolation subclasses mean a modelling assumption broke (a bug).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ventmap.engine.segments import Coordinate, Segment


class VentMapError(Exception):
    """Root of every error raised by ventmap."""


class InputError(VentMapError):
    pass


class EmptyInputError(InputError):
    def __init__(self, message: str = "at least one segment is required") -> None:
        super().__init__(message)


class NonConformingShapeError(InputError):
    """Segment is neither axis-aligned nor exactly 45° under the diagonal policy."""

    def __init__(self, segment: Segment) -> None:
        self.segment = segment
        super().__init__(
            f"non-axis/non-diagonal line {segment} (dx={segment.dx}, dy={segment.dy})"
        )


class ParseError(InputError):
    def __init__(self, message: str, line_number: int | None = None, line: str = "") -> None:
        self.line_number = line_number
        self.line = line
        if line_number is not None:
            message = f"line {line_number}: {message}: {line!r}"
        super().__init__(message)


class GridTooLargeError(InputError):
    def __init__(self, width: int, height: int, limit: int) -> None:
        self.width = width
        self.height = height
        self.limit = limit
        super().__init__(f"grid {width}x{height} exceeds the {limit} cell limit")


class InvariantViolation(VentMapError):
    pass


class CounterOverflowError(InvariantViolation):
    def __init__(self, coordinate: Coordinate, limit: int) -> None:
        self.coordinate = coordinate
        self.limit = limit
        super().__init__(f"counter at {coordinate} would exceed {limit}")


class GridBoundsError(InvariantViolation, IndexError):
    pass


class GridConsumedError(InvariantViolation):
    def __init__(self) -> None:
        super().__init__("grid has already been consumed by into_cells()")
