"""DenseGrid — flat counter buffer addressed by row-major index.

One owned 1-D numpy array of length width*height. Cell (x, y) lives at
``y * width + x``; bounds and overflow checks happen only here.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

import numpy as np
from numpy.typing import DTypeLike, NDArray

from ventmap.engine.errors import (
    CounterOverflowError,
    GridBoundsError,
    GridConsumedError,
)
from ventmap.engine.segments import Coordinate, Segment, grid_extent

logger = logging.getLogger(__name__)

DEFAULT_COUNTER_DTYPE = np.uint32


def counter_dtype(dtype: DTypeLike) -> np.dtype:
    """Normalize and validate a counter dtype (unsigned integers only)."""
    dt = np.dtype(dtype)
    if dt.kind != "u":
        raise ValueError(f"counter dtype must be an unsigned integer type, got {dt}")
    return dt


class DenseGrid:
    """Overlap counters for every cell in the bounding box of a segment batch.

    Example:
        >>> grid = DenseGrid([Segment.from_points(0, 0, 2, 0)])
        >>> grid.width, grid.height
        (3, 1)
        >>> grid.increment(Coordinate(1, 0))
        >>> grid.read(Coordinate(1, 0))
        1
    """

    def __init__(
        self,
        segments: Iterable[Segment],
        dtype: DTypeLike = DEFAULT_COUNTER_DTYPE,
    ) -> None:
        width, height = grid_extent(segments)
        self._init(width, height, dtype)

    @classmethod
    def with_shape(
        cls,
        width: int,
        height: int,
        dtype: DTypeLike = DEFAULT_COUNTER_DTYPE,
    ) -> DenseGrid:
        if width <= 0 or height <= 0:
            raise ValueError(f"grid dimensions must be positive, got {width}x{height}")
        grid = cls.__new__(cls)
        grid._init(width, height, dtype)
        return grid

    def _init(self, width: int, height: int, dtype: DTypeLike) -> None:
        self.width = int(width)
        self.height = int(height)
        self._dtype = counter_dtype(dtype)
        self._limit = int(np.iinfo(self._dtype).max)
        self._counts: NDArray | None = np.zeros(self.width * self.height, dtype=self._dtype)
        logger.debug(
            "Allocated %dx%d grid (%d cells, %s)",
            self.width,
            self.height,
            self.size,
            self._dtype,
        )

    @property
    def size(self) -> int:
        return self.width * self.height

    @property
    def limit(self) -> int:
        """Largest value a single counter can hold."""
        return self._limit

    @property
    def consumed(self) -> bool:
        return self._counts is None

    @property
    def total(self) -> int:
        return int(self._buffer().sum(dtype=np.uint64))

    def _buffer(self) -> NDArray:
        if self._counts is None:
            raise GridConsumedError()
        return self._counts

    # ── Index bijection ──

    def coord_to_index(self, coord: Coordinate) -> int:
        if coord.x >= self.width or coord.y >= self.height:
            raise GridBoundsError(
                f"{coord} is outside the {self.width}x{self.height} grid"
            )
        return coord.y * self.width + coord.x

    def index_to_coord(self, index: int) -> Coordinate:
        if not 0 <= index < self.size:
            raise GridBoundsError(f"index {index} is outside [0, {self.size})")
        y, x = divmod(int(index), self.width)
        return Coordinate(x, y)

    # ── Counters ──

    def read(self, coord: Coordinate) -> int:
        counts = self._buffer()
        return int(counts[self.coord_to_index(coord)])

    def increment(self, coord: Coordinate) -> None:
        counts = self._buffer()
        idx = self.coord_to_index(coord)
        if counts[idx] >= self._limit:
            raise CounterOverflowError(coord, self._limit)
        counts[idx] += 1

    def as_array(self) -> NDArray:
        """Read-only (height, width) copy of the counters. Does not consume."""
        view = self._buffer().reshape(self.height, self.width).copy()
        view.flags.writeable = False
        return view

    def into_cells(self) -> Iterator[tuple[Coordinate, int]]:
        """Consume the grid, yielding (Coordinate, count) in row-major order.

        The returned iterator is single-pass; the grid is unusable afterwards.
        """
        counts = self._buffer()
        self._counts = None
        return self._iter_cells(counts, self.width)

    @staticmethod
    def _iter_cells(counts: NDArray, width: int) -> Iterator[tuple[Coordinate, int]]:
        for idx, count in enumerate(counts):
            y, x = divmod(idx, width)
            yield Coordinate(x, y), int(count)

    def __repr__(self) -> str:
        state = "consumed" if self.consumed else f"total={self.total}"
        return f"DenseGrid({self.width}x{self.height}, {self._dtype}, {state})"
