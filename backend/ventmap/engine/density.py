"""Density query — replay every segment onto a fresh grid, then filter by threshold."""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field

from numpy.typing import DTypeLike

from ventmap.engine.config import DensityConfig
from ventmap.engine.grid import DEFAULT_COUNTER_DTYPE, DenseGrid
from ventmap.engine.rasterizer import SegmentRaster, rasterize
from ventmap.engine.segments import Coordinate, Segment
from ventmap.utils.render import grid_histogram, grid_to_text

logger = logging.getLogger(__name__)

Cell = tuple[Coordinate, int]


def _fill(
    segments: Sequence[Segment],
    allow_diagonal: bool,
    dtype: DTypeLike,
) -> tuple[DenseGrid, list[SegmentRaster]]:
    grid = DenseGrid(segments, dtype=dtype)
    # Validate the whole batch before touching any counter.
    rasters = [rasterize(seg, allow_diagonal) for seg in segments]
    for raster in rasters:
        for coord in raster:
            grid.increment(coord)
    return grid, rasters


def populate_grid(
    segments: Iterable[Segment],
    allow_diagonal: bool,
    dtype: DTypeLike = DEFAULT_COUNTER_DTYPE,
) -> DenseGrid:
    """Build a grid sized to ``segments`` and count every covered cell."""
    grid, _ = _fill(list(segments), allow_diagonal, dtype)
    return grid


def filter_cells(cells: Iterable[Cell], threshold: int) -> Iterator[Cell]:
    return (cell for cell in cells if cell[1] >= threshold)


def overlap_cells(
    segments: Iterable[Segment],
    allow_diagonal: bool,
    threshold: int,
) -> Iterator[Cell]:
    """Cells covered by at least ``threshold`` segments, in row-major order.

    Raises:
        EmptyInputError: no segments.
        NonConformingShapeError: allow_diagonal is True and a segment is not
            horizontal, vertical or 45°. No cell is counted in that case.
        CounterOverflowError: a counter exceeded its dtype.
    """
    grid = populate_grid(segments, allow_diagonal)
    return filter_cells(grid.into_cells(), threshold)


@dataclass
class DensityReport:
    width: int
    height: int
    threshold: int
    allow_diagonal: bool
    segments_total: int
    segments_rasterized: int
    cells: list[Cell] = field(default_factory=list)
    histogram: dict[int, int] = field(default_factory=dict)
    diagram: str | None = None
    elapsed_ms: float = 0.0

    @property
    def segments_skipped(self) -> int:
        return self.segments_total - self.segments_rasterized

    @property
    def overlap_count(self) -> int:
        return len(self.cells)


def analyze(segments: Iterable[Segment], config: DensityConfig | None = None) -> DensityReport:
    """Run one density query and collect everything a caller may want to present."""
    config = config or DensityConfig()
    start = time.perf_counter()

    segments = list(segments)
    grid, rasters = _fill(segments, config.allow_diagonal, config.counter_dtype)

    counts = grid.as_array()
    diagram = grid_to_text(counts, empty=config.empty_cell) if config.render_diagram else None
    width, height = grid.width, grid.height
    cells = list(filter_cells(grid.into_cells(), config.threshold))

    elapsed = (time.perf_counter() - start) * 1000
    report = DensityReport(
        width=width,
        height=height,
        threshold=config.threshold,
        allow_diagonal=config.allow_diagonal,
        segments_total=len(segments),
        segments_rasterized=sum(1 for r in rasters if not r.excluded),
        cells=cells,
        histogram=grid_histogram(counts),
        diagram=diagram,
        elapsed_ms=round(elapsed, 3),
    )
    logger.debug(
        "Density query: %d/%d segments on %dx%d grid, %d cells >= %d in %.1fms",
        report.segments_rasterized,
        report.segments_total,
        width,
        height,
        report.overlap_count,
        config.threshold,
        elapsed,
    )
    return report
