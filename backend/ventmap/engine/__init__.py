"""Overlap-density engine: coordinates, dense grid, rasterizer, density query."""

from ventmap.engine.config import DensityConfig
from ventmap.engine.density import DensityReport, analyze, overlap_cells, populate_grid
from ventmap.engine.errors import (
    CounterOverflowError,
    EmptyInputError,
    GridBoundsError,
    GridConsumedError,
    GridTooLargeError,
    InputError,
    InvariantViolation,
    NonConformingShapeError,
    ParseError,
    VentMapError,
)
from ventmap.engine.grid import DenseGrid
from ventmap.engine.rasterizer import SegmentRaster, SegmentShape, classify, rasterize
from ventmap.engine.segments import Coordinate, Segment, grid_extent

__all__ = [
    "Coordinate",
    "CounterOverflowError",
    "DenseGrid",
    "DensityConfig",
    "DensityReport",
    "EmptyInputError",
    "GridBoundsError",
    "GridConsumedError",
    "GridTooLargeError",
    "InputError",
    "InvariantViolation",
    "NonConformingShapeError",
    "ParseError",
    "Segment",
    "SegmentRaster",
    "SegmentShape",
    "VentMapError",
    "analyze",
    "classify",
    "grid_extent",
    "overlap_cells",
    "populate_grid",
    "rasterize",
]
