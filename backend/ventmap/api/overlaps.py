"""POST /api/overlaps — overlap density for a batch of segment records."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from ventmap.config import Settings
from ventmap.dependencies import get_settings
from ventmap.engine.config import DensityConfig
from ventmap.engine.density import analyze
from ventmap.engine.errors import GridTooLargeError
from ventmap.engine.segments import grid_extent
from ventmap.models.requests import OverlapRequest
from ventmap.models.responses import CellResponse, OverlapResponse
from ventmap.parsing.parser import parse_segments

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/overlaps", response_model=OverlapResponse)
async def overlaps(
    req: OverlapRequest,
    settings: Settings = Depends(get_settings),
) -> OverlapResponse:
    segments = parse_segments(req.lines)

    # Refuse oversized batches before the grid is allocated
    width, height = grid_extent(segments)
    if width * height > settings.max_grid_cells:
        raise GridTooLargeError(width, height, settings.max_grid_cells)

    config = DensityConfig(
        threshold=settings.default_threshold if req.threshold is None else req.threshold,
        allow_diagonal=req.allow_diagonal,
        render_diagram=req.render,
    )
    report = analyze(segments, config)

    return OverlapResponse(
        width=report.width,
        height=report.height,
        threshold=report.threshold,
        allow_diagonal=report.allow_diagonal,
        overlap_count=report.overlap_count,
        cells=[CellResponse(x=c.x, y=c.y, count=n) for c, n in report.cells],
        histogram=report.histogram,
        segments_total=report.segments_total,
        segments_skipped=report.segments_skipped,
        diagram=report.diagram,
        processing_time_ms=report.elapsed_ms,
    )
