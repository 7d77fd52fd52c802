"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"


class CellResponse(BaseModel):
    x: int
    y: int
    count: int


class OverlapResponse(BaseModel):
    width: int
    height: int
    threshold: int
    allow_diagonal: bool
    overlap_count: int = 0
    cells: list[CellResponse] = Field(default_factory=list)
    histogram: dict[int, int] = Field(default_factory=dict)
    segments_total: int = 0
    segments_skipped: int = 0
    diagram: str | None = None
    processing_time_ms: float = 0.0


class ErrorResponse(BaseModel):
    error: str
    detail: str
