"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class OverlapRequest(BaseModel):
    lines: str = Field(..., description="Segment records, one 'x1,y1 -> x2,y2' per line")
    allow_diagonal: bool = Field(
        default=False,
        description="Count 45° diagonals too (other slopes are rejected)",
    )
    threshold: int | None = Field(
        default=None,
        ge=0,
        description="Minimum overlap count to report (defaults to the server setting)",
    )
    render: bool = Field(default=False, description="Include the text diagram of the grid")
