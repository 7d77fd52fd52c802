"""Density query configuration."""

from __future__ import annotations

from dataclasses import dataclass

from ventmap.engine.grid import counter_dtype


@dataclass
class DensityConfig:
    """Controls one overlap-density query."""

    # Report cells covered by at least this many segments
    threshold: int = 2

    # False: horizontal/vertical only (others skipped).
    # True: also exact 45° diagonals (others rejected).
    allow_diagonal: bool = False

    # Unsigned numpy dtype backing each cell counter
    counter_dtype: str = "uint32"

    # Attach the text diagram of the whole grid to the report
    render_diagram: bool = False
    empty_cell: str = "."

    def __post_init__(self) -> None:
        if self.threshold < 0:
            raise ValueError(f"threshold must be non-negative, got {self.threshold}")
        counter_dtype(self.counter_dtype)
