"""Text rendering of overlap grids.

Adapted from the ASCII grid helpers: one text row per grid row, zero cells
drawn with ``empty``, covered cells with their count.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

if TYPE_CHECKING:
    from ventmap.engine.grid import DenseGrid

# Counts that do not fit in one character.
_OVERFLOW_GLYPH = "#"


def _glyph(count: int, empty: str) -> str:
    if count == 0:
        return empty
    if count > 9:
        return _OVERFLOW_GLYPH
    return str(count)


def grid_to_text(
    counts: NDArray[np.unsignedinteger],
    empty: str = ".",
    sep: str = "",
) -> str:
    """Convert a (height, width) count array to text.

    Example:
        >>> grid_to_text(np.array([[0, 1], [2, 0]]))
        '.1\\n2.'
    """
    rows = []
    for row in counts.tolist():
        rows.append(sep.join(_glyph(int(c), empty) for c in row))
    return "\n".join(rows)


def render_grid(grid: DenseGrid, empty: str = ".") -> str:
    """Diagram of every cell in ``grid``. Leaves the grid usable."""
    return grid_to_text(grid.as_array(), empty=empty)


def grid_histogram(counts: NDArray[np.unsignedinteger]) -> dict[int, int]:
    """Number of cells per non-zero overlap count."""
    values, freq = np.unique(np.asarray(counts), return_counts=True)
    return {int(v): int(n) for v, n in zip(values, freq) if v > 0}
