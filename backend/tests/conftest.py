"""Shared test fixtures."""

from __future__ import annotations

import pytest

from ventmap.engine.segments import Segment


# Reference batch: orthogonal and diagonal lines mixed
EXAMPLE_LINES = """\
0,9 -> 5,9
8,0 -> 0,8
9,4 -> 3,4
2,2 -> 2,1
7,0 -> 7,4
6,4 -> 2,0
0,9 -> 2,9
3,4 -> 1,4
0,0 -> 8,8
5,5 -> 8,2
"""

EXAMPLE_POINTS = [
    (0, 9, 5, 9),
    (8, 0, 0, 8),
    (9, 4, 3, 4),
    (2, 2, 2, 1),
    (7, 0, 7, 4),
    (6, 4, 2, 0),
    (0, 9, 2, 9),
    (3, 4, 1, 4),
    (0, 0, 8, 8),
    (5, 5, 8, 2),
]

# Axis-aligned lines only
EXAMPLE_DIAGRAM_AXIS = """\
.......1..
..1....1..
..1....1..
.......1..
.112111211
..........
..........
..........
..........
222111...."""

# Axis-aligned and 45° lines
EXAMPLE_DIAGRAM_DIAGONAL = """\
1.1....11.
.111...2..
..2.1.111.
...1.2.2..
.112313211
...1.2....
..1...1...
.1.....1..
1.......1.
222111...."""


@pytest.fixture
def example_segments() -> list[Segment]:
    return [Segment.from_points(*p) for p in EXAMPLE_POINTS]


@pytest.fixture
def example_lines() -> str:
    return EXAMPLE_LINES
