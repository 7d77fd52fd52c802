"""Segment parser — ``x1,y1 -> x2,y2`` records, one per line.

Converts raw text → list[Segment]. Blank lines are ignored.
"""

from __future__ import annotations

import logging
import re

from ventmap.engine.errors import ParseError
from ventmap.engine.segments import Coordinate, Segment

logger = logging.getLogger(__name__)

_COORD_RE = re.compile(r"^\s*([0-9]+)\s*,\s*([0-9]+)\s*$")
_ARROW = "->"


def parse_coordinate(text: str) -> Coordinate:
    """Parse ``"x,y"`` into a Coordinate."""
    match = _COORD_RE.match(text)
    if not match:
        if "," not in text:
            raise ParseError(f"no comma found in coordinate {text.strip()!r}")
        raise ParseError(f"coordinate {text.strip()!r} is not two non-negative integers")
    return Coordinate(int(match.group(1)), int(match.group(2)))


def parse_segment(text: str) -> Segment:
    """Parse ``"x1,y1 -> x2,y2"`` into a Segment."""
    parts = text.split(_ARROW)
    if len(parts) != 2:
        raise ParseError(f"expected exactly one {_ARROW!r} operator")
    start_text, end_text = parts
    try:
        start = parse_coordinate(start_text)
    except ParseError as e:
        raise ParseError(f"failed to parse start coordinate: {e}") from e
    try:
        end = parse_coordinate(end_text)
    except ParseError as e:
        raise ParseError(f"failed to parse end coordinate: {e}") from e
    return Segment(start, end)


def parse_segments(text: str) -> list[Segment]:
    """Parse a whole document. Errors carry the 1-based line number."""
    segments: list[Segment] = []
    for line_number, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line:
            continue
        try:
            segments.append(parse_segment(line))
        except ParseError as e:
            raise ParseError(str(e), line_number=line_number, line=line) from e

    logger.debug("Parsed %d segments", len(segments))
    return segments
