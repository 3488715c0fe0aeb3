"""Tokenise ``frame x y z`` text into motion samples."""
from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .domain import Point

logger = logging.getLogger(__name__)

_LINE_BREAK = re.compile(r"\r?\n")

REQUIRED_TOKENS = 4


@dataclass(frozen=True)
class NumberParse:
    """Outcome of coercing one token to a number."""

    ok: bool
    value: float = 0.0


@dataclass(frozen=True)
class LineParse:
    """Outcome of parsing one line.

    ``reason`` is ``None`` for a valid point, otherwise one of ``"empty"``,
    ``"too_few_tokens"`` or ``"non_numeric"``.
    """

    point: Optional[Point] = None
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.point is not None


@dataclass(frozen=True)
class ParsedText:
    """Valid points in file order plus the count of rejected lines."""

    points: Tuple[Point, ...]
    skipped: int


def parse_number(token: str) -> NumberParse:
    """Parse a token as a finite decimal number.

    Rules:
    - anything ``float()`` accepts, e.g. ``"12"``, ``"-0.5"``, ``"1e3"``
    - digit-group underscores (``"1_000"``) are rejected
    - ``nan`` and infinities are rejected
    """

    cleaned = token.strip()
    if not cleaned or "_" in cleaned:
        return NumberParse(ok=False)
    try:
        value = float(cleaned)
    except ValueError:
        return NumberParse(ok=False)
    if not math.isfinite(value):
        return NumberParse(ok=False)
    return NumberParse(ok=True, value=value)


def parse_line(line: str) -> LineParse:
    stripped = line.strip()
    if not stripped:
        return LineParse(reason="empty")

    parts = stripped.split()
    if len(parts) < REQUIRED_TOKENS:
        return LineParse(reason="too_few_tokens")

    values = []
    for token in parts[:REQUIRED_TOKENS]:
        parsed = parse_number(token)
        if not parsed.ok:
            return LineParse(reason="non_numeric")
        values.append(parsed.value)

    frame, x, y, z = values
    return LineParse(point=Point(frame=frame, x=x, y=y, z=z))


def split_lines(text: str) -> List[str]:
    return _LINE_BREAK.split(text)


def parse_points(text: str) -> ParsedText:
    """Parse every line of ``text``; blank lines are ignored, not counted."""

    points: List[Point] = []
    skipped = 0
    for line in split_lines(text):
        result = parse_line(line)
        if result.ok:
            points.append(result.point)
        elif result.reason != "empty":
            skipped += 1

    logger.debug("Parsed %d points, skipped %d lines", len(points), skipped)
    return ParsedText(points=tuple(points), skipped=skipped)


__all__ = [
    "NumberParse",
    "LineParse",
    "ParsedText",
    "parse_number",
    "parse_line",
    "split_lines",
    "parse_points",
]
