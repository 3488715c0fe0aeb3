"""Data structures for motion samples, per-file metrics and groups.

These classes carry only data. Parsing, metric computation and the
workspace bookkeeping live in their own modules and produce new instances
instead of mutating existing ones.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Point:
    """Single position sample at a frame index."""

    frame: float
    x: float
    y: float
    z: float


@dataclass(frozen=True)
class FileMetrics:
    """Movement metrics derived once per input file."""

    file_name: str
    points: int
    skipped: int
    duration_sec: float = 0.0
    average_speed: float = 0.0
    max_speed: float = 0.0
    max_displacement: float = 0.0
    total_path: float = 0.0


@dataclass(frozen=True)
class Group:
    """Classification bucket a file can be assigned to."""

    id: str
    name: str


@dataclass(frozen=True)
class FileRecord:
    """A file's metrics plus its position in the organiser."""

    id: str
    metrics: FileMetrics
    group_id: str
    order: int

    @property
    def file_name(self) -> str:
        return self.metrics.file_name

    def value(self, key: str) -> float | int | str:
        if key not in METRIC_FIELDS:
            raise ValueError(f"Unknown metric field '{key}'.")
        return getattr(self.metrics, key)


METRIC_FIELDS: Tuple[str, ...] = (
    "file_name",
    "points",
    "skipped",
    "duration_sec",
    "average_speed",
    "max_speed",
    "max_displacement",
    "total_path",
)

# Fields averaged in the per-group table footer.
AVERAGED_FIELDS: Tuple[str, ...] = (
    "points",
    "duration_sec",
    "average_speed",
    "max_speed",
    "max_displacement",
    "total_path",
    "skipped",
)
