"""Kinematic metrics computed from an ordered sequence of samples."""
from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Optional, Sequence

import numpy as np

from .config import MotionConfig
from .domain import FileMetrics, Point
from .parser import parse_points

logger = logging.getLogger(__name__)


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two samples in (x, y, z)."""

    return math.sqrt((b.x - a.x) ** 2 + (b.y - a.y) ** 2 + (b.z - a.z) ** 2)


def compute_metrics(
    points: Sequence[Point],
    fps: float,
    file_name: str = "",
    skipped: int = 0,
) -> FileMetrics:
    """Derive duration, path length, speeds and displacement.

    Segments are taken between consecutive samples in the given order, not
    in frame order. A segment whose frame delta is zero or negative adds one
    to ``skipped`` and contributes neither path length nor speed, but later
    segments are still processed. Fewer than two points yields a record with
    every derived field at zero.
    """

    if len(points) < 2:
        return FileMetrics(file_name=file_name, points=len(points), skipped=skipped)

    frames = np.array([p.frame for p in points], dtype=float)
    coords = np.array([(p.x, p.y, p.z) for p in points], dtype=float)

    duration_sec = max(0.0, float(frames[-1] - frames[0]) / fps)

    delta_frames = np.diff(frames)
    forward = delta_frames > 0
    skipped += int(np.count_nonzero(~forward))

    segment_lengths = np.linalg.norm(np.diff(coords, axis=0), axis=1)[forward]
    total_path = float(segment_lengths.sum())
    if segment_lengths.size:
        speeds = segment_lengths / (delta_frames[forward] / fps)
        max_speed = float(speeds.max())
    else:
        max_speed = 0.0

    max_displacement = float(np.linalg.norm(coords - coords[0], axis=1).max())
    average_speed = total_path / duration_sec if duration_sec > 0 else 0.0

    return FileMetrics(
        file_name=file_name,
        points=len(points),
        skipped=skipped,
        duration_sec=duration_sec,
        average_speed=average_speed,
        max_speed=max_speed,
        max_displacement=max_displacement,
        total_path=total_path,
    )


def analyze_text(text: str | bytes, file_name: str, fps: float, encoding: str = "utf-8") -> FileMetrics:
    """Parse raw file content and compute its metrics."""

    if isinstance(text, bytes):
        text = text.decode(encoding, errors="replace")
    parsed = parse_points(text)
    return compute_metrics(parsed.points, fps, file_name=file_name, skipped=parsed.skipped)


class MotionAnalyzer:
    """Compute per-file motion metrics at a configured frame rate."""

    def __init__(self, config: Optional[MotionConfig] = None) -> None:
        self.config = config or MotionConfig()

    def analyze_text(self, text: str | bytes, file_name: str = "") -> FileMetrics:
        self.config.validate()
        return analyze_text(text, file_name, self.config.fps, encoding=self.config.encoding)

    def analyze_file(self, input_path: str | Path) -> FileMetrics:
        path = Path(input_path)
        metrics = self.analyze_text(path.read_bytes(), path.name)
        logger.info(
            "%s: %d points, %d skipped, avg speed %.3f",
            metrics.file_name,
            metrics.points,
            metrics.skipped,
            metrics.average_speed,
        )
        return metrics


__all__ = ["distance", "compute_metrics", "analyze_text", "MotionAnalyzer"]
