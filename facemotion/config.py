"""Configuration dataclasses and defaults for motion analysis."""
from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Tuple

from .domain import Group
from .errors import InvalidFrameRateError

DEFAULT_FPS: float = 29.999

DEFAULT_GROUPS: Tuple[Group, ...] = (
    Group(id="select-group", name="Select Group"),
    Group(id="control", name="Control"),
    Group(id="hinge", name="Hinge"),
    Group(id="modular", name="Modular"),
    Group(id="manual-flex", name="Manual Flex"),
)

# New files land here; it is left out of the group bar charts.
DEFAULT_GROUP_ID: str = DEFAULT_GROUPS[0].id


@dataclass(frozen=True)
class MotionConfig:
    """Configuration for parsing and metric computation."""

    fps: float = DEFAULT_FPS

    # joblib semantics: -1 uses all cores, 1 runs sequentially
    n_jobs: int = -1
    encoding: str = "utf-8"

    def validate(self) -> None:
        """Reject a frame rate that is not a finite positive number."""
        fps = self.fps
        if isinstance(fps, bool) or not isinstance(fps, numbers.Real):
            raise InvalidFrameRateError()
        if not math.isfinite(fps) or fps <= 0:
            raise InvalidFrameRateError()


@dataclass(frozen=True)
class PlotConfig:
    """Configuration for the group bar-chart figure."""

    figsize: tuple[float, float] = (10.0, 7.0)
    dpi: float | None = None
    color: str = "#2f6f8f"
    value_digits: int = 3
    tight_layout: bool = True
    show: bool = False
