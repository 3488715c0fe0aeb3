"""Motion metrics for face tracking coordinate files."""

from .config import DEFAULT_FPS, DEFAULT_GROUPS, MotionConfig, PlotConfig
from .domain import FileMetrics, FileRecord, Group, Point
from .errors import BatchReadError, FaceMotionError, InvalidFrameRateError
from .parser import parse_points
from .metrics import MotionAnalyzer, analyze_text, compute_metrics
from .batch import BatchRunner, analyze_files
from .workspace import WorkspaceState, reduce
from .analyzer import SummaryPlotter

__all__ = [
    "DEFAULT_FPS",
    "DEFAULT_GROUPS",
    "MotionConfig",
    "PlotConfig",
    "FileMetrics",
    "FileRecord",
    "Group",
    "Point",
    "BatchReadError",
    "FaceMotionError",
    "InvalidFrameRateError",
    "parse_points",
    "MotionAnalyzer",
    "analyze_text",
    "compute_metrics",
    "BatchRunner",
    "analyze_files",
    "WorkspaceState",
    "reduce",
    "SummaryPlotter",
]
