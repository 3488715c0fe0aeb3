"""Observers notified while a batch of files is analysed."""
from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Sequence

from .config import MotionConfig
from .domain import FileMetrics


class BatchObserver(ABC):
    """Receives batch lifecycle notifications from :class:`BatchRunner`."""

    @abstractmethod
    def on_batch_start(self, config: MotionConfig, paths: Sequence[str | Path]):
        pass

    @abstractmethod
    def on_batch_complete(self, config: MotionConfig, results: List[FileMetrics]):
        pass

    @abstractmethod
    def on_batch_error(self, config: MotionConfig, error: Exception):
        pass


class ConsoleReporter(BatchObserver):
    """Reports batch progress to the console."""

    def __init__(self, verbose: bool = True):
        self.verbose = verbose

    def on_batch_start(self, config: MotionConfig, paths: Sequence[str | Path]):
        print(f"Parsing {len(paths)} file(s) at {config.fps} fps")
        if self.verbose:
            for path in paths:
                print(f"   - {Path(path).name}")

    def on_batch_complete(self, config: MotionConfig, results: List[FileMetrics]):
        total_points = sum(m.points for m in results)
        total_skipped = sum(m.skipped for m in results)
        print(f"Parsed {len(results)} file(s): {total_points} points, {total_skipped} skipped")

    def on_batch_error(self, config: MotionConfig, error: Exception):
        print(f"Error: {error}")


class ResultCollector(BatchObserver):
    """Keeps every completed batch in memory."""

    def __init__(self):
        self.batches: List[List[FileMetrics]] = []
        self.errors: List[Exception] = []

    def on_batch_start(self, config: MotionConfig, paths: Sequence[str | Path]):
        pass

    def on_batch_complete(self, config: MotionConfig, results: List[FileMetrics]):
        self.batches.append(list(results))

    def on_batch_error(self, config: MotionConfig, error: Exception):
        self.errors.append(error)


__all__ = ["BatchObserver", "ConsoleReporter", "ResultCollector"]
