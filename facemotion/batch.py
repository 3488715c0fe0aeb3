"""Concurrent ingestion of a batch of motion files."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, List, Optional, Sequence

from joblib import Parallel, delayed

from .config import MotionConfig
from .domain import FileMetrics
from .errors import BatchReadError
from .metrics import analyze_text

logger = logging.getLogger(__name__)


def _read_and_analyze(path: Path, fps: float, encoding: str) -> FileMetrics:
    return analyze_text(path.read_bytes(), path.name, fps, encoding=encoding)


def analyze_files(
    paths: Sequence[str | Path],
    config: Optional[MotionConfig] = None,
    n_jobs: Optional[int] = None,
) -> List[FileMetrics]:
    """Parse every file concurrently and return metrics in input order.

    The frame rate is validated before any file is touched. If any file
    cannot be read the whole batch fails with :class:`BatchReadError`; no
    partial results are returned.
    """

    cfg = config or MotionConfig()
    cfg.validate()
    if not paths:
        return []

    jobs = cfg.n_jobs if n_jobs is None else n_jobs
    resolved = [Path(p) for p in paths]
    logger.info("Analyzing %d file(s) at %.3f fps (n_jobs=%s)", len(resolved), cfg.fps, jobs)

    try:
        results = Parallel(n_jobs=jobs, prefer="threads")(
            delayed(_read_and_analyze)(path, cfg.fps, cfg.encoding) for path in resolved
        )
    except OSError as exc:
        logger.error("Batch read failed: %s", exc)
        raise BatchReadError() from exc

    return list(results)


class BatchRunner:
    """Runs batches and notifies registered observers.

    Example:
        >>> runner = BatchRunner(MotionConfig(fps=30.0))
        >>> runner.register_observer(ConsoleReporter())
        >>> metrics = runner.run(["a.txt", "b.txt"])
    """

    def __init__(self, config: Optional[MotionConfig] = None) -> None:
        self.config = config or MotionConfig()
        self._observers: List[Any] = []

    def register_observer(self, observer: Any) -> None:
        if observer not in self._observers:
            self._observers.append(observer)

    def unregister_observer(self, observer: Any) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def _notify(self, hook: str, *args: Any) -> None:
        for observer in self._observers:
            try:
                getattr(observer, hook)(*args)
            except Exception as e:
                logger.warning("Observer %s failed on %s: %s", type(observer).__name__, hook, e)

    def run(self, paths: Sequence[str | Path]) -> List[FileMetrics]:
        self._notify("on_batch_start", self.config, list(paths))
        try:
            results = analyze_files(paths, self.config)
        except Exception as e:
            self._notify("on_batch_error", self.config, e)
            raise
        self._notify("on_batch_complete", self.config, results)
        return results


__all__ = ["analyze_files", "BatchRunner"]
