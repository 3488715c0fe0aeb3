"""Bar-chart summaries of per-group motion metrics."""
from __future__ import annotations

from importlib import import_module
from pathlib import Path
from typing import Sequence

from .config import DEFAULT_GROUPS, PlotConfig
from .domain import FileRecord, Group
from .summary import CHART_METRICS, GroupSpeedStats, group_speed_stats


class SummaryPlotter:
    """Render one horizontal bar panel per chart metric."""

    def __init__(self, config: PlotConfig | None = None) -> None:
        self.config = config or PlotConfig()

    def plot_stats(self, stats: GroupSpeedStats, output_path: str | Path | None = None) -> Path:
        cfg = self.config

        try:
            matplotlib = import_module("matplotlib")
            if not cfg.show:
                matplotlib.use("Agg")
            plt = import_module("matplotlib.pyplot")
        except ModuleNotFoundError as exc:  # pragma: no cover - dependency is optional in CI
            raise ModuleNotFoundError(
                "matplotlib is required for plotting; install via `pip install matplotlib`."
            ) from exc

        fig, axes = plt.subplots(2, 2, figsize=cfg.figsize, dpi=cfg.dpi)
        labels = [row.name for row in stats.rows]
        positions = list(range(len(labels)))

        for ax, (name, title, unit) in zip(axes.flat, CHART_METRICS):
            values = [getattr(row, name) for row in stats.rows]
            ax.barh(positions, [v or 0.0 for v in values], color=cfg.color)
            ax.set_yticks(positions)
            ax.set_yticklabels(labels)
            ax.invert_yaxis()
            ax.set_title(title)
            ax.set_xlabel(unit)
            if stats.maxima[name] > 0:
                ax.set_xlim(0, stats.maxima[name] * 1.15)
            for pos, value in zip(positions, values):
                text = "—" if value is None else f"{value:.{cfg.value_digits}f}"
                ax.text(value or 0.0, pos, f" {text}", va="center")

        if cfg.tight_layout:
            plt.tight_layout()

        output_path = Path(output_path or "group_summary.png")
        fig.savefig(output_path)
        if cfg.show:  # pragma: no cover - UI-driven choice
            plt.show()
        plt.close(fig)
        return output_path

    def plot(
        self,
        records: Sequence[FileRecord],
        output_path: str | Path | None = None,
        groups: Sequence[Group] = DEFAULT_GROUPS,
    ) -> Path:
        """Compute group statistics for ``records`` and plot them."""

        return self.plot_stats(group_speed_stats(records, groups), output_path)


__all__ = ["SummaryPlotter"]
