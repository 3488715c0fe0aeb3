"""Plain-text rendering of group tables and bar charts."""
from __future__ import annotations

from typing import List, Optional, Sequence

import pandas as pd

from .domain import METRIC_FIELDS
from .summary import (
    CHART_METRICS,
    COLUMN_LABELS,
    GroupSpeedStats,
    GroupTable,
    bar_width,
)

INTEGER_FIELDS = ("points", "skipped")


def format_value(value: Optional[float], digits: int = 3) -> str:
    if value is None:
        return "—"
    return f"{value:.{digits}f}"


def render_group_table(table: GroupTable, digits: int = 3) -> str:
    rows = []
    for record in table.items:
        row = {}
        for name in METRIC_FIELDS:
            value = record.value(name)
            if name == "file_name" or name in INTEGER_FIELDS:
                row[COLUMN_LABELS[name]] = value
            else:
                row[COLUMN_LABELS[name]] = format_value(value, digits)
        rows.append(row)

    if table.averages is not None:
        footer = {COLUMN_LABELS["file_name"]: "Group Average"}
        for name, value in table.averages.items():
            footer[COLUMN_LABELS[name]] = format_value(value, digits)
        rows.append(footer)

    frame = pd.DataFrame(rows, columns=[COLUMN_LABELS[name] for name in METRIC_FIELDS])
    header = f"{table.group.name} ({len(table.items)} file(s))"
    return f"{header}\n{frame.to_string(index=False)}"


def render_text_bars(stats: GroupSpeedStats, width: int = 30, digits: int = 3) -> str:
    lines: List[str] = []
    label_width = max((len(row.name) for row in stats.rows), default=0)
    for name, title, unit in CHART_METRICS:
        lines.append(f"{title} ({unit})")
        for row in stats.rows:
            value = getattr(row, name)
            filled = round(bar_width(value, stats.maxima[name]) / 100.0 * width)
            bar = "#" * filled + "." * (width - filled)
            lines.append(f"  {row.name:<{label_width}}  {bar}  {format_value(value, digits)}")
        lines.append("")
    return "\n".join(lines).rstrip("\n")


def render_report(tables: Sequence[GroupTable], stats: GroupSpeedStats, digits: int = 3) -> str:
    if not tables:
        return "No files analyzed."
    sections = [render_group_table(t, digits) for t in tables]
    sections.append(render_text_bars(stats, digits=digits))
    return "\n\n".join(sections)


__all__ = ["format_value", "render_group_table", "render_text_bars", "render_report"]
