"""Sorting, per-group averages and bar-chart statistics."""
from __future__ import annotations

from dataclasses import dataclass
from statistics import mean
from typing import Dict, List, Optional, Sequence, Tuple

import pandas as pd

from .config import DEFAULT_GROUP_ID, DEFAULT_GROUPS
from .domain import AVERAGED_FIELDS, METRIC_FIELDS, FileRecord, Group

SORT_DIRECTIONS = ("asc", "desc")

# Metrics shown in the group bar charts: (field, title, unit).
CHART_METRICS: Tuple[Tuple[str, str, str], ...] = (
    ("average_speed", "Average Speed", "px/s"),
    ("max_speed", "Max Speed", "px/s"),
    ("max_displacement", "Max Displacement", "px"),
    ("total_path", "Total Path", "px"),
)

COLUMN_LABELS: Dict[str, str] = {
    "file_name": "File",
    "points": "Points",
    "duration_sec": "Duration (s)",
    "average_speed": "Avg Speed (px/s)",
    "max_speed": "Max Speed (px/s)",
    "max_displacement": "Max Disp (px)",
    "total_path": "Total Path (px)",
    "skipped": "Skipped",
}


def sort_records(records: Sequence[FileRecord], key: str, direction: str = "desc") -> List[FileRecord]:
    """Sort by a single metric field; ties keep no particular order."""

    if key not in METRIC_FIELDS:
        raise ValueError(f"Unknown metric field '{key}'.")
    if direction not in SORT_DIRECTIONS:
        raise ValueError(f"Sort direction must be one of {SORT_DIRECTIONS}, got '{direction}'.")

    def sort_value(record: FileRecord):
        value = record.value(key)
        return value.casefold() if isinstance(value, str) else value

    return sorted(records, key=sort_value, reverse=direction == "desc")


def group_averages(records: Sequence[FileRecord]) -> Optional[Dict[str, float]]:
    if not records:
        return None
    return {name: float(mean(r.value(name) for r in records)) for name in AVERAGED_FIELDS}


@dataclass(frozen=True)
class GroupTable:
    """Sorted rows and footer averages for one group."""

    group: Group
    items: Tuple[FileRecord, ...]
    averages: Optional[Dict[str, float]]


def grouped_tables(
    records: Sequence[FileRecord],
    groups: Sequence[Group] = DEFAULT_GROUPS,
    key: str = "average_speed",
    direction: str = "desc",
) -> List[GroupTable]:
    """One table per group that has at least one file, in group order."""

    tables = []
    for group in groups:
        members = [r for r in records if r.group_id == group.id]
        if not members:
            continue
        items = tuple(sort_records(members, key, direction))
        tables.append(GroupTable(group=group, items=items, averages=group_averages(items)))
    return tables


@dataclass(frozen=True)
class GroupSpeedRow:
    group_id: str
    name: str
    count: int
    average_speed: Optional[float]
    max_speed: Optional[float]
    max_displacement: Optional[float]
    total_path: Optional[float]


@dataclass(frozen=True)
class GroupSpeedStats:
    """Per-group means plus the largest mean of each metric (floored at 0)."""

    rows: Tuple[GroupSpeedRow, ...]
    maxima: Dict[str, float]


def group_speed_stats(
    records: Sequence[FileRecord],
    groups: Sequence[Group] = DEFAULT_GROUPS,
    excluded_group_id: str = DEFAULT_GROUP_ID,
) -> GroupSpeedStats:
    rows = []
    for group in groups:
        if group.id == excluded_group_id:
            continue
        members = [r for r in records if r.group_id == group.id]
        means = {
            name: (float(mean(r.value(name) for r in members)) if members else None)
            for name, _, _ in CHART_METRICS
        }
        rows.append(GroupSpeedRow(group_id=group.id, name=group.name, count=len(members), **means))

    maxima = {
        name: max([getattr(row, name) or 0.0 for row in rows] + [0.0])
        for name, _, _ in CHART_METRICS
    }
    return GroupSpeedStats(rows=tuple(rows), maxima=maxima)


def bar_width(value: Optional[float], maximum: float) -> float:
    """Bar length as a percentage of the largest group value."""

    if value is None or maximum <= 0:
        return 0.0
    return value / maximum * 100.0


def records_to_frame(records: Sequence[FileRecord], groups: Sequence[Group] = DEFAULT_GROUPS) -> pd.DataFrame:
    """Tabulate records with their group name, one row per file."""

    names = {g.id: g.name for g in groups}
    rows = [
        {
            "group": names.get(r.group_id, r.group_id),
            "order": r.order,
            **{name: r.value(name) for name in METRIC_FIELDS},
        }
        for r in records
    ]
    return pd.DataFrame(rows, columns=["group", "order", *METRIC_FIELDS])


__all__ = [
    "CHART_METRICS",
    "COLUMN_LABELS",
    "sort_records",
    "group_averages",
    "GroupTable",
    "grouped_tables",
    "GroupSpeedRow",
    "GroupSpeedStats",
    "group_speed_stats",
    "bar_width",
    "records_to_frame",
]
