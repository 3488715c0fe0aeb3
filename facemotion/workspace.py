"""Workspace state: grouping, ordering and a reducer over immutable snapshots.

Every operation returns new tuples of :class:`FileRecord`; nothing here
mutates its inputs. The UI (or CLI) holds a single :class:`WorkspaceState`
and replaces it with ``reduce(state, action)`` after each event.
"""
from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, replace
from typing import Iterable, Optional, Sequence, Tuple, Union

from .config import DEFAULT_FPS, DEFAULT_GROUP_ID, DEFAULT_GROUPS, MotionConfig
from .domain import METRIC_FIELDS, FileMetrics, FileRecord, Group
from .errors import FPS_ERROR_MESSAGE, InvalidFrameRateError

logger = logging.getLogger(__name__)

Records = Tuple[FileRecord, ...]


def make_record_id(file_name: str, index: int) -> str:
    return f"{file_name}-{index}-{uuid.uuid4().hex[:8]}"


def normalize_group_orders(records: Sequence[FileRecord], group_id: str) -> Records:
    """Renumber one group's members to 0..n-1, keeping their relative order."""

    members = sorted((r for r in records if r.group_id == group_id), key=lambda r: r.order)
    new_order = {r.id: i for i, r in enumerate(members)}
    return tuple(
        replace(r, order=new_order[r.id]) if r.group_id == group_id else r for r in records
    )


def assign_group(records: Sequence[FileRecord], file_id: str, group_id: str) -> Records:
    """Move a record to the end of ``group_id`` and compact both groups.

    Unknown ids and moves into the record's current group are no-ops.
    """

    target = next((r for r in records if r.id == file_id), None)
    if target is None or target.group_id == group_id:
        return tuple(records)

    destination_order = sum(1 for r in records if r.group_id == group_id)
    moved = tuple(
        replace(r, group_id=group_id, order=destination_order) if r.id == file_id else r
        for r in records
    )
    moved = normalize_group_orders(moved, target.group_id)
    moved = normalize_group_orders(moved, group_id)
    logger.debug("Moved %s from %s to %s", target.file_name, target.group_id, group_id)
    return moved


def append_results(
    records: Sequence[FileRecord],
    metrics: Iterable[FileMetrics],
    group_id: str = DEFAULT_GROUP_ID,
) -> Records:
    """Append freshly parsed files to the end of ``group_id``."""

    offset = sum(1 for r in records if r.group_id == group_id)
    appended = tuple(
        FileRecord(
            id=make_record_id(m.file_name, index),
            metrics=m,
            group_id=group_id,
            order=offset + index,
        )
        for index, m in enumerate(metrics)
    )
    return tuple(records) + appended


def organize(records: Sequence[FileRecord], groups: Sequence[Group] = DEFAULT_GROUPS) -> Records:
    """Display order: by group position, then by order within the group."""

    group_index = {g.id: i for i, g in enumerate(groups)}
    fallback = len(groups)
    return tuple(sorted(records, key=lambda r: (group_index.get(r.group_id, fallback), r.order)))


# ---------------------------------------------------------------------------
# Reducer


@dataclass(frozen=True)
class SetFps:
    fps: float


@dataclass(frozen=True)
class FilesParsed:
    metrics: Tuple[FileMetrics, ...]


@dataclass(frozen=True)
class ParseFailed:
    message: str


@dataclass(frozen=True)
class AssignGroup:
    file_id: str
    group_id: str


@dataclass(frozen=True)
class ToggleSort:
    key: str


@dataclass(frozen=True)
class ClearAll:
    pass


Action = Union[SetFps, FilesParsed, ParseFailed, AssignGroup, ToggleSort, ClearAll]


@dataclass(frozen=True)
class WorkspaceState:
    """Snapshot of everything the results view renders."""

    fps: float = DEFAULT_FPS
    records: Records = ()
    groups: Tuple[Group, ...] = DEFAULT_GROUPS
    sort_key: str = "average_speed"
    sort_dir: str = "desc"
    error: Optional[str] = None

    @property
    def default_group_id(self) -> str:
        return self.groups[0].id if self.groups else DEFAULT_GROUP_ID

    def group_ids(self) -> Tuple[str, ...]:
        return tuple(g.id for g in self.groups)


def reduce(state: WorkspaceState, action: Action) -> WorkspaceState:
    """Return the state that follows ``action``; ``state`` is left untouched."""

    if isinstance(action, SetFps):
        # invalid rates are kept so the input can still be edited
        try:
            MotionConfig(fps=action.fps).validate()
        except InvalidFrameRateError as exc:
            return replace(state, fps=action.fps, error=str(exc))
        error = None if state.error == FPS_ERROR_MESSAGE else state.error
        return replace(state, fps=action.fps, error=error)

    if isinstance(action, FilesParsed):
        records = append_results(state.records, action.metrics, state.default_group_id)
        return replace(state, records=records, error=None)

    if isinstance(action, ParseFailed):
        return replace(state, error=action.message)

    if isinstance(action, AssignGroup):
        if action.group_id not in state.group_ids():
            raise ValueError(f"Unknown group '{action.group_id}'.")
        return replace(state, records=assign_group(state.records, action.file_id, action.group_id))

    if isinstance(action, ToggleSort):
        if action.key not in METRIC_FIELDS:
            raise ValueError(f"Unknown metric field '{action.key}'.")
        if action.key == state.sort_key:
            return replace(state, sort_dir="asc" if state.sort_dir == "desc" else "desc")
        return replace(state, sort_key=action.key, sort_dir="desc")

    if isinstance(action, ClearAll):
        return replace(state, records=())

    raise TypeError(f"Unsupported action: {type(action).__name__}")


__all__ = [
    "normalize_group_orders",
    "assign_group",
    "append_results",
    "organize",
    "SetFps",
    "FilesParsed",
    "ParseFailed",
    "AssignGroup",
    "ToggleSort",
    "ClearAll",
    "WorkspaceState",
    "reduce",
]
