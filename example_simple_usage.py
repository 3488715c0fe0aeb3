#!/usr/bin/env python3
"""
Simple usage examples for motion metrics.

Writes two small synthetic capture files, analyses them and prints the
grouped tables the CLI would show.
"""

import tempfile
from pathlib import Path

from facemotion import MotionConfig, WorkspaceState, analyze_files, reduce
from facemotion.report import render_report
from facemotion.summary import group_speed_stats, grouped_tables
from facemotion.workspace import AssignGroup, FilesParsed


def write_samples(directory: Path) -> list[Path]:
    slow = directory / "slow.txt"
    slow.write_text("\n".join(f"{i} {i} 0 0" for i in range(60)), encoding="utf-8")
    fast = directory / "fast.txt"
    fast.write_text("\n".join(f"{i} {5 * i} {i} 0" for i in range(60)), encoding="utf-8")
    return [slow, fast]


def example_1_minimal(paths):
    """Per-file metrics only."""
    print("=" * 60)
    print("Example 1: Per-file metrics")
    print("=" * 60)

    for m in analyze_files(paths, MotionConfig(fps=29.999)):
        print(f"{m.file_name}: avg {m.average_speed:.3f} px/s, max {m.max_speed:.3f} px/s")


def example_2_groups(paths):
    """Assign files to groups and print group tables."""
    print("\n" + "=" * 60)
    print("Example 2: Groups")
    print("=" * 60)

    state = reduce(WorkspaceState(), FilesParsed(tuple(analyze_files(paths))))
    state = reduce(state, AssignGroup(state.records[0].id, "control"))
    state = reduce(state, AssignGroup(state.records[1].id, "hinge"))

    tables = grouped_tables(state.records, state.groups, state.sort_key, state.sort_dir)
    print(render_report(tables, group_speed_stats(state.records, state.groups)))


if __name__ == "__main__":
    with tempfile.TemporaryDirectory() as tmp:
        files = write_samples(Path(tmp))
        example_1_minimal(files)
        example_2_groups(files)
