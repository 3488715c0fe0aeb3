"""Command line interface for motion file analysis."""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Sequence, Tuple

from .analyzer import SummaryPlotter
from .batch import BatchRunner
from .config import DEFAULT_FPS, MotionConfig, PlotConfig
from .domain import METRIC_FIELDS
from .errors import FaceMotionError
from .logging_config import setup_logging
from .observers import ConsoleReporter
from .report import render_report
from .summary import group_speed_stats, grouped_tables, records_to_frame
from .workspace import AssignGroup, FilesParsed, ToggleSort, WorkspaceState, reduce


def _add_batch_arguments(sub: argparse.ArgumentParser) -> None:
    sub.add_argument("files", nargs="+", help="Text files with 'frame x y z' per line")
    sub.add_argument("--fps", type=float, default=DEFAULT_FPS, help="Frame rate (default: 29.999)")
    sub.add_argument("--jobs", type=int, default=-1, help="Parallel jobs (-1 uses all cores)")
    sub.add_argument(
        "--assign",
        action="append",
        default=[],
        metavar="FILE=GROUP",
        help="Assign a file to a group by group id or name; may be repeated",
    )
    sub.add_argument("--quiet", action="store_true", help="Suppress batch progress output")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Motion metrics for face tracking coordinates")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    parser.add_argument("--log-file", help="Also write log messages to this file")
    sub = parser.add_subparsers(dest="command", required=True)

    analyze = sub.add_parser("analyze", help="Print per-file metrics grouped into tables")
    _add_batch_arguments(analyze)
    analyze.add_argument(
        "--sort",
        default="average_speed",
        choices=list(METRIC_FIELDS),
        help="Column to sort each group table by",
    )
    analyze.add_argument("--asc", action="store_true", help="Sort ascending instead of descending")
    analyze.add_argument("--output", help="Optional TSV path for the per-file metrics")

    plot = sub.add_parser("plot", help="Write group bar charts to an image file")
    _add_batch_arguments(plot)
    plot.add_argument("output", help="Path to write the chart (png or pdf)")
    plot.add_argument(
        "--figsize",
        nargs=2,
        type=float,
        metavar=("WIDTH", "HEIGHT"),
        default=(10.0, 7.0),
        help="Figure size in inches (width height)",
    )
    plot.add_argument("--dpi", type=float, default=None, help="Optional DPI override for the figure")

    return parser


def parse_assignments(values: Sequence[str]) -> List[Tuple[str, str]]:
    pairs = []
    for value in values:
        file_part, sep, group_part = value.rpartition("=")
        if not sep or not file_part or not group_part:
            raise ValueError(f"Expected FILE=GROUP, got '{value}'.")
        pairs.append((Path(file_part).name, group_part.strip()))
    return pairs


def _resolve_group(state: WorkspaceState, group: str) -> str:
    wanted = group.casefold()
    for g in state.groups:
        if wanted in (g.id.casefold(), g.name.casefold()):
            return g.id
    raise ValueError(f"Unknown group '{group}'.")


def load_workspace(args: argparse.Namespace) -> WorkspaceState:
    """Run the batch, then replay group assignments through the reducer."""

    config = MotionConfig(fps=args.fps, n_jobs=args.jobs)
    runner = BatchRunner(config)
    if not args.quiet:
        runner.register_observer(ConsoleReporter(verbose=False))

    state = WorkspaceState(fps=args.fps)
    state = reduce(state, FilesParsed(tuple(runner.run(args.files))))

    for file_name, group in parse_assignments(args.assign):
        group_id = _resolve_group(state, group)
        matches = [r for r in state.records if r.file_name == file_name]
        if not matches:
            raise ValueError(f"No analyzed file named '{file_name}'.")
        for record in matches:
            state = reduce(state, AssignGroup(record.id, group_id))
    return state


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(getattr(logging, args.log_level), args.log_file)

    try:
        state = load_workspace(args)
    except (FaceMotionError, ValueError) as exc:
        parser.exit(2, f"error: {exc}\n")

    if args.command == "analyze":
        if args.sort != state.sort_key:
            state = reduce(state, ToggleSort(args.sort))
        if args.asc:
            state = reduce(state, ToggleSort(args.sort))
        tables = grouped_tables(state.records, state.groups, state.sort_key, state.sort_dir)
        print(render_report(tables, group_speed_stats(state.records, state.groups)))
        if args.output:
            records_to_frame(state.records, state.groups).to_csv(args.output, sep="\t", index=False)
        return

    if args.command == "plot":
        cfg = PlotConfig(figsize=tuple(args.figsize), dpi=args.dpi)
        out = SummaryPlotter(cfg).plot(state.records, args.output, state.groups)
        print(f"Wrote {out}")
        return


if __name__ == "__main__":
    main()
