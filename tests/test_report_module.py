from facemotion.report import format_value, render_group_table, render_report, render_text_bars
from facemotion.summary import group_speed_stats, grouped_tables
from facemotion.workspace import AssignGroup, FilesParsed, WorkspaceState, reduce

from helpers import make_metrics


def _state():
    state = reduce(
        WorkspaceState(),
        FilesParsed((make_metrics("one.txt", average_speed=12.5), make_metrics("two.txt", average_speed=2.5))),
    )
    return reduce(state, AssignGroup(state.records[0].id, "hinge"))


def test_format_value():
    assert format_value(1.23456) == "1.235"
    assert format_value(None) == "—"


def test_group_table_has_average_footer():
    state = _state()
    table = grouped_tables(state.records, state.groups)[1]

    text = render_group_table(table)

    assert text.startswith("Hinge (1 file(s))")
    assert "one.txt" in text
    assert "Group Average" in text
    assert "12.500" in text


def test_text_bars_mark_empty_groups():
    state = _state()
    text = render_text_bars(group_speed_stats(state.records, state.groups), width=10)

    assert "Average Speed (px/s)" in text
    assert "##########" in text
    assert "—" in text


def test_report_without_files():
    assert render_report([], group_speed_stats(())) == "No files analyzed."
