from fractions import Fraction

import numpy as np
import pytest

from facemotion.config import MotionConfig
from facemotion.domain import Point
from facemotion.errors import InvalidFrameRateError
from facemotion.metrics import MotionAnalyzer, analyze_text, compute_metrics, distance


def test_reference_two_point_file():
    metrics = analyze_text("0 0 0 0\n30 0 0 90\n", "ref.txt", fps=30.0)

    assert metrics.file_name == "ref.txt"
    assert metrics.points == 2
    assert metrics.skipped == 0
    assert metrics.duration_sec == pytest.approx(1.0)
    assert metrics.total_path == pytest.approx(90.0)
    assert metrics.average_speed == pytest.approx(90.0)
    assert metrics.max_speed == pytest.approx(90.0)
    assert metrics.max_displacement == pytest.approx(90.0)


@pytest.mark.parametrize("text, skipped", [("", 0), ("garbage\n1 2 3", 2), ("0 1 1 1\nbad line", 1)])
def test_fewer_than_two_points_yields_zero_metrics(text, skipped):
    metrics = analyze_text(text, "short.txt", fps=30.0)

    assert metrics.skipped == skipped
    assert metrics.duration_sec == 0
    assert metrics.average_speed == 0
    assert metrics.max_speed == 0
    assert metrics.max_displacement == 0
    assert metrics.total_path == 0


def test_straight_line_average_equals_max_speed():
    points = [Point(frame=i, x=2.0 * i, y=1.0 * i, z=0.0) for i in range(10)]
    metrics = compute_metrics(points, fps=29.999)

    assert metrics.average_speed == pytest.approx(metrics.max_speed)
    assert metrics.max_displacement == pytest.approx(metrics.total_path)


def test_non_increasing_frames_are_counted_as_skipped():
    # one malformed line plus two backwards/duplicate segments, all in one counter
    text = "\n".join(["0 0 0 0", "bad", "5 1 0 0", "5 2 0 0", "3 3 0 0", "10 4 0 0"])
    metrics = analyze_text(text, "mixed.txt", fps=10.0)

    assert metrics.points == 5
    assert metrics.skipped == 3
    assert metrics.total_path == pytest.approx(2.0)
    assert metrics.duration_sec == pytest.approx(1.0)
    assert metrics.max_speed == pytest.approx(1.0 / (5 / 10.0))
    assert metrics.max_displacement == pytest.approx(4.0)


def test_duration_is_clamped_to_zero():
    points = [Point(10, 0, 0, 0), Point(20, 3, 4, 0), Point(5, 0, 0, 0)]
    metrics = compute_metrics(points, fps=10.0)

    assert metrics.duration_sec == 0
    assert metrics.average_speed == 0
    assert metrics.total_path == pytest.approx(5.0)
    assert metrics.skipped == 1


def test_coincident_points_have_zero_displacement():
    points = [Point(i, 1.0, 1.0, 1.0) for i in range(5)]
    metrics = compute_metrics(points, fps=30.0)

    assert metrics.max_displacement == 0
    assert metrics.max_speed == 0


def test_distance_is_euclidean():
    assert distance(Point(0, 0, 0, 0), Point(1, 1, 2, 2)) == pytest.approx(3.0)


def test_analyze_text_accepts_bytes():
    metrics = analyze_text(b"0 0 0 0\r\n30 3 4 0\r\n", "b.txt", fps=30.0)
    assert metrics.total_path == pytest.approx(5.0)


def test_analyzer_reads_file(two_point_file):
    metrics = MotionAnalyzer(MotionConfig(fps=30.0)).analyze_file(two_point_file)
    assert metrics.file_name == "two_point.txt"
    assert metrics.average_speed == pytest.approx(90.0)


@pytest.mark.parametrize("fps", [0, -1.0, float("nan"), float("inf")])
def test_analyzer_rejects_invalid_fps(fps):
    with pytest.raises(InvalidFrameRateError, match="FPS must be a positive number"):
        MotionAnalyzer(MotionConfig(fps=fps)).analyze_text("0 0 0 0\n1 1 1 1")


@pytest.mark.parametrize("fps", [30, np.int64(30), np.float32(30.0), Fraction(30)])
def test_analyzer_accepts_any_real_fps(fps):
    metrics = MotionAnalyzer(MotionConfig(fps=fps)).analyze_text("0 0 0 0\n30 0 0 90")
    assert metrics.average_speed == pytest.approx(90.0)


def test_analyzer_rejects_bool_fps():
    with pytest.raises(InvalidFrameRateError):
        MotionConfig(fps=True).validate()
