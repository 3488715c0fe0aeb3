import pytest

from facemotion.batch import BatchRunner, analyze_files
from facemotion.config import MotionConfig
from facemotion.errors import BatchReadError, InvalidFrameRateError
from facemotion.observers import ResultCollector

from helpers import write_motion_file


def test_results_follow_input_order(tmp_path):
    paths = [
        write_motion_file(tmp_path, f"f{i}.txt", ["0 0 0 0", f"30 {i} 0 0"]) for i in range(5)
    ]
    results = analyze_files(paths, MotionConfig(fps=30.0), n_jobs=2)

    assert [m.file_name for m in results] == [f"f{i}.txt" for i in range(5)]
    assert [m.total_path for m in results] == pytest.approx([0.0, 1.0, 2.0, 3.0, 4.0])


def test_invalid_fps_rejected_before_reading(tmp_path):
    missing = tmp_path / "does_not_exist.txt"
    with pytest.raises(InvalidFrameRateError):
        analyze_files([missing], MotionConfig(fps=0))


def test_unreadable_file_fails_whole_batch(tmp_path, two_point_file):
    missing = tmp_path / "does_not_exist.txt"
    with pytest.raises(BatchReadError, match="Something went wrong while reading the files."):
        analyze_files([two_point_file, missing], MotionConfig(fps=30.0, n_jobs=1))


def test_empty_batch_returns_nothing():
    assert analyze_files([], MotionConfig()) == []


def test_runner_notifies_observers(two_point_file, straight_line_file, tmp_path):
    collector = ResultCollector()
    runner = BatchRunner(MotionConfig(fps=30.0, n_jobs=1))
    runner.register_observer(collector)

    runner.run([two_point_file, straight_line_file])
    with pytest.raises(BatchReadError):
        runner.run([tmp_path / "missing.txt"])

    assert len(collector.batches) == 1
    assert [m.file_name for m in collector.batches[0]] == ["two_point.txt", "straight.txt"]
    assert len(collector.errors) == 1


def test_failing_observer_does_not_break_batch(two_point_file):
    class Broken(ResultCollector):
        def on_batch_complete(self, config, results):
            raise RuntimeError("boom")

    runner = BatchRunner(MotionConfig(fps=30.0, n_jobs=1))
    runner.register_observer(Broken())

    assert len(runner.run([two_point_file])) == 1
