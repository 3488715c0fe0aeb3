from pathlib import Path

import pytest

from helpers import write_motion_file


@pytest.fixture
def straight_line_file(tmp_path) -> Path:
    return write_motion_file(tmp_path, "straight.txt", [f"{i} {2 * i} 0 0" for i in range(4)])


@pytest.fixture
def two_point_file(tmp_path) -> Path:
    return write_motion_file(tmp_path, "two_point.txt", ["0 0 0 0", "30 0 0 90"])
