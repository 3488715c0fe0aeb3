from pathlib import Path

from facemotion.domain import FileMetrics


def write_motion_file(directory: Path, name: str, lines) -> Path:
    path = directory / name
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def make_metrics(file_name: str, **values) -> FileMetrics:
    defaults = dict(points=10, skipped=0)
    defaults.update(values)
    return FileMetrics(file_name=file_name, **defaults)
