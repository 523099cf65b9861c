"""Default snapshot directory for a test file."""

from pathlib import Path

DEFAULT_SNAPSHOT_DIRNAME = "__snapshots__"


def default_snapshot_directory(test_file: Path | str, dirname: str = DEFAULT_SNAPSHOT_DIRNAME) -> Path:
    """Return ``<test file dir>/<dirname>/<test file stem>``."""
    test_file = Path(test_file)
    return test_file.parent / dirname / test_file.stem
