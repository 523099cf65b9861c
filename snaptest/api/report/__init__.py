"""Report module - failure surface handed to the test framework."""

from .render_failure import render_failure
from .SnapshotAssertionError import SnapshotAssertionError
from .SnapshotFailure import FailureKind, SnapshotFailure
from .SnapshotRecordedWarning import SnapshotRecordedWarning

__all__ = [
    "FailureKind",
    "SnapshotAssertionError",
    "SnapshotFailure",
    "SnapshotRecordedWarning",
    "render_failure",
]
