"""Assertion error raised for failed snapshots."""

from .SnapshotFailure import SnapshotFailure


class SnapshotAssertionError(AssertionError):
    """Test failure carrying a structured SnapshotFailure."""

    def __init__(self, failure: SnapshotFailure):
        self.failure = failure
        super().__init__(failure.render())
