"""Warning emitted for recordings when record_severity is "warn"."""


class SnapshotRecordedWarning(UserWarning):
    """A reference snapshot was (re)recorded without failing the test."""
