"""Base class for snaptest errors."""


class SnapshotError(Exception):
    """Base class for errors raised while producing, storing or comparing snapshots."""
