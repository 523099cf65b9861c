"""Config module - run-wide settings."""

from .SnapshotConfig import SnapshotConfig
from .SnapshotConfigError import SnapshotConfigError

__all__ = [
    "SnapshotConfig",
    "SnapshotConfigError",
]
