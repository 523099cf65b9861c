"""Store module - reference artifacts on disk."""

from .ArtifactEntry import ArtifactEntry
from .ArtifactIOError import ArtifactIOError
from .ArtifactStore import ArtifactStore
from .default_snapshot_directory import DEFAULT_SNAPSHOT_DIRNAME, default_snapshot_directory
from .sanitize_path_component import sanitize_path_component
from .SnapshotIdentity import SnapshotIdentity
from .validate_assertion_name import validate_assertion_name

__all__ = [
    "DEFAULT_SNAPSHOT_DIRNAME",
    "ArtifactEntry",
    "ArtifactIOError",
    "ArtifactStore",
    "SnapshotIdentity",
    "default_snapshot_directory",
    "sanitize_path_component",
    "validate_assertion_name",
]
