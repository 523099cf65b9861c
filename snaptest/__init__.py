"""snaptest - pluggable snapshot testing."""

from .api.assertion import RUN_STATE, RunState, assert_snapshot, record_mode, verify_snapshot
from .api.config import SnapshotConfig, SnapshotConfigError
from .api.diff import DiffResult
from .api.format import Attachment, Format, FormatKind
from .api.report import SnapshotAssertionError, SnapshotFailure, SnapshotRecordedWarning
from .api.snapshot import Deferred, ProductionTimeoutError
from .api.SnapshotError import SnapshotError
from .api.store import ArtifactIOError, ArtifactStore, SnapshotIdentity
from .api.strategy import (
    Strategy,
    UnsupportedCapabilityError,
    data,
    description,
    dump,
    image,
    json_encoded,
    lines,
    plist_encoded,
    raw,
    resolve_strategy,
)

__version__ = "0.1.0"

__all__ = [
    "RUN_STATE",
    "ArtifactIOError",
    "ArtifactStore",
    "Attachment",
    "Deferred",
    "DiffResult",
    "Format",
    "FormatKind",
    "ProductionTimeoutError",
    "RunState",
    "SnapshotAssertionError",
    "SnapshotConfig",
    "SnapshotConfigError",
    "SnapshotError",
    "SnapshotFailure",
    "SnapshotIdentity",
    "SnapshotRecordedWarning",
    "Strategy",
    "UnsupportedCapabilityError",
    "__version__",
    "assert_snapshot",
    "data",
    "description",
    "dump",
    "image",
    "json_encoded",
    "lines",
    "plist_encoded",
    "raw",
    "record_mode",
    "resolve_strategy",
    "verify_snapshot",
]
