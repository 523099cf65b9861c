"""snaptest API - strategies, diffing, storage and the assertion workflow."""

from .SnapshotError import SnapshotError
from .StageResult import StageResult

__all__ = [
    "SnapshotError",
    "StageResult",
]
