"""Snapshot production timeout error."""

from ..SnapshotError import SnapshotError


class ProductionTimeoutError(SnapshotError):
    """Raised when deferred snapshot production does not complete in time."""

    def __init__(self, timeout: float):
        self.timeout = timeout
        super().__init__(f"Snapshot production did not complete within {timeout:g} seconds")
