"""Unsupported capability error."""

from ..SnapshotError import SnapshotError


class UnsupportedCapabilityError(SnapshotError, ValueError):
    """Raised when no strategy is registered for a capability."""

    def __init__(self, capability: object, known: list[str]):
        self.capability = capability
        self.known = known
        super().__init__(
            f"No snapshot strategy for capability {capability!r} "
            f"(known: {', '.join(known)}; or pass a Strategy instance)"
        )
