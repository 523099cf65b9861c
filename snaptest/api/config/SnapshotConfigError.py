"""Snapshot configuration error."""

from ..SnapshotError import SnapshotError


class SnapshotConfigError(SnapshotError):
    """Raised when snaptest configuration is invalid."""

    def __init__(self, errors: list[str]):
        if isinstance(errors, str):
            errors = [errors]
        self.errors = errors
        message = "Snapshot configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        super().__init__(message)
