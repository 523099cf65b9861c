"""Artifact I/O error."""

from pathlib import Path

from ..SnapshotError import SnapshotError


class ArtifactIOError(SnapshotError):
    """Raised when a reference artifact cannot be read or written.

    Absence of a reference is not an error; this covers permissions, disk
    failures and undecodable content.
    """

    def __init__(self, path: Path, operation: str, cause: BaseException):
        self.path = path
        self.operation = operation
        self.cause = cause
        super().__init__(f"Failed to {operation} snapshot artifact {path}: {type(cause).__name__}: {cause}")
