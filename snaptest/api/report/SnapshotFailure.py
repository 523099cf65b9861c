"""Structured snapshot failure."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal

from ..format.Attachment import Attachment
from ..store.SnapshotIdentity import SnapshotIdentity

FailureKind = Literal["recorded", "mismatch", "timeout", "unsupported", "io_error", "error"]


@dataclass(frozen=True)
class SnapshotFailure:
    """Everything a test report needs about one failed snapshot assertion."""

    kind: FailureKind
    message: str
    test_scope: str
    identity: SnapshotIdentity | None = None
    reference_path: Path | None = None
    candidate_path: Path | None = None
    attachments: tuple[Attachment, ...] = ()
    diff_command: str | None = None

    def render(self) -> str:
        from .render_failure import render_failure

        return render_failure(self)

    def __str__(self) -> str:
        return self.render()

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "message": self.message,
            "test_scope": self.test_scope,
            "identifier": self.identity.identifier if self.identity else None,
            "reference_path": str(self.reference_path) if self.reference_path else None,
            "candidate_path": str(self.candidate_path) if self.candidate_path else None,
            "attachments": [a.name for a in self.attachments],
            "diff_command": self.diff_command,
        }
