"""Diff result dataclass."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

from ..format.Attachment import Attachment
from ..format.Format import Format


@dataclass(frozen=True)
class DiffResult:
    """Outcome of comparing a reference snapshot with a candidate.

    A ``"match"`` carries no message. A ``"mismatch"`` always carries a
    non-empty, human-readable message and the attachments a report can show.
    """

    status: Literal["match", "mismatch"]
    message: str = ""
    attachments: tuple[Attachment, ...] = ()

    def __post_init__(self):
        if self.status not in ("match", "mismatch"):
            raise ValueError(f"status must be 'match' or 'mismatch' (found: {self.status!r})")
        if self.status == "mismatch" and not self.message:
            raise ValueError("a mismatch requires a non-empty message")

    @classmethod
    def match(cls) -> DiffResult:
        return cls(status="match")

    @classmethod
    def mismatch(cls, message: str, attachments: tuple[Attachment, ...] | list[Attachment] = ()) -> DiffResult:
        return cls(status="mismatch", message=message, attachments=tuple(attachments))

    @property
    def is_match(self) -> bool:
        return self.status == "match"

    def attachment(self, name: str) -> Format | None:
        """Look up an attachment format by name."""
        for item in self.attachments:
            if item.name == name:
                return item.format
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "message": self.message,
            "attachments": [
                {
                    "name": a.name,
                    "kind": a.format.kind.value,
                    "file_extension": a.format.file_extension,
                    "size": a.format.size,
                }
                for a in self.attachments
            ],
        }
