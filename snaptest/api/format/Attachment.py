"""Named attachment for diff reports."""

from dataclasses import dataclass

from .Format import Format


@dataclass(frozen=True)
class Attachment:
    """A human-inspectable artifact attached to a mismatch (e.g. "expected", "actual")."""

    name: str
    format: Format

    def __post_init__(self):
        if not self.name:
            raise ValueError("attachment name must be non-empty")
