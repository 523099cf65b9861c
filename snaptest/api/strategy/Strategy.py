"""Snapshot strategy dataclass."""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import Any

from ..diff.DiffResult import DiffResult
from ..format.Format import Format
from ..format.FormatKind import FormatKind

_NAME_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")


@dataclass(frozen=True)
class Strategy:
    """How to snapshot a subject and how to compare two snapshots.

    A strategy owns no mutable state; the built-in ones are module constants.

    Attributes:
        name: Format discriminator used in reference file names
        path_extension: File extension of reference artifacts (no leading dot)
        kind: Kind of Format the strategy produces
        snapshot: Callable turning a subject into a Format, Deferred, Future or awaitable
        diff: Callable comparing a reference Format with a candidate Format
    """

    name: str
    path_extension: str
    kind: FormatKind
    snapshot: Callable[[Any], Any]
    diff: Callable[[Format, Format], DiffResult]

    def __post_init__(self):
        errors: list[str] = []
        if not isinstance(self.name, str) or not _NAME_PATTERN.match(self.name):
            errors.append(f"strategy name must match [A-Za-z0-9_-]+ (found: {self.name!r})")
        if not isinstance(self.path_extension, str) or not self.path_extension or self.path_extension.startswith("."):
            errors.append(f"path_extension must be non-empty without a leading dot (found: {self.path_extension!r})")
        if not callable(self.snapshot):
            errors.append("snapshot must be callable")
        if not callable(self.diff):
            errors.append("diff must be callable")
        if errors:
            raise ValueError("Invalid strategy: " + "; ".join(errors))

    def pullback(self, transform: Callable[[Any], Any], name: str | None = None) -> Strategy:
        """Derive a strategy for another subject type.

        The returned strategy snapshots ``transform(subject)`` with this
        strategy's snapshot function and reuses its diff.

        Args:
            transform: Maps the new subject type onto this strategy's subject type
            name: Optional new strategy name (defaults to this strategy's name)
        """
        base = self.snapshot

        def snapshot(subject: Any) -> Any:
            return base(transform(subject))

        return replace(self, name=name or self.name, snapshot=snapshot)
