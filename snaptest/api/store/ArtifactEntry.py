"""Parsed artifact file name."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

FAILED_MARKER = "failed"


@dataclass(frozen=True)
class ArtifactEntry:
    """A reference or failure artifact found on disk."""

    path: Path
    test_scope: str
    identifier: str
    strategy_name: str
    path_extension: str
    failed: bool

    @classmethod
    def parse(cls, path: Path) -> ArtifactEntry | None:
        """Parse ``<scope>.<identifier>.<strategy>[.failed].<ext>``; None if it does not fit."""
        parts = path.name.split(".")
        if len(parts) < 4 or not all(parts):
            return None
        scope, identifier, strategy_name, *rest = parts
        failed = rest[0] == FAILED_MARKER and len(rest) > 1
        extension = ".".join(rest[1:] if failed else rest)
        return cls(
            path=path,
            test_scope=scope,
            identifier=identifier,
            strategy_name=strategy_name,
            path_extension=extension,
            failed=failed,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": str(self.path),
            "test_scope": self.test_scope,
            "identifier": self.identifier,
            "strategy": self.strategy_name,
            "extension": self.path_extension,
            "failed": self.failed,
        }
