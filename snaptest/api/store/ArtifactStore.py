"""On-disk store for reference snapshots."""

from __future__ import annotations

from contextlib import suppress
from pathlib import Path

from ...utils.logger import get_logger
from ..format.Format import Format
from ..format.FormatKind import FormatKind
from .ArtifactEntry import FAILED_MARKER, ArtifactEntry
from .ArtifactIOError import ArtifactIOError
from .sanitize_path_component import sanitize_path_component
from .SnapshotIdentity import SnapshotIdentity

logger = get_logger("store")

_TEMP_SUFFIX = ".tmp"


class ArtifactStore:
    """Resolve, read and write reference artifacts under one directory.

    File names are ``<scope>.<identifier>.<strategy>.<extension>``; failure
    artifacts insert ``.failed`` before the extension.
    """

    def __init__(self, directory: Path | str):
        self.directory = Path(directory)

    def path(self, identity: SnapshotIdentity, path_extension: str) -> Path:
        """Location of the reference artifact for an identity (pure)."""
        return self.directory / self._filename(identity, path_extension)

    def failure_path(self, identity: SnapshotIdentity, path_extension: str) -> Path:
        """Sibling location where a mismatching candidate is kept for inspection."""
        return self.directory / self._filename(identity, f"{FAILED_MARKER}.{path_extension}")

    def exists(self, location: Path) -> bool:
        return location.is_file()

    def read(self, location: Path, kind: FormatKind) -> Format | None:
        """Load an artifact.

        Returns:
            The stored Format, or None when nothing is stored at location

        Raises:
            ArtifactIOError: If the file exists but cannot be read or decoded
        """
        try:
            data = location.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise ArtifactIOError(location, "read", exc) from exc

        extension = location.suffix.lstrip(".") or "bin"
        try:
            return Format.from_bytes(kind, data, extension)
        except UnicodeDecodeError as exc:
            raise ArtifactIOError(location, "decode", exc) from exc

    def write(self, location: Path, snapshot: Format) -> None:
        """Write an artifact, creating directories and replacing any existing file.

        Uses atomic write (write to temp file, then rename).

        Raises:
            ArtifactIOError: If the file cannot be written
        """
        temp_path = location.with_name(location.name + _TEMP_SUFFIX)
        try:
            location.parent.mkdir(parents=True, exist_ok=True)
            temp_path.write_bytes(snapshot.to_bytes())
            temp_path.replace(location)
        except OSError as exc:
            with suppress(OSError):
                if temp_path.exists():
                    temp_path.unlink()
            raise ArtifactIOError(location, "write", exc) from exc
        logger.debug("Wrote snapshot artifact %s (%d bytes)", location, snapshot.size)

    def list_artifacts(self) -> list[ArtifactEntry]:
        """All reference and failure artifacts in the directory, sorted by name."""
        if not self.directory.is_dir():
            return []
        entries = []
        for path in sorted(self.directory.iterdir()):
            if not path.is_file() or path.name.endswith(_TEMP_SUFFIX):
                continue
            entry = ArtifactEntry.parse(path)
            if entry is not None:
                entries.append(entry)
        return entries

    def clean_failures(self) -> list[Path]:
        """Delete failure artifacts and return their paths.

        Raises:
            ArtifactIOError: If a file cannot be removed
        """
        removed = []
        for entry in self.list_artifacts():
            if not entry.failed:
                continue
            try:
                entry.path.unlink()
            except FileNotFoundError:
                continue
            except OSError as exc:
                raise ArtifactIOError(entry.path, "delete", exc) from exc
            removed.append(entry.path)
        return removed

    @staticmethod
    def _filename(identity: SnapshotIdentity, suffix: str) -> str:
        return ".".join(
            [
                sanitize_path_component(identity.test_scope),
                sanitize_path_component(identity.identifier),
                sanitize_path_component(identity.strategy_name),
                suffix,
            ]
        )
