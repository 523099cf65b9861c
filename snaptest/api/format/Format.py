"""Snapshot format dataclass."""

from __future__ import annotations

from dataclasses import dataclass

from .FormatKind import FormatKind


@dataclass(frozen=True)
class Format:
    """A produced snapshot: its kind, payload and file extension.

    Text payloads are ``str`` and binary payloads are ``bytes``. The payload is
    immutable once produced.
    """

    kind: FormatKind
    payload: str | bytes
    file_extension: str

    def __post_init__(self):
        if self.kind is FormatKind.TEXT and not isinstance(self.payload, str):
            raise TypeError(f"text format requires a str payload (found: {type(self.payload).__name__})")
        if self.kind is FormatKind.BINARY and not isinstance(self.payload, bytes):
            raise TypeError(f"binary format requires a bytes payload (found: {type(self.payload).__name__})")
        if not self.file_extension or self.file_extension.startswith("."):
            raise ValueError(f"file_extension must be non-empty without a leading dot (found: {self.file_extension!r})")

    @classmethod
    def text(cls, payload: str, file_extension: str = "txt") -> Format:
        return cls(kind=FormatKind.TEXT, payload=payload, file_extension=file_extension)

    @classmethod
    def binary(cls, payload: bytes, file_extension: str = "bin") -> Format:
        return cls(kind=FormatKind.BINARY, payload=payload, file_extension=file_extension)

    @classmethod
    def from_bytes(cls, kind: FormatKind, data: bytes, file_extension: str) -> Format:
        """Rebuild a format from persisted bytes.

        Raises:
            UnicodeDecodeError: If a text artifact is not valid UTF-8
        """
        if kind is FormatKind.TEXT:
            return cls(kind=kind, payload=data.decode("utf-8"), file_extension=file_extension)
        return cls(kind=kind, payload=data, file_extension=file_extension)

    def to_bytes(self) -> bytes:
        """Encode the payload for persistence (UTF-8 for text)."""
        if isinstance(self.payload, str):
            return self.payload.encode("utf-8")
        return self.payload

    @property
    def size(self) -> int:
        return len(self.to_bytes())
