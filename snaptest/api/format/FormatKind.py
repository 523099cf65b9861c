"""Snapshot format kind."""

from enum import Enum


class FormatKind(str, Enum):
    """In-memory shape of a snapshot, used to pick the diff family."""

    TEXT = "text"
    BINARY = "binary"
