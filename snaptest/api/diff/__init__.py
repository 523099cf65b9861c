"""Diff module - comparing snapshots."""

from ._ENGINES import ENGINES
from .cmd_diff import cmd_diff
from .DataDiffEngine import DataDiffEngine
from .DiffEngine import DiffEngine
from .DiffResult import DiffResult
from .get_engine import get_engine
from .ImageDiffEngine import ImageDiffEngine
from .LinesDiffEngine import LinesDiffEngine

__all__ = [
    "ENGINES",
    "DataDiffEngine",
    "DiffEngine",
    "DiffResult",
    "ImageDiffEngine",
    "LinesDiffEngine",
    "cmd_diff",
    "get_engine",
]
