"""Locate the test code that called into snaptest."""

from __future__ import annotations

import inspect
from pathlib import Path
from types import FrameType

_PACKAGE = "snaptest"


def _in_package(frame: FrameType) -> bool:
    module = frame.f_globals.get("__name__", "")
    return module == _PACKAGE or module.startswith(_PACKAGE + ".")


def resolve_caller() -> tuple[Path, str]:
    """Return (file, function name) of the first frame outside snaptest.

    Raises:
        RuntimeError: If no such frame exists
    """
    frame = inspect.currentframe()
    try:
        while frame is not None:
            if not _in_package(frame):
                return Path(frame.f_code.co_filename).resolve(), frame.f_code.co_name
            frame = frame.f_back
    finally:
        del frame
    raise RuntimeError("snaptest could not locate its calling frame")


def warning_stacklevel() -> int:
    """``stacklevel`` for a ``warnings.warn`` issued by the calling function.

    Points the warning at the first frame outside snaptest, however many
    snaptest frames sit between it and the test.
    """
    frame = inspect.currentframe()
    level = 0
    try:
        frame = frame.f_back if frame is not None else None
        while frame is not None:
            level += 1
            if not _in_package(frame):
                return level
            frame = frame.f_back
    finally:
        del frame
    return 1
