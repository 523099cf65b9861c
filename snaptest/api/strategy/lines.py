"""Plain text strategy."""

from typing import Any

from ..diff.LinesDiffEngine import LinesDiffEngine
from ..format.Format import Format
from ..format.FormatKind import FormatKind
from .Strategy import Strategy


def lines(context_lines: int = 3) -> Strategy:
    """Snapshot a string as-is and compare it line by line."""

    def snapshot(subject: Any) -> Format:
        if not isinstance(subject, str):
            raise TypeError(f"lines strategy requires a str subject (found: {type(subject).__name__})")
        return Format.text(subject, "txt")

    return Strategy(
        name="lines",
        path_extension="txt",
        kind=FormatKind.TEXT,
        snapshot=snapshot,
        diff=LinesDiffEngine(context_lines=context_lines).compare,
    )
