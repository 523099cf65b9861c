"""Recursive dump strategy."""

from typing import Any

from ..format.Format import Format
from ..format.FormatKind import FormatKind
from ._dump_value import dump_value
from .lines import lines
from .Strategy import Strategy


def dump(context_lines: int = 3) -> Strategy:
    """Snapshot any value as a canonical, indented tree description."""

    def snapshot(subject: Any) -> Format:
        return Format.text(dump_value(subject), "txt")

    return Strategy(
        name="dump",
        path_extension="txt",
        kind=FormatKind.TEXT,
        snapshot=snapshot,
        diff=lines(context_lines).diff,
    )
