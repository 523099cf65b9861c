"""JSON encoding strategy."""

import json
from typing import Any

from ..format.Format import Format
from ..format.FormatKind import FormatKind
from ._to_plain import to_plain
from .lines import lines
from .Strategy import Strategy


def json_encoded(indent: int = 2) -> Strategy:
    """Snapshot a value as pretty-printed JSON with sorted keys."""

    def snapshot(subject: Any) -> Format:
        text = json.dumps(to_plain(subject), sort_keys=True, indent=indent, ensure_ascii=False)
        return Format.text(text + "\n", "json")

    return Strategy(
        name="json",
        path_extension="json",
        kind=FormatKind.TEXT,
        snapshot=snapshot,
        diff=lines().diff,
    )
