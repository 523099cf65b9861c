"""Property list encoding strategy."""

import plistlib
from typing import Any

from ..format.Format import Format
from ..format.FormatKind import FormatKind
from ._to_plain import to_plain
from .lines import lines
from .Strategy import Strategy


def plist_encoded() -> Strategy:
    """Snapshot a value as an XML property list with sorted keys.

    None values are omitted since property lists have no null.
    """

    def snapshot(subject: Any) -> Format:
        data = plistlib.dumps(to_plain(subject, drop_none=True), fmt=plistlib.FMT_XML, sort_keys=True)
        return Format.text(data.decode("utf-8"), "plist")

    return Strategy(
        name="plist",
        path_extension="plist",
        kind=FormatKind.TEXT,
        snapshot=snapshot,
        diff=lines().diff,
    )
