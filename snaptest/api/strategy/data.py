"""Raw bytes strategy."""

from typing import Any

from ..diff.DataDiffEngine import DataDiffEngine
from ..format.Format import Format
from ..format.FormatKind import FormatKind
from .Strategy import Strategy


def data(path_extension: str = "bin") -> Strategy:
    """Snapshot bytes exactly."""

    def snapshot(subject: Any) -> Format:
        if not isinstance(subject, (bytes, bytearray, memoryview)):
            raise TypeError(f"data strategy requires bytes (found: {type(subject).__name__})")
        return Format.binary(bytes(subject), path_extension)

    return Strategy(
        name="data",
        path_extension=path_extension,
        kind=FormatKind.BINARY,
        snapshot=snapshot,
        diff=DataDiffEngine().compare,
    )
