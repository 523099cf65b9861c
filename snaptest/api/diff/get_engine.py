"""Get diff engine helper."""

from typing import Any

from ._ENGINES import ENGINES
from .DiffEngine import DiffEngine


def get_engine(name: str, options: dict[str, Any] | None = None) -> DiffEngine | None:
    """Build a diff engine by name.

    Args:
        name: Engine name ("lines", "data" or "image")
        options: Constructor options (e.g. {"precision": 0.9})

    Returns:
        Engine instance or None if not found

    Raises:
        ValueError: If options are invalid for the engine
    """
    engine_cls = ENGINES.get(name)
    if engine_cls is None:
        return None
    try:
        return engine_cls(**(options or {}))
    except TypeError as exc:
        raise ValueError(f"Invalid options for diff engine {name!r}: {exc}") from exc
