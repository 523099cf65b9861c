"""Convert values into plain containers for structured encoders."""

from __future__ import annotations

import dataclasses
import json
from collections.abc import Mapping
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from pathlib import PurePath
from typing import Any
from uuid import UUID


def to_plain(value: Any, drop_none: bool = False) -> Any:
    """Recursively convert a value into dicts, lists and scalars.

    Dataclasses and pydantic models become dicts, sets become lists sorted by
    their canonical JSON text, and tuples become lists.

    Args:
        value: Value to convert
        drop_none: Omit None values from mappings (property lists have no null)
    """
    if value is None or isinstance(value, (bool, int, float, str, bytes)):
        return value

    if isinstance(value, Enum):
        return to_plain(value.value, drop_none)

    if isinstance(value, (datetime, date, time)):
        return value.isoformat()

    if isinstance(value, (Decimal, UUID, PurePath)):
        return str(value)

    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        value = {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    elif hasattr(value, "model_dump") and callable(value.model_dump):
        value = value.model_dump(mode="json")

    if isinstance(value, Mapping):
        plain = {}
        for key, item in value.items():
            if drop_none and item is None:
                continue
            plain[str(key)] = to_plain(item, drop_none)
        return plain

    if isinstance(value, (set, frozenset)):
        items = [to_plain(item, drop_none) for item in value]
        return sorted(items, key=lambda item: json.dumps(item, sort_keys=True, default=str))

    if isinstance(value, (list, tuple)):
        return [to_plain(item, drop_none) for item in value]

    raise TypeError(f"Cannot encode value of type {type(value).__name__}")
