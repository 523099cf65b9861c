"""Canonical recursive description of arbitrary values."""

from __future__ import annotations

import dataclasses
import re
from collections.abc import Mapping
from enum import Enum
from typing import Any

_ADDRESS = re.compile(r" at 0x[0-9A-Fa-f]+")

_SCALARS = (type(None), bool, int, float, complex, str, bytes, bytearray, range, Enum)


def normalize_repr(text: str) -> str:
    """Strip memory addresses from a repr so it is stable across runs."""
    return _ADDRESS.sub("", text)


def dump_value(value: Any) -> str:
    """Describe a value as an indented tree, one node per line.

    Mapping entries and set members are ordered by their own description and
    object attributes by name, so output does not depend on insertion order,
    hash seeds or memory addresses.

    Args:
        value: Any Python value

    Returns:
        Description text ending in a newline
    """
    lines = _dump(value, label=None, depth=0, path=set())
    return "\n".join(lines) + "\n"


def _dump(value: Any, label: str | None, depth: int, path: set[int]) -> list[str]:
    indent = "  " * depth
    prefix = f"{label}: " if label is not None else ""

    children = _children(value)
    if children is None:
        return [f"{indent}- {prefix}{_leaf(value)}"]

    if id(value) in path:
        return [f"{indent}- {prefix}(cycle) {type(value).__qualname__}"]

    summary, entries, order = children
    path = path | {id(value)}
    rendered = [
        (str(child_label), _dump(child, child_label, depth + 1, path)) for child_label, child in entries
    ]
    if order == "label":
        rendered.sort(key=lambda item: (item[0], "\n".join(item[1])))
    elif order == "text":
        rendered.sort(key=lambda item: "\n".join(item[1]))

    lines = [f"{indent}▿ {prefix}{summary}"]
    for _, block in rendered:
        lines.extend(block)
    return lines


def _children(value: Any) -> tuple[str, list[tuple[str | None, Any]], str] | None:
    """Return (summary, labelled children, ordering) or None for leaves.

    Ordering is "keep" (declared order), "label" (sort by label) or "text"
    (sort by rendered description).
    """
    if isinstance(value, _SCALARS):
        return None

    name = type(value).__qualname__

    if isinstance(value, Mapping):
        entries = [(_key_label(k), v) for k, v in value.items()]
        return f"{name} ({_count(len(entries))})", entries, "label"

    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        entries = [(f.name, getattr(value, f.name)) for f in dataclasses.fields(value)]
        return name, entries, "keep"

    if isinstance(value, tuple) and hasattr(value, "_fields"):
        return name, [(field, getattr(value, field)) for field in value._fields], "keep"

    if isinstance(value, (list, tuple)):
        return f"{name} ({_count(len(value))})", [(None, item) for item in value], "keep"

    if isinstance(value, (set, frozenset)):
        return f"{name} ({_count(len(value))})", [(None, item) for item in value], "text"

    model_fields = getattr(type(value), "model_fields", None)
    if isinstance(model_fields, dict) and hasattr(value, "model_dump"):
        return name, [(field, getattr(value, field)) for field in model_fields], "keep"

    if type(value).__repr__ is not object.__repr__:
        return None

    attributes = _attributes(value)
    if not attributes:
        return None
    return name, list(attributes.items()), "label"


def _attributes(value: Any) -> dict[str, Any]:
    attributes: dict[str, Any] = {}
    instance_dict = getattr(value, "__dict__", None)
    if isinstance(instance_dict, dict):
        attributes.update(instance_dict)
    for cls in type(value).__mro__:
        for slot in getattr(cls, "__slots__", ()):
            if slot in ("__dict__", "__weakref__") or not hasattr(value, slot):
                continue
            attributes.setdefault(slot, getattr(value, slot))
    return attributes


def _leaf(value: Any) -> str:
    if type(value).__repr__ is object.__repr__:
        return type(value).__qualname__
    return normalize_repr(repr(value))


def _key_label(key: Any) -> str:
    if _children(key) is None:
        return _leaf(key)
    return " ".join(line.strip() for line in _dump(key, label=None, depth=0, path=set()))


def _count(n: int) -> str:
    return "1 element" if n == 1 else f"{n} elements"
