"""Reject assertion names that would shadow generated identifiers."""

import re

from .sanitize_path_component import sanitize_path_component

# Unnamed assertions use "<index>", repeated names use "<name>-<index>".
_RESERVED = re.compile(r"(\d+|.*-\d+)")


def validate_assertion_name(name: str) -> str:
    """Return the name if its file token cannot collide with a generated identifier.

    Raises:
        ValueError: If the name is empty, a bare number, or ends in ``-<number>``
    """
    if not name:
        raise ValueError("assertion_name must be None or non-empty")
    token = sanitize_path_component(name)
    if _RESERVED.fullmatch(token):
        raise ValueError(
            f"assertion_name {name!r} is reserved: bare numbers and names ending in '-<number>' "
            "are used for unnamed and repeated assertions"
        )
    return name
