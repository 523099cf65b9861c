"""File-safe token helper."""

import re

_UNSAFE = re.compile(r"[^A-Za-z0-9_-]+")


def sanitize_path_component(text: str) -> str:
    """Collapse every run of characters outside [A-Za-z0-9_-] into "_".

    Args:
        text: Test scope or assertion name

    Returns:
        File-safe token

    Raises:
        ValueError: If text is empty
    """
    if not text:
        raise ValueError("path component must be non-empty")
    return _UNSAFE.sub("_", text)
