"""Determine the test scope of an assertion."""

from __future__ import annotations

import os

PYTEST_ENV = "PYTEST_CURRENT_TEST"


def scope_from_node_id(node_id: str) -> str | None:
    """``Class.test[param]`` part of a pytest node id, or None for a bare path."""
    parts = node_id.split("::")[1:]
    return ".".join(parts) if parts else None


def resolve_test_scope(explicit: str | None, caller_function: str) -> str:
    """Pick the test scope used in reference file names.

    Order: explicit scope, then the running pytest item (``Class::test[param]``
    part of PYTEST_CURRENT_TEST, joined with "."), then the calling function.
    """
    if explicit:
        return explicit

    current = os.environ.get(PYTEST_ENV)
    if current:
        scope = scope_from_node_id(current.rsplit(" (", 1)[0])
        if scope:
            return scope

    return caller_function
