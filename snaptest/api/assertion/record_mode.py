"""Scoped recording override on the process run state."""

from collections.abc import Iterator
from contextlib import contextmanager

from ._RUN_STATE import RUN_STATE


@contextmanager
def record_mode(enabled: bool = True) -> Iterator[None]:
    """Record (or stop recording) snapshots inside a ``with`` block.

    The previous setting is restored even when an assertion in the block fails.
    """
    with RUN_STATE.record_mode(enabled):
        yield
