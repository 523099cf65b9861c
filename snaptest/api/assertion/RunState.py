"""Process-wide run state."""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager

from .SequenceCounters import SequenceCounters


class RunState:
    """Recording flag and sequence counters shared by a test run."""

    def __init__(self, recording: bool = False):
        self._lock = threading.Lock()
        self._recording = recording
        self.counters = SequenceCounters()

    @property
    def recording(self) -> bool:
        with self._lock:
            return self._recording

    @recording.setter
    def recording(self, value: bool) -> None:
        with self._lock:
            self._recording = bool(value)

    @contextmanager
    def record_mode(self, enabled: bool = True) -> Iterator[None]:
        """Set the recording flag for a block and restore it on every exit path."""
        with self._lock:
            prior = self._recording
            self._recording = enabled
        try:
            yield
        finally:
            with self._lock:
                self._recording = prior

    def begin_test(self, test_scope: str) -> None:
        """Reset the sequence counters of a test before it runs."""
        self.counters.reset(test_scope)
