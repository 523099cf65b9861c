"""Callback-completed snapshot handle."""

from __future__ import annotations

import threading
from collections.abc import Callable

from ..format.Format import Format
from .ProductionTimeoutError import ProductionTimeoutError


class Deferred:
    """A snapshot that completes later, e.g. after a render pass.

    The producer calls ``complete(format)`` or ``fail(error)`` from any thread.
    Only the first completion counts; later ones are ignored.
    """

    def __init__(self, run: Callable[[Callable[[Format], None]], None] | None = None):
        self._event = threading.Event()
        self._lock = threading.Lock()
        self._value: Format | None = None
        self._error: BaseException | None = None
        if run is not None:
            run(self.complete)

    @property
    def done(self) -> bool:
        return self._event.is_set()

    def complete(self, value: Format) -> None:
        with self._lock:
            if self._event.is_set():
                return
            self._value = value
            self._event.set()

    def fail(self, error: BaseException) -> None:
        with self._lock:
            if self._event.is_set():
                return
            self._error = error
            self._event.set()

    def wait(self, timeout: float) -> Format:
        """Block until the snapshot is available.

        Raises:
            ProductionTimeoutError: If nothing completes within ``timeout`` seconds
            BaseException: Whatever the producer passed to ``fail``
        """
        if not self._event.wait(timeout):
            raise ProductionTimeoutError(timeout)
        if self._error is not None:
            raise self._error
        assert self._value is not None
        return self._value
