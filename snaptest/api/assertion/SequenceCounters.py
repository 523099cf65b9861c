"""Per-test sequence counters."""

import threading


class SequenceCounters:
    """Arena of assertion counters keyed by test scope and assertion name.

    Unnamed assertions share the ``(scope, None)`` counter; each name has its
    own so repeated names can be told apart. Allocation is atomic.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._counters: dict[tuple[str, str | None], int] = {}

    def next(self, test_scope: str, name: str | None = None) -> int:
        """Allocate the next index (starting at 0) for a scope and name."""
        key = (test_scope, name)
        with self._lock:
            index = self._counters.get(key, 0)
            self._counters[key] = index + 1
        return index

    def count(self, test_scope: str, name: str | None = None) -> int:
        with self._lock:
            return self._counters.get((test_scope, name), 0)

    def reset(self, test_scope: str) -> None:
        """Forget every counter of one test scope."""
        with self._lock:
            for key in [k for k in self._counters if k[0] == test_scope]:
                del self._counters[key]
