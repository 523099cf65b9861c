"""String description strategy."""

from ._dump_value import normalize_repr
from .lines import lines
from .Strategy import Strategy


def description() -> Strategy:
    """Snapshot ``str(subject)`` with memory addresses stripped."""
    return lines().pullback(lambda subject: normalize_repr(str(subject)), name="description")
