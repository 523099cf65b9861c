"""Resolve a capability to a strategy."""

from ._STRATEGIES import STRATEGIES
from .Strategy import Strategy
from .UnsupportedCapabilityError import UnsupportedCapabilityError


def resolve_strategy(capability: str | Strategy, override: Strategy | None = None) -> Strategy:
    """Pick the strategy for a capability.

    Args:
        capability: Capability name (e.g. "dump", "image") or a Strategy
        override: Explicit strategy that wins over the built-in table

    Returns:
        The resolved Strategy

    Raises:
        UnsupportedCapabilityError: If the capability is unknown and no override is given
    """
    if override is not None:
        return override
    if isinstance(capability, Strategy):
        return capability
    strategy = STRATEGIES.get(capability) if isinstance(capability, str) else None
    if strategy is None:
        raise UnsupportedCapabilityError(capability, sorted(STRATEGIES))
    return strategy
