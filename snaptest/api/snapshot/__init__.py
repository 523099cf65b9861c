"""Snapshot module - producing snapshots from subjects."""

from .Deferred import Deferred
from .produce import produce
from .ProductionTimeoutError import ProductionTimeoutError

__all__ = [
    "Deferred",
    "ProductionTimeoutError",
    "produce",
]
