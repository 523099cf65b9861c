"""Strategy module - how values become comparable snapshots."""

from ._STRATEGIES import STRATEGIES
from .data import data
from .description import description
from .dump import dump
from .image import image
from .json_encoded import json_encoded
from .lines import lines
from .plist_encoded import plist_encoded
from .raw import raw
from .resolve_strategy import resolve_strategy
from .Strategy import Strategy
from .UnsupportedCapabilityError import UnsupportedCapabilityError

__all__ = [
    "STRATEGIES",
    "Strategy",
    "UnsupportedCapabilityError",
    "data",
    "description",
    "dump",
    "image",
    "json_encoded",
    "lines",
    "plist_encoded",
    "raw",
    "resolve_strategy",
]
