"""Diff engine registry."""

from .DataDiffEngine import DataDiffEngine
from .ImageDiffEngine import ImageDiffEngine
from .LinesDiffEngine import LinesDiffEngine

# Registry of available engine classes, keyed by strategy family
ENGINES = {
    "lines": LinesDiffEngine,
    "data": DataDiffEngine,
    "image": ImageDiffEngine,
}
