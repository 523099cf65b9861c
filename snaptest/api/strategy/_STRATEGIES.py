"""Built-in strategy table, keyed by capability."""

from types import MappingProxyType

from .data import data
from .description import description
from .dump import dump
from .image import image
from .json_encoded import json_encoded
from .lines import lines
from .plist_encoded import plist_encoded
from .raw import raw

STRATEGIES = MappingProxyType(
    {
        "data": data(),
        "description": description(),
        "dump": dump(),
        "image": image(),
        "json": json_encoded(),
        "lines": lines(),
        "plist": plist_encoded(),
        "raw": raw(),
    }
)
