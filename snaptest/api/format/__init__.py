"""Format module - in-memory snapshot shapes."""

from .Attachment import Attachment
from .Format import Format
from .FormatKind import FormatKind

__all__ = [
    "Attachment",
    "Format",
    "FormatKind",
]
