"""Shared utilities."""

from .logger import configure_logging, get_logger
from .render_template import render_template

__all__ = ["configure_logging", "get_logger", "render_template"]
