"""Shared utilities."""

from .atomic_write import atomic_write_text
from .logger import configure_logging, get_logger

__all__ = ["atomic_write_text", "configure_logging", "get_logger"]
