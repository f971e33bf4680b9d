"""Utility modules."""

from .logger import setup_logger, set_log_level
from .io_handler import IOHandler

__all__ = ["setup_logger", "set_log_level", "IOHandler"]
