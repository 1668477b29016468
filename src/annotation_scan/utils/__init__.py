"""Filesystem and logging helpers used by the scanner."""

from .directory_walker import walk
from .logging_config import configure_logging

__all__ = ["walk", "configure_logging"]
