"""File classification for the scanner.

Only extension-based selection is provided. Other selection strategies can
sit alongside :class:`PathFilter` without altering the public API.
"""

from .path_filter import PathFilter

__all__ = ["PathFilter"]
