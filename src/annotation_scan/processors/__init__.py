"""Line-level processing of source files."""

from .block_scanner import BlockScanner

__all__ = ["BlockScanner"]
