"""Decide which files are worth scanning.

The decision is based purely on the text after the last ``.`` of the file
name. A name without a dot is compared as a whole, so an extension set
containing ``Makefile`` also selects files called ``Makefile``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet

from ..models import ScanConfig


@dataclass(frozen=True)
class PathFilter:
    """Select files by extension. An empty extension set selects everything."""

    extensions: FrozenSet[str] = frozenset()

    @classmethod
    def from_config(cls, config: ScanConfig) -> "PathFilter":
        return cls(extensions=config.file_extensions)

    def include(self, filename: str) -> bool:
        """Return ``True`` if ``filename`` should be scanned.

        Matching is case-sensitive: ``main.GO`` is not selected by ``go``.
        """
        if not self.extensions:
            return True
        return filename.rsplit(".", 1)[-1] in self.extensions
