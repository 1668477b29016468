"""Top-level package for annotation comment scanning.

Finds ``TODO``/``FIXME``-style labels inside comments across a source tree.
The package exposes convenience functions for common operations.
"""

import os
from typing import List, Union

from .classifiers import PathFilter
from .exceptions import (
    AnnotationScanError,
    ConfigLoadError,
    DirectoryListingError,
    ErrorCode,
    FileReadError,
)
from .extractors import LabelExtractor
from .models import AnnotationResult, CandidateBlock, ScanConfig
from .pipeline import AnnotationScanner
from .processors import BlockScanner
from .report import render_json, render_text, sort_results
from .utils import walk


def scan(root: Union[str, "os.PathLike[str]"], config: ScanConfig) -> List[AnnotationResult]:
    """Return the annotations under ``root`` in report order.

    This is a convenience wrapper around :class:`AnnotationScanner`.
    """
    return sort_results(AnnotationScanner(config).scan(root))


__all__ = [
    "scan",
    "AnnotationScanner",
    "AnnotationResult",
    "CandidateBlock",
    "ScanConfig",
    "PathFilter",
    "BlockScanner",
    "LabelExtractor",
    "walk",
    "sort_results",
    "render_text",
    "render_json",
    "AnnotationScanError",
    "ConfigLoadError",
    "DirectoryListingError",
    "FileReadError",
    "ErrorCode",
]

__version__ = "1.0.0"
