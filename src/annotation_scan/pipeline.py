"""Wire the scanner stages together.

Walker -> block scanner -> label extractor -> list of results. Directory
listing errors propagate and abort the scan; unreadable files are logged and
skipped.
"""
from __future__ import annotations

import logging
import os
from typing import List, Union

from .classifiers import PathFilter
from .exceptions import FileReadError
from .extractors import LabelExtractor
from .models import AnnotationResult, ScanConfig
from .processors import BlockScanner
from .utils.directory_walker import walk

logger = logging.getLogger(__name__)


class AnnotationScanner:
    """Collect annotation results for a directory tree."""

    def __init__(self, config: ScanConfig, encoding: str = "utf-8", errors: str = "replace"):
        self.config = config
        self.path_filter = PathFilter.from_config(config)
        self.block_scanner = BlockScanner.from_config(config, encoding=encoding, errors=errors)
        self.label_extractor = LabelExtractor.from_config(config)
        self.files_scanned = 0
        self.files_skipped = 0

    def scan_file(self, file_path: str) -> List[AnnotationResult]:
        """
        Extract every annotation from a single file.

        Raises:
            FileReadError: If the file cannot be read; no partial results
                are returned in that case
        """
        results: List[AnnotationResult] = []
        for block in self.block_scanner.scan_file(file_path):
            results.extend(self.label_extractor.extract(block, file_path))
        return results

    def scan(self, root: Union[str, "os.PathLike[str]"]) -> List[AnnotationResult]:
        """
        Extract annotations from every selected file under ``root``.

        Returns:
            Unordered list of results; use :func:`annotation_scan.report.sort_results`
            for report order

        Raises:
            DirectoryListingError: If a directory cannot be listed
        """
        self.files_scanned = 0
        self.files_skipped = 0
        results: List[AnnotationResult] = []

        for file_path in walk(root, self.path_filter.include):
            try:
                file_results = self.scan_file(file_path)
            except FileReadError as e:
                self.files_skipped += 1
                logger.warning("Skipping %s: %s", file_path, e.message)
                continue
            self.files_scanned += 1
            if file_results:
                logger.debug("%s: %d annotations", file_path, len(file_results))
            results.extend(file_results)

        logger.info(
            "Scanned %d files under %s (%d skipped), found %d annotations",
            self.files_scanned, os.fspath(root), self.files_skipped, len(results),
        )
        return results
