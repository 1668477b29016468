"""Command-line entry point.

Usage:
    annotation-scan                                # config.json, current directory
    annotation-scan --config todo.json --dir src
    annotation-scan --format json --log-level DEBUG

Defaults come from :data:`config.settings.settings`, which reads
``ANNOTATION_SCAN_*`` environment variables (e.g.
``ANNOTATION_SCAN_SCAN__DIRECTORY=src``).
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from config.scan_config import load_scan_config
from config.settings import Settings, settings

from .exceptions import AnnotationScanError
from .pipeline import AnnotationScanner
from .report import RENDERERS
from .utils.logging_config import configure_logging

logger = logging.getLogger(__name__)


def build_parser(app_settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="annotation-scan",
        description="Report TODO/FIXME-style annotations found in source comments.",
    )
    parser.add_argument(
        "--config",
        default=str(app_settings.scan.config_file),
        help="config file (default: %(default)s)",
    )
    parser.add_argument(
        "--dir",
        default=str(app_settings.scan.directory),
        help="directory to examine (default: %(default)s)",
    )
    parser.add_argument(
        "--format",
        choices=sorted(RENDERERS),
        default=app_settings.output.format,
        help="report format (default: %(default)s)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="console log level (overrides settings)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run a scan and print the report. Returns the process exit status."""
    args = build_parser(settings).parse_args(argv)

    logging_settings = settings.logging
    if args.log_level:
        logging_settings = logging_settings.model_copy(
            update={"console_log_level": args.log_level, "log_level": args.log_level}
        )
    configure_logging(logging_settings)

    try:
        scan_config = load_scan_config(args.config)
        scanner = AnnotationScanner(
            scan_config,
            encoding=settings.scan.text_encoding,
            errors=settings.scan.decode_errors,
        )
        results = scanner.scan(args.dir)
    except AnnotationScanError as e:
        logger.error("%s", e)
        return 1

    sys.stdout.write(RENDERERS[args.format](results))
    return 0


if __name__ == "__main__":
    sys.exit(main())
