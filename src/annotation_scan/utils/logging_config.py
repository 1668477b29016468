"""Logging setup driven by :class:`config.settings.LoggingSettings`."""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from config.settings import LoggingSettings

PACKAGE_LOGGER = "annotation_scan"

# Handlers installed by configure_logging, removed again on reconfiguration.
_installed: List[logging.Handler] = []


def configure_logging(logging_settings: "LoggingSettings") -> logging.Logger:
    """Attach console and file handlers to the package logger.

    Calling it again replaces the handlers from the previous call.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in _installed:
        logger.removeHandler(handler)
        handler.close()
    _installed.clear()

    formatter = logging.Formatter(logging_settings.log_format)

    if logging_settings.console_logging:
        console = logging.StreamHandler(sys.stderr)
        console.setLevel(logging_settings.console_log_level)
        console.setFormatter(formatter)
        _installed.append(console)

    if logging_settings.log_file is not None:
        logging_settings.log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            logging_settings.log_file,
            maxBytes=logging_settings.max_log_size_mb * 1024 * 1024,
            backupCount=logging_settings.backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(logging_settings.log_file_level)
        file_handler.setFormatter(formatter)
        _installed.append(file_handler)

    for handler in _installed:
        logger.addHandler(handler)
    logger.setLevel(logging_settings.log_level)
    return logger
