"""
Loading of the JSON scan configuration.

Example ``config.json``::

    {
        "labels": ["TODO", "FIXME"],
        "fileExtensions": ["go", "js"],
        "singleLineDelim": "//",
        "multiLineDelimStart": "/*",
        "multiLineDelimEnd": "*/"
    }

Missing keys fall back to the defaults of :class:`ScanConfig`.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from annotation_scan.exceptions import ConfigLoadError, ErrorCode
from annotation_scan.models import ScanConfig

logger = logging.getLogger(__name__)


def load_scan_config(config_path: Union[str, Path]) -> ScanConfig:
    """
    Read and validate a scan configuration file.

    Args:
        config_path: Path to the JSON configuration file

    Returns:
        The validated configuration

    Raises:
        ConfigLoadError: If the file is missing, unreadable, not JSON or
            does not match the schema
    """
    path = Path(config_path)
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ConfigLoadError(
            f"Configuration file not found: {path}",
            code=ErrorCode.CONFIG_NOT_FOUND,
            details={"path": str(path)},
        ) from e
    except OSError as e:
        raise ConfigLoadError(
            f"Cannot read configuration file {path}: {e}",
            details={"path": str(path)},
        ) from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ConfigLoadError(
            f"Invalid JSON in {path}: {e}",
            code=ErrorCode.CONFIG_PARSE_ERROR,
            details={"path": str(path), "line": e.lineno, "column": e.colno},
        ) from e

    try:
        config = ScanConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigLoadError(
            f"Invalid configuration in {path}: {e.error_count()} validation error(s)",
            code=ErrorCode.CONFIG_VALIDATION_ERROR,
            details={"path": str(path), "errors": e.errors(include_url=False)},
        ) from e

    logger.debug("Loaded scan configuration from %s: %s", path, config)
    return config
