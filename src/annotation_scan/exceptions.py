"""
Exception hierarchy for the annotation scanner.

Errors are split by how the run reacts to them:

- Fatal: ``ConfigLoadError`` and ``DirectoryListingError``. Without a
  configuration or directory contents the scan domain cannot be
  established, so the run aborts.
- Recoverable: ``FileReadError``. The file is skipped with a warning and
  contributes no results.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(Enum):
    """
    Error codes grouped by category:
    - 1xx: Configuration errors
    - 3xx: File and directory errors
    - 9xx: Uncategorized errors
    """
    # Configuration errors (1xx)
    CONFIG_NOT_FOUND = 101
    INVALID_CONFIG = 102
    CONFIG_PARSE_ERROR = 104
    CONFIG_VALIDATION_ERROR = 105

    # File operation errors (3xx)
    FILE_READ_ERROR = 303
    DIRECTORY_NOT_FOUND = 308
    DIRECTORY_LIST_ERROR = 309

    # Uncategorized errors (9xx)
    UNKNOWN_ERROR = 901


class AnnotationScanError(Exception):
    """Base class for all scanner errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.UNKNOWN_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ):
        """
        Args:
            message: Human-readable error message
            code: Error code from the ErrorCode enum
            details: Additional context for logging
        """
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code.name}] {self.message}"


class ConfigLoadError(AnnotationScanError):
    """The scan configuration could not be read, parsed or validated."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INVALID_CONFIG,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)


class DirectoryListingError(AnnotationScanError):
    """A directory under the scan root could not be listed."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.DIRECTORY_LIST_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)


class FileReadError(AnnotationScanError):
    """A single file could not be opened, read or decoded."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.FILE_READ_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
