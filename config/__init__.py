"""
Configuration package for the annotation scanner.

``settings`` holds environment-driven application settings (pydantic-settings);
``load_scan_config`` reads the JSON file that defines labels and comment
delimiters.
"""

from .settings import (
    Settings,
    ScanSettings,
    LoggingSettings,
    OutputSettings,
    settings,
)
from .scan_config import load_scan_config

__all__ = [
    "Settings",
    "ScanSettings",
    "LoggingSettings",
    "OutputSettings",
    "settings",
    "load_scan_config",
]

# Version info
__version__ = "1.0.0"
