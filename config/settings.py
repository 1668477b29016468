from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ScanSettings(BaseModel):
    """Settings for locating and reading the files to scan."""

    # Inputs
    config_file: Path = Field(default=Path("config.json"), description="JSON file with labels and delimiters")
    directory: Path = Field(default=Path("."), description="Directory to examine")

    # File reading
    text_encoding: str = Field(default="utf-8", description="Encoding used to decode scanned files")
    decode_errors: str = Field(default="replace", description="Codec error handler (strict, replace, ignore)")


class LoggingSettings(BaseModel):
    """Settings for logging configuration."""

    # Log level
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="%(asctime)s - %(name)s - %(levelname)s - %(message)s", description="Log format")

    # Log files
    log_file: Optional[Path] = Field(default=None, description="Log file path")
    log_file_level: str = Field(default="DEBUG", description="Log file level")
    max_log_size_mb: int = Field(default=10, description="Maximum log file size in MB")
    backup_count: int = Field(default=5, description="Number of log file backups")

    # Console logging
    console_logging: bool = Field(default=True, description="Enable console logging")
    console_log_level: str = Field(default="WARNING", description="Console log level")

    @field_validator('log_level', 'log_file_level', 'console_log_level')
    @classmethod
    def check_level_name(cls, v):
        """Normalise level names and reject unknown ones."""
        level = str(v).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {v}")
        return level


class OutputSettings(BaseModel):
    """Settings for the rendered report."""

    format: Literal["text", "json"] = Field(default="text", description="Report format")


class Settings(BaseSettings):
    """Main settings class that combines all configuration sections."""

    # Configuration sections
    scan: ScanSettings = Field(default_factory=ScanSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    output: OutputSettings = Field(default_factory=OutputSettings)

    model_config = SettingsConfigDict(
        env_prefix="ANNOTATION_SCAN_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )


# Global settings instance
settings = Settings()

# Convenience imports for easy access
__all__ = [
    "Settings",
    "ScanSettings",
    "LoggingSettings",
    "OutputSettings",
    "settings"
]
