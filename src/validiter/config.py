"""Configuration management for validiter using Pydantic models."""

import json
import logging
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

CONFIG_FILE_NAME = ".validiter.json"


class LogLevel(str, Enum):
    """Logging levels."""
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"


_LOG_LEVELS = {
    LogLevel.ERROR: logging.ERROR,
    LogLevel.WARN: logging.WARNING,
    LogLevel.INFO: logging.INFO,
    LogLevel.DEBUG: logging.DEBUG,
}


class GridConfig(BaseModel):
    """Checks applied when parsing a delimited numeric grid."""
    delimiter: str = ","
    min_rows: int = Field(alias="minRows", default=1)
    max_rows: int | None = Field(alias="maxRows", default=None)
    min_columns: int = Field(alias="minColumns", default=1)
    max_columns: int | None = Field(alias="maxColumns", default=None)
    low: float | None = None
    high: float | None = None
    non_negative: bool = Field(alias="nonNegative", default=True)
    finite_only: bool = Field(alias="finiteOnly", default=True)
    constant_row_length: bool = Field(alias="constantRowLength", default=True)
    skip_blank_lines: bool = Field(alias="skipBlankLines", default=False)

    @field_validator("delimiter")
    @classmethod
    def validate_delimiter(cls, v):
        if not v:
            raise ValueError("delimiter must not be empty")
        return v

    @field_validator("min_rows", "min_columns", "max_rows", "max_columns")
    @classmethod
    def validate_counts(cls, v):
        if v is not None and v < 0:
            raise ValueError(f"row and column counts must be >= 0, got: {v}")
        return v

    @model_validator(mode="after")
    def validate_bounds(self):
        if self.low is not None and self.high is not None and self.high < self.low:
            raise ValueError(f"low must be <= high, got: low={self.low}, high={self.high}")
        return self

    model_config = ConfigDict(populate_by_name=True)


class LoggingConfig(BaseModel):
    """Logging configuration section."""
    level: LogLevel = LogLevel.WARN

    model_config = ConfigDict(use_enum_values=True)


class ValiditerConfig(BaseModel):
    """Complete validiter configuration model."""
    grid: GridConfig = Field(default_factory=GridConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(extra="forbid")


def load_config(config_path: str | Path | None = None) -> ValiditerConfig:
    """Load configuration from file with fallback to defaults.

    Args:
        config_path: Optional path to configuration file. If None, searches
                    current directory and parents for .validiter.json

    Returns:
        ValiditerConfig: Loaded and validated configuration

    Raises:
        FileNotFoundError: If config file specified but not found
        ValueError: If configuration is invalid
    """
    if config_path is None:
        config_path = find_config_file()
        if config_path is None:
            return create_default_config()
    else:
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with open(config_path, encoding="utf-8") as f:
            config_data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in config file {config_path}: {e}") from e

    try:
        return ValiditerConfig.model_validate(config_data)
    except ValueError as e:
        raise ValueError(f"Failed to load config from {config_path}: {e}") from e


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find .validiter.json by searching up the directory tree.

    Args:
        start_dir: Directory to start search from (default: current directory)

    Returns:
        Path to config file if found, None otherwise
    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = Path(start_dir).resolve()

    while True:
        config_file = current / CONFIG_FILE_NAME
        if config_file.exists():
            return config_file

        parent = current.parent
        if parent == current:  # Reached root directory
            break
        current = parent

    return None


def create_default_config() -> ValiditerConfig:
    """Create default configuration."""
    return ValiditerConfig()


def configure_logging(config: LoggingConfig | None = None) -> None:
    """Apply the configured log level to the validiter logger hierarchy."""
    config = config or LoggingConfig()
    level = _LOG_LEVELS[LogLevel(config.level)]
    logger = logging.getLogger("validiter")
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        logger.addHandler(handler)
