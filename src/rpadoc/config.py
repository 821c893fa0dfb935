"""Configuration management for rpadoc using Pydantic models."""

import json
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from rpadoc.constants import CONFIG_FILE_NAME, DEFAULT_ROOT_ELEMENTS


class OutputFormat(str, Enum):
    """Output format types."""
    MARKDOWN = "markdown"
    JSON = "json"


class LogLevel(str, Enum):
    """Logging levels."""
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"


class ScanConfig(BaseModel):
    """Workflow discovery configuration section."""
    recursive: bool = False
    public_only: bool = Field(alias="publicOnly", default=False)
    exclude: list[str] = Field(default_factory=lambda: [
        ".local/**",
        ".settings/**",
        ".screenshots/**",
        ".tmh/**",
        "TestResults/**",
    ])

    model_config = ConfigDict(populate_by_name=True)


class OutputConfig(BaseModel):
    """Output configuration section."""
    dir: str = "docs"
    format: OutputFormat = OutputFormat.MARKDOWN
    require_empty: bool = Field(alias="requireEmpty", default=True)

    model_config = ConfigDict(use_enum_values=True, populate_by_name=True)


class ExtractionConfig(BaseModel):
    """Metadata extraction configuration section."""
    root_shapes: list[str] = Field(
        alias="rootShapes", default_factory=lambda: list(DEFAULT_ROOT_ELEMENTS)
    )
    fail_fast: bool = Field(alias="failFast", default=False)

    @field_validator("root_shapes")
    @classmethod
    def validate_root_shapes(cls, v):
        if not v:
            raise ValueError("rootShapes must name at least one element")
        if any(not shape or not shape.strip() for shape in v):
            raise ValueError("rootShapes entries must be non-empty element names")
        return v

    model_config = ConfigDict(populate_by_name=True)


class LoggingConfig(BaseModel):
    """Logging configuration section."""
    level: LogLevel = LogLevel.WARN

    model_config = ConfigDict(use_enum_values=True)


class RpaDocConfig(BaseModel):
    """Complete rpadoc configuration model."""
    scan: ScanConfig = Field(default_factory=ScanConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    extraction: ExtractionConfig = Field(default_factory=ExtractionConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(extra="forbid")


def load_config(config_path: str | Path | None = None) -> RpaDocConfig:
    """Load configuration from file with fallback to defaults.

    Args:
        config_path: Optional path to configuration file. If None, searches
                    current directory and parents for .rpadoc.json

    Returns:
        RpaDocConfig: Loaded and validated configuration

    Raises:
        ValueError: If configuration is invalid
    """
    if config_path is None:
        config_path = find_config_file()
    else:
        config_path = Path(config_path)

    if config_path and config_path.exists():
        try:
            with open(config_path, encoding="utf-8") as f:
                config_data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {config_path}: {e}")

        if not isinstance(config_data, dict):
            raise ValueError(f"Failed to load config from {config_path}: expected an object")

        try:
            return RpaDocConfig(**config_data)
        except ValidationError as e:
            raise ValueError(f"Failed to load config from {config_path}: {e}")
    else:
        return create_default_config()


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find .rpadoc.json configuration file by searching up directory tree.

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


def create_default_config() -> RpaDocConfig:
    """Create default configuration with sensible defaults."""
    return RpaDocConfig()
