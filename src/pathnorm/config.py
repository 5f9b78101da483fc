"""Configuration management for pathnorm using Pydantic models."""

import json
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

CONFIG_FILENAME = ".pathnorm.json"


class Separator(str, Enum):
    """Path separators a platform may declare as native."""
    POSIX = "/"
    WINDOWS = "\\"


class LogLevel(str, Enum):
    """Logging levels."""
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"
    TRACE = "trace"


class PlatformConfig(BaseModel):
    """Platform configuration section."""
    separator: Separator | None = None  # None: use the host's os.sep
    cwd: str | None = None

    @field_validator("cwd")
    @classmethod
    def validate_cwd(cls, v):
        """Pinned working directory must be rooted."""
        if v is None:
            return v
        if not v:
            raise ValueError("cwd must not be empty")
        if not (v[0] in "/\\" or (len(v) > 1 and v[1] == ":")):
            raise ValueError(f"cwd must be an absolute path, got: {v}")
        return v

    model_config = ConfigDict(use_enum_values=True)


class ResolutionConfig(BaseModel):
    """Absolute-path resolution configuration section."""
    strict_parent: bool = Field(alias="strictParent", default=False)

    model_config = ConfigDict(populate_by_name=True)


class LoggingConfig(BaseModel):
    """Logging configuration section."""
    level: LogLevel = LogLevel.INFO

    model_config = ConfigDict(use_enum_values=True)


class PathnormConfig(BaseModel):
    """Complete pathnorm configuration model."""
    platform: PlatformConfig = Field(default_factory=PlatformConfig)
    resolution: ResolutionConfig = Field(default_factory=ResolutionConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(extra="forbid")


def load_config(config_path: str | Path | None = None) -> PathnormConfig:
    """Load configuration from file with fallback to defaults.

    Args:
        config_path: Optional path to configuration file. If None, searches
                    current directory and parents for .pathnorm.json

    Returns:
        PathnormConfig: Loaded and validated configuration

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

        try:
            return PathnormConfig(**config_data)
        except Exception as e:
            raise ValueError(f"Failed to load config from {config_path}: {e}")
    else:
        return create_default_config()


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find .pathnorm.json configuration file by searching up directory tree.

    Args:
        start_dir: Directory to start search from (default: current directory)

    Returns:
        Path to config file if found, None otherwise
    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = Path(start_dir).resolve()

    while True:
        config_file = current / CONFIG_FILENAME
        if config_file.exists():
            return config_file

        parent = current.parent
        if parent == current:  # Reached root directory
            break
        current = parent

    return None


def create_default_config() -> PathnormConfig:
    """Create default configuration: host separator, host cwd, lenient `..`."""
    return PathnormConfig()
