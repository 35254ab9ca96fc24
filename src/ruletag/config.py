"""Configuration management for ruletag using Pydantic models."""

import json
import logging
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .fields import DEFAULT_TAG_FIELD, DEFAULT_TAG_RULE

CONFIG_FILE_NAME = ".ruletag.json"


class LogLevel(str, Enum):
    """Logging levels."""
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"

    def to_logging(self) -> int:
        """Matching level number of the standard logging module."""
        return {
            LogLevel.ERROR: logging.ERROR,
            LogLevel.WARN: logging.WARNING,
            LogLevel.INFO: logging.INFO,
            LogLevel.DEBUG: logging.DEBUG,
        }[self]


class TagConfig(BaseModel):
    """Names of the metadata keys read from record fields."""
    field_tag: str = Field(alias="field", default=DEFAULT_TAG_FIELD)
    rule_tag: str = Field(alias="rule", default=DEFAULT_TAG_RULE)

    @field_validator("field_tag", "rule_tag")
    @classmethod
    def validate_tag_name(cls, v):
        if not v or not v.strip():
            raise ValueError("tag name must not be blank")
        return v.strip()

    model_config = ConfigDict(populate_by_name=True)


class LoggingConfig(BaseModel):
    """Logging configuration section."""
    level: LogLevel = LogLevel.WARN


class RuletagConfig(BaseModel):
    """Complete ruletag configuration model."""
    tags: TagConfig = Field(default_factory=TagConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(extra="forbid")


def load_config(config_path: str | Path | None = None) -> RuletagConfig:
    """Read a ``.ruletag.json`` file into a RuletagConfig.

    Without a path the nearest config file above the working directory is
    used. A missing file yields the defaults; a file that is not JSON, or does
    not describe a valid config, raises ValueError.
    """
    path = find_config_file() if config_path is None else Path(config_path)
    if path is None or not path.exists():
        return create_default_config()

    try:
        config_data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in config file {path}: {e}") from e
    except OSError as e:
        raise ValueError(f"Failed to load config from {path}: {e}") from e

    try:
        return RuletagConfig.model_validate(config_data)
    except ValidationError as e:
        raise ValueError(f"Failed to load config from {path}: {e}") from e


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Return the first CONFIG_FILE_NAME in start_dir or one of its parents."""
    start = Path.cwd() if start_dir is None else Path(start_dir)
    start = start.resolve()

    for directory in (start, *start.parents):
        candidate = directory / CONFIG_FILE_NAME
        if candidate.exists():
            return candidate
    return None


def create_default_config() -> RuletagConfig:
    """Create default configuration: ``json`` display names, ``valid`` rule tags."""
    return RuletagConfig()
