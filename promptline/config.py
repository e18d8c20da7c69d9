"""Configuration utilities for promptline.

This module loads prompt and list-layout settings with the following rules:
- Primary source: `promptline_config.json` in the working directory.
- Overrides: environment variables, then optional text files under `config/`.
- Validation: Pydantic models enforce value constraints.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError as PydanticValidationError, field_validator

from promptline.errors import ConfigurationError


CONFIG_DIR = Path("config")
ROOT_CONFIG = Path("promptline_config.json")
logger = logging.getLogger(__name__)

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


# Shared source readers used by load_config: text overrides, env lookups
# and the JSON base file
def _read_config_file(rel_path: str) -> Optional[str]:
    path = CONFIG_DIR / rel_path
    try:
        if path.exists():
            return path.read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError) as e:
        # Recoverable: log and ignore unreadable override
        logger.warning("Failed to read override %s: %s", path, e)
        return None
    return None


def _env(key: str, default: Optional[str] = None) -> Optional[str]:
    return os.environ.get(key, default)


class ListConfig(BaseModel):
    wrap_width: int = Field(default=80, gt=0)
    inline_join: str = Field(default="or")

    @field_validator("inline_join")
    @classmethod
    def join_must_be_non_empty(cls, v: str) -> str:
        if not isinstance(v, str) or not v.strip():
            raise ValueError("list.inline_join must be a non-empty string")
        return v.strip()


class PromptConfig(BaseModel):
    error_prefix: str = Field(default="Error: ")


class LoggingConfig(BaseModel):
    level: str = Field(default="WARNING")

    @field_validator("level")
    @classmethod
    def level_must_be_known(cls, v: str) -> str:
        level = str(v).strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"logging.level must be one of {sorted(_LOG_LEVELS)}")
        return level


class AppConfig(BaseModel):
    layout: ListConfig = Field(default_factory=ListConfig)
    prompt: PromptConfig = Field(default_factory=PromptConfig)
    log: LoggingConfig = Field(default_factory=LoggingConfig)


def _read_json_file(path: Path) -> dict:
    try:
        if path.exists():
            data = json.loads(path.read_text(encoding="utf-8"))
            return data if isinstance(data, dict) else {}
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.error("Failed to read JSON config %s: %s", path, e)
    return {}


def load_config() -> AppConfig:
    """Load configuration with validation.

    Precedence (highest first):
    1) Environment variables
    2) Text files in `config/` (optional)
    3) promptline_config.json in the working directory
    4) Defaults
    """

    base = _read_json_file(ROOT_CONFIG)

    def _base(path: str, default: Optional[str] = None) -> Optional[str]:
        cur: object = base
        for key in path.split("."):
            if not isinstance(cur, dict) or key not in cur:
                return default
            cur = cur[key]
        return str(cur) if cur is not None else default

    wrap_text = _env("PROMPTLINE_WRAP_WIDTH") or _read_config_file("list.wrap_width") or _base("list.wrap_width", "80")
    join = _env("PROMPTLINE_INLINE_JOIN") or _read_config_file("list.inline_join") or _base("list.inline_join", "or")
    # An empty prefix from the environment is honoured as-is
    error_prefix = _env("PROMPTLINE_ERROR_PREFIX")
    if error_prefix is None:
        error_prefix = _read_config_file("prompt.error_prefix") or _base("prompt.error_prefix", "Error: ")
    level = _env("PROMPTLINE_LOG_LEVEL") or _read_config_file("logging.level") or _base("logging.level", "WARNING")

    try:
        try:
            wrap_width = int(str(wrap_text).strip())
        except ValueError:
            wrap_width = -1  # rejected by ListConfig below
        cfg = AppConfig(
            layout=ListConfig(wrap_width=wrap_width, inline_join=join),
            prompt=PromptConfig(error_prefix=error_prefix),
            log=LoggingConfig(level=level),
        )
        return cfg
    except PydanticValidationError as e:
        logger.error("Invalid promptline configuration: %s", e)
        raise


def load_checked_config() -> AppConfig:
    """Load configuration for the prompting engine.

    Same as load_config, but invalid settings raise ConfigurationError.
    """
    try:
        return load_config()
    except PydanticValidationError as e:
        raise ConfigurationError(f"invalid promptline configuration: {e}", reason="config_invalid") from e


__all__ = [
    "AppConfig",
    "ListConfig",
    "PromptConfig",
    "LoggingConfig",
    "load_config",
    "load_checked_config",
]
