"""Configuration loading for the space cycler."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError, field_validator

from core.errors import SettingsError

DEFAULT_CONFIG_PATH = Path("~/.config/yabai-cycle-spaces/config.yaml")

DEFAULTS: dict[str, Any] = {
    "yabai": {"executable": "yabai"},
    "cycle": {"previous_underflow": "wrap"},
    "logging": {"level": "WARNING"},
}

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


class YabaiSettings(BaseModel):
    model_config = ConfigDict(extra="ignore")

    executable: StrictStr = Field(min_length=1)


class CycleSettings(BaseModel):
    model_config = ConfigDict(extra="ignore")

    previous_underflow: Literal["wrap", "clamp", "reject"]


class LoggingSettings(BaseModel):
    model_config = ConfigDict(extra="ignore")

    level: StrictStr

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level {value!r}, expected one of {', '.join(LOG_LEVELS)}")
        return level


class Settings(BaseModel):
    """Validated shape of the merged configuration."""

    model_config = ConfigDict(extra="ignore")

    yabai: YabaiSettings
    cycle: CycleSettings
    logging: LoggingSettings


def load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML from file, returning empty mapping when missing."""
    if not path.exists():
        return {}
    try:
        with path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
    except yaml.YAMLError as exc:
        raise SettingsError(f"Config file is not valid YAML: {path}") from exc
    if not isinstance(data, dict):
        raise SettingsError(f"Config file must contain a mapping: {path}")
    return data


def merge_dicts(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge dictionaries."""
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_effective_config(path: Path | None = None) -> dict[str, Any]:
    """Merge the user's config file over the built-in defaults and validate it."""
    config_path = (path or DEFAULT_CONFIG_PATH).expanduser()
    merged = merge_dicts(DEFAULTS, load_yaml(config_path))
    try:
        settings = Settings.model_validate(merged)
    except ValidationError as exc:
        raise SettingsError(f"Invalid config file {config_path}: {exc}") from exc
    return settings.model_dump()
