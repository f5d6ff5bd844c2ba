"""Configuration helpers for environment settings and YAML configs."""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULTS: dict[str, Any] = {
    "osascript": "osascript",
    "language": "JavaScript",
    "timeout": None,
    "poll_interval": 0.05,
}


def _merge_dict(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    result = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = _merge_dict(result[key], value)
        else:
            result[key] = value
    return result


def _read_yaml(path: str | Path) -> dict[str, Any]:
    with Path(path).open("r", encoding="utf-8") as fh:
        file_cfg = yaml.safe_load(fh) or {}
    if not isinstance(file_cfg, dict):
        raise ValueError(f"Configuration file {path} must contain a mapping")
    return file_cfg


def load_config(path: str | Path | None, overrides: dict[str, Any] | None = None) -> dict[str, Any]:
    config = copy.deepcopy(DEFAULTS)
    if path:
        config = _merge_dict(config, _read_yaml(path))
    if overrides:
        config = _merge_dict(config, overrides)
    return config


class OsaSettings(BaseSettings):
    """Interpreter settings, read from ``OSAJS_*`` environment variables."""

    model_config = SettingsConfigDict(env_prefix="OSAJS_", env_file=".env", case_sensitive=False, extra="ignore")

    osascript: str = Field(default="osascript", min_length=1)
    language: Literal["JavaScript"] = "JavaScript"
    timeout: float | None = Field(default=None, gt=0)
    poll_interval: float = Field(default=0.05, gt=0)


def load_settings(path: str | Path | None = None, overrides: dict[str, Any] | None = None) -> OsaSettings:
    """Return settings from the environment, optionally layered with a YAML file.

    Values from *path* and *overrides* take precedence over the environment.
    """

    explicit: dict[str, Any] = {}
    if path:
        explicit = _merge_dict(explicit, _read_yaml(path))
    if overrides:
        explicit = _merge_dict(explicit, overrides)
    return OsaSettings(**explicit)
