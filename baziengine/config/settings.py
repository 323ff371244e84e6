"""Configuration models and helpers for baziengine settings."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

from ..providers import DEFAULT_PROVIDER, list_providers
from ..timelords.da_yun import DEFAULT_BAND_YEARS, DEFAULT_HORIZON_AGE, MAX_LUCK_PILLARS

LOG = logging.getLogger(__name__)

CURRENT_SETTINGS_SCHEMA_VERSION = 1

# -------------------- Settings Schema --------------------


class LuckCfg(BaseModel):
    """Da Yun sequencing parameters."""

    horizon_age: int = DEFAULT_HORIZON_AGE
    band_years: int = DEFAULT_BAND_YEARS
    max_pillars: int = MAX_LUCK_PILLARS

    @field_validator("horizon_age", "band_years", mode="before")
    @classmethod
    def _floor_positive(cls, value: int) -> int:
        return max(1, int(value))

    @field_validator("max_pillars", mode="before")
    @classmethod
    def _cap_max_pillars(cls, value: int) -> int:
        return max(1, min(MAX_LUCK_PILLARS, int(value)))


class CalendarCfg(BaseModel):
    """Calendar conversion provider selection."""

    provider: str = DEFAULT_PROVIDER
    day_boundary_sect: Literal[1, 2] = 2
    onset_sect: Literal[1, 2] = 1

    @field_validator("provider")
    @classmethod
    def _known_provider(cls, value: str) -> str:
        key = value.strip().lower()
        if key not in list_providers():
            raise ValueError(
                f"unknown calendar provider {value!r}; registered: {', '.join(list_providers())}"
            )
        return key


class Settings(BaseModel):
    """Top-level settings persisted to ``settings.yaml``."""

    schema_version: int = Field(default=CURRENT_SETTINGS_SCHEMA_VERSION)
    luck: LuckCfg = Field(default_factory=LuckCfg)
    calendar: CalendarCfg = Field(default_factory=CalendarCfg)

    @field_validator("schema_version")
    @classmethod
    def _supported_schema(cls, value: int) -> int:
        if value != CURRENT_SETTINGS_SCHEMA_VERSION:
            raise ValueError(
                f"settings schema {value} is not supported (expected {CURRENT_SETTINGS_SCHEMA_VERSION})"
            )
        return value


# -------------------- I/O Helpers --------------------

CONFIG_FILENAME = "settings.yaml"
HOME_ENV_VAR = "BAZIENGINE_HOME"


def get_config_home() -> Path:
    """Return ``$BAZIENGINE_HOME`` or ``~/.baziengine``; nothing is created."""

    override = os.environ.get(HOME_ENV_VAR, "").strip()
    return Path(override).expanduser() if override else Path.home() / ".baziengine"


def config_path() -> Path:
    return get_config_home() / CONFIG_FILENAME


def default_settings() -> Settings:
    return Settings()


def save_settings(settings: Settings, path: Optional[Path] = None) -> Path:
    """Write ``settings`` as YAML to ``path`` (default :func:`config_path`)."""

    target = Path(path) if path else config_path()
    target.parent.mkdir(parents=True, exist_ok=True)
    text = yaml.safe_dump(settings.model_dump(mode="json"), sort_keys=False, allow_unicode=True)
    target.write_text(text, encoding="utf-8")
    LOG.debug("Saved settings to %s", target)
    return target


def load_settings(path: Optional[Path] = None) -> Settings:
    """Read settings from ``path`` (default :func:`config_path`).

    A missing file yields :func:`default_settings` without touching disk.
    Malformed documents raise ``ValueError`` (pydantic's ``ValidationError``
    for schema violations such as an unknown provider or schema version).
    """

    source = Path(path) if path else config_path()
    if not source.exists():
        LOG.debug("No settings at %s; using defaults", source)
        return default_settings()

    raw = yaml.safe_load(source.read_text(encoding="utf-8"))
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ValueError(f"{source}: settings must be a YAML mapping, got {type(raw).__name__}")
    return Settings.model_validate(raw)


def ensure_default_config() -> Path:
    """Write default settings unless a file already exists; return its path."""

    target = config_path()
    if target.exists():
        return target
    return save_settings(default_settings(), target)
