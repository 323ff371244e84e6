"""Process bootstrap helpers."""

from __future__ import annotations

from .logging import LEVEL_ENV_VARS, configure_logging, parse_level

__all__ = ["LEVEL_ENV_VARS", "configure_logging", "parse_level"]
