"""Root logger setup for the baziengine CLI."""

from __future__ import annotations

import logging
import os
from typing import Final, TextIO

__all__ = ["LEVEL_ENV_VARS", "configure_logging", "parse_level"]

# Checked in order; the first parsable value wins.
LEVEL_ENV_VARS: Final[tuple[str, ...]] = ("BAZIENGINE_LOG_LEVEL", "LOG_LEVEL")

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"


def parse_level(value: str | int | None) -> int | None:
    """Return the numeric level for a name (any case) or number, else ``None``."""

    if value is None or isinstance(value, int):
        return value
    text = value.strip()
    if text.isdigit():
        return int(text)
    return logging.getLevelNamesMapping().get(text.upper())


def configure_logging(*, level: str | int | None = None, stream: TextIO | None = None) -> int:
    """Install a single stderr (or ``stream``) handler on the root logger.

    An explicit ``level`` takes precedence over :data:`LEVEL_ENV_VARS`;
    values that cannot be parsed are skipped and the fallback is ``INFO``.
    Returns the level applied.
    """

    candidates = [level] if level is not None else [os.environ.get(name) for name in LEVEL_ENV_VARS]
    effective = logging.INFO
    for candidate in candidates:
        parsed = parse_level(candidate)
        if parsed is not None:
            effective = parsed
            break

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(_FORMAT, _DATEFMT))
    logging.basicConfig(level=effective, handlers=[handler], force=True)
    return effective
