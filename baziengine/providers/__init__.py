"""Calendar conversion providers and their registry."""

from __future__ import annotations

import logging
from collections.abc import Callable

from .base import (
    BirthMoment,
    CalendarKind,
    CalendarProvider,
    CalendarResolution,
    ChartUnavailable,
    LunarDate,
)
from .lunar_provider import LunarPythonProvider

LOG = logging.getLogger(__name__)

__all__ = [
    "BirthMoment",
    "CalendarKind",
    "CalendarProvider",
    "CalendarResolution",
    "ChartUnavailable",
    "DEFAULT_PROVIDER",
    "LunarDate",
    "LunarPythonProvider",
    "get_provider",
    "list_providers",
    "register_provider",
]

DEFAULT_PROVIDER = LunarPythonProvider.provider_id

ProviderFactory = Callable[..., CalendarProvider]

_REGISTRY: dict[str, ProviderFactory] = {}


def register_provider(name: str, factory: ProviderFactory, *, replace: bool = False) -> None:
    """Register ``factory`` under ``name``; factories receive calendar options as kwargs."""

    key = name.strip().lower()
    if not key:
        raise ValueError("provider name must not be empty")
    if key in _REGISTRY and not replace:
        raise ValueError(f"Calendar provider '{key}' is already registered")
    _REGISTRY[key] = factory
    LOG.debug("Registered calendar provider %s", key)


def get_provider(name: str = DEFAULT_PROVIDER, **options: object) -> CalendarProvider:
    """Instantiate the provider registered under ``name``."""

    key = name.strip().lower()
    try:
        factory = _REGISTRY[key]
    except KeyError:
        known = ", ".join(sorted(_REGISTRY)) or "none"
        raise KeyError(f"Unknown calendar provider '{name}' (registered: {known})") from None
    return factory(**options)


def list_providers() -> list[str]:
    return sorted(_REGISTRY)


register_provider(DEFAULT_PROVIDER, LunarPythonProvider)
