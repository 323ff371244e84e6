"""baziengine package bootstrap and curated public API surface."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version as _get_version

from .chart import ChartResult, build_chart
from .chinese import FourPillarsChart, Gender, Pillar, compose_four_pillars
from .config import Settings, default_settings, load_settings
from .providers import BirthMoment, CalendarKind, ChartUnavailable
from .timelords import LuckPillarTimeline, OnsetAge, sequence_luck_pillars

try:
    __version__ = _get_version("baziengine")
except PackageNotFoundError:  # pragma: no cover - running from a source checkout
    __version__ = "0.0.0"


def get_version() -> str:
    """Return the resolved baziengine package version."""

    return __version__


__all__ = [
    "__version__",
    "get_version",
    "BirthMoment",
    "CalendarKind",
    "ChartResult",
    "ChartUnavailable",
    "FourPillarsChart",
    "Gender",
    "LuckPillarTimeline",
    "OnsetAge",
    "Pillar",
    "Settings",
    "build_chart",
    "compose_four_pillars",
    "default_settings",
    "load_settings",
    "sequence_luck_pillars",
]
