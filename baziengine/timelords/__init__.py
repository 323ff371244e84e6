"""Timelord techniques: Da Yun luck pillars and annual pillars."""

from __future__ import annotations

from .da_yun import (
    DEFAULT_BAND_YEARS,
    DEFAULT_HORIZON_AGE,
    MAX_LUCK_PILLARS,
    annual_pillars,
    luck_direction,
    sequence_luck_pillars,
)
from .models import AnnualPillar, Direction, LuckPillar, LuckPillarTimeline, OnsetAge

__all__ = [
    "DEFAULT_BAND_YEARS",
    "DEFAULT_HORIZON_AGE",
    "MAX_LUCK_PILLARS",
    "AnnualPillar",
    "Direction",
    "LuckPillar",
    "LuckPillarTimeline",
    "OnsetAge",
    "annual_pillars",
    "luck_direction",
    "sequence_luck_pillars",
]
