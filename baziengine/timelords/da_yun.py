"""Da Yun (大运) luck-pillar sequencer.

Luck pillars walk the sexagenary cycle away from the natal month pillar,
forward for a yang year stem with a male native or a yin year stem with a
female native, and backward otherwise. Each pillar rules a band of
``band_years`` years starting at the externally computed onset age.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Final

from ..chinese.constants import Gender, HeavenlyStem, Polarity
from ..chinese.pillars import annotate_pillar
from ..chinese.sexagenary import Pillar, annual_pillar
from .models import AnnualPillar, Direction, LuckPillar, LuckPillarTimeline

__all__ = [
    "DEFAULT_BAND_YEARS",
    "DEFAULT_HORIZON_AGE",
    "MAX_LUCK_PILLARS",
    "annual_pillars",
    "luck_direction",
    "sequence_luck_pillars",
]

DEFAULT_HORIZON_AGE: Final[int] = 90
DEFAULT_BAND_YEARS: Final[int] = 10
MAX_LUCK_PILLARS: Final[int] = 12


def luck_direction(year_polarity: Polarity, gender: Gender) -> Direction:
    """Return the walking direction for ``gender`` and the year stem polarity."""

    yang_year = year_polarity is Polarity.YANG
    if (gender is Gender.MALE and yang_year) or (gender is Gender.FEMALE and not yang_year):
        return Direction.FORWARD
    return Direction.BACKWARD


def _cycle(start: Pillar, direction: Direction) -> Iterable[Pillar]:
    current = start
    while True:
        current = current.shifted(direction.step)
        yield current


def sequence_luck_pillars(
    month_pillar: Pillar,
    year_polarity: Polarity,
    gender: Gender,
    onset_age: int,
    day_master: HeavenlyStem,
    birth_year: int,
    *,
    horizon_age: int = DEFAULT_HORIZON_AGE,
    band_years: int = DEFAULT_BAND_YEARS,
    max_pillars: int = MAX_LUCK_PILLARS,
) -> LuckPillarTimeline:
    """Return the luck-pillar timeline tiling ``[onset_age, horizon_age)``.

    Parameters
    ----------
    month_pillar:
        Natal month pillar; the first luck pillar is its neighbour in the
        walking direction.
    year_polarity, gender:
        Inputs of the direction rule (see :func:`luck_direction`).
    onset_age:
        Age in whole years at which the first band starts.
    day_master:
        Natal day stem used to annotate every luck pillar.
    birth_year:
        Gregorian birth year used to derive the calendar-year ranges.
    horizon_age:
        Bands stop once their start would reach this age; the final band's end
        is clamped to it.
    band_years:
        Width of each band in years.
    max_pillars:
        Upper bound on the number of emitted bands (at most 12).
    """

    if onset_age < 0:
        raise ValueError("onset_age must be non-negative")
    if band_years < 1:
        raise ValueError("band_years must be >= 1")
    if horizon_age < 1:
        raise ValueError("horizon_age must be >= 1")
    if not 1 <= max_pillars <= MAX_LUCK_PILLARS:
        raise ValueError(f"max_pillars must be within 1-{MAX_LUCK_PILLARS}")

    direction = luck_direction(year_polarity, gender)
    periods: list[LuckPillar] = []
    start_age = onset_age
    cycle = _cycle(month_pillar, direction)

    while start_age < horizon_age and len(periods) < max_pillars:
        pillar = next(cycle)
        end_age = min(start_age + band_years, horizon_age)
        periods.append(
            LuckPillar(
                index=len(periods),
                pillar=annotate_pillar(day_master, pillar, "luck"),
                start_age=start_age,
                end_age=end_age,
                start_year=birth_year + start_age,
                end_year=birth_year + end_age,
            )
        )
        start_age = end_age

    return LuckPillarTimeline(
        direction=direction,
        onset_age=onset_age,
        horizon_age=horizon_age,
        birth_year=birth_year,
        pillars=tuple(periods),
    )


def annual_pillars(
    period: LuckPillar,
    day_master: HeavenlyStem,
    birth_year: int,
) -> tuple[AnnualPillar, ...]:
    """Return the annual pillars (流年) for every calendar year of ``period``."""

    return tuple(
        AnnualPillar(
            year=year,
            age=year - birth_year,
            pillar=annotate_pillar(day_master, annual_pillar(year), "annual"),
        )
        for year in range(period.start_year, period.end_year)
    )
