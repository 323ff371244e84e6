"""Core data structures for luck-pillar period calculations."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum

from ..chinese.pillars import AnnotatedPillar

__all__ = ["AnnualPillar", "Direction", "LuckPillar", "LuckPillarTimeline", "OnsetAge"]


class Direction(StrEnum):
    FORWARD = "forward"
    BACKWARD = "backward"

    @property
    def step(self) -> int:
        return 1 if self is Direction.FORWARD else -1


@dataclass(frozen=True)
class OnsetAge:
    """Offset from birth to the first luck pillar (起运)."""

    years: int
    months: int = 0
    days: int = 0

    def __post_init__(self) -> None:
        if min(self.years, self.months, self.days) < 0:
            raise ValueError("onset offsets must be non-negative")

    def label(self) -> str:
        """Return the traditional description, e.g. ``8年4个月10天后起运``."""

        return f"{self.years}年{self.months}个月{self.days}天后起运"

    def to_dict(self) -> dict[str, object]:
        return {
            "years": self.years,
            "months": self.months,
            "days": self.days,
            "label": self.label(),
        }


@dataclass(frozen=True)
class LuckPillar:
    """A single luck pillar bounded by half-open age and year ranges."""

    index: int
    pillar: AnnotatedPillar
    start_age: int
    end_age: int
    start_year: int
    end_year: int

    def contains_age(self, age: int) -> bool:
        """Return ``True`` when ``age`` lies within ``[start_age, end_age)``."""

        return self.start_age <= age < self.end_age

    def contains_year(self, year: int) -> bool:
        return self.start_year <= year < self.end_year

    def label(self) -> str:
        return self.pillar.label()

    def to_dict(self) -> dict[str, object]:
        """Return a serialisable mapping describing the period."""

        return {
            "index": self.index,
            "label": self.pillar.label(),
            "start_age": self.start_age,
            "end_age": self.end_age,
            "start_year": self.start_year,
            "end_year": self.end_year,
            "pillar": self.pillar.to_dict(),
        }


@dataclass(frozen=True)
class AnnualPillar:
    """The pillar ruling one calendar year (流年) and the native's age in it."""

    year: int
    age: int
    pillar: AnnotatedPillar

    def to_dict(self) -> dict[str, object]:
        return {"year": self.year, "age": self.age, "label": self.pillar.label()}


@dataclass(frozen=True)
class LuckPillarTimeline:
    """Contiguous sequence of luck pillars walking one direction through the cycle."""

    direction: Direction
    onset_age: int
    horizon_age: int
    birth_year: int
    pillars: tuple[LuckPillar, ...]

    def __iter__(self) -> Iterator[LuckPillar]:
        return iter(self.pillars)

    def __len__(self) -> int:
        return len(self.pillars)

    def __getitem__(self, index: int) -> LuckPillar:
        return self.pillars[index]

    def labels(self) -> list[str]:
        """Return the ordered list of pillar labels."""

        return [period.label() for period in self.pillars]

    def at_age(self, age: int) -> LuckPillar | None:
        """Return the luck pillar active at ``age`` or ``None`` outside the timeline."""

        for period in self.pillars:
            if period.contains_age(age):
                return period
        return None

    def at_year(self, year: int) -> LuckPillar | None:
        """Return the luck pillar active during calendar ``year``."""

        for period in self.pillars:
            if period.contains_year(year):
                return period
        return None

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-serialisable payload."""

        return {
            "direction": self.direction.value,
            "onset_age": self.onset_age,
            "horizon_age": self.horizon_age,
            "birth_year": self.birth_year,
            "pillars": [period.to_dict() for period in self.pillars],
        }
