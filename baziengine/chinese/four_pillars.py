"""Four Pillars (BaZi) chart composition."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from .constants import HeavenlyStem, zodiac_for_branch
from .pillars import PILLAR_POSITIONS, AnnotatedPillar, annotate_pillar
from .sexagenary import Pillar


@dataclass(frozen=True)
class FourPillarsChart:
    """Container for the annotated year, month, day, and hour pillars."""

    year: AnnotatedPillar
    month: AnnotatedPillar
    day: AnnotatedPillar
    hour: AnnotatedPillar

    @property
    def day_master(self) -> HeavenlyStem:
        return self.day.stem

    @property
    def zodiac(self) -> str:
        """Chinese zodiac animal of the year branch (e.g. ``鼠``)."""

        return zodiac_for_branch(self.year.branch)

    @property
    def zodiac_animal(self) -> str:
        return self.year.branch.animal

    def ordered_pillars(self) -> Sequence[AnnotatedPillar]:
        return (self.year, self.month, self.day, self.hour)

    def labels(self) -> list[str]:
        return [pillar.label() for pillar in self.ordered_pillars()]

    def __iter__(self) -> Iterator[AnnotatedPillar]:
        return iter(self.ordered_pillars())

    def to_dict(self) -> dict[str, object]:
        return {pillar.position: pillar.to_dict() for pillar in self.ordered_pillars()}


def compose_four_pillars(
    year: Pillar | str,
    month: Pillar | str,
    day: Pillar | str,
    hour: Pillar | str,
) -> FourPillarsChart:
    """Annotate four raw pillars using the day stem as Day Master."""

    raw = dict(zip(PILLAR_POSITIONS, (year, month, day, hour)))
    day_pillar = annotate_pillar(_stem_of(day), day, "day")
    day_master = day_pillar.stem
    annotated = {
        position: day_pillar
        if position == "day"
        else annotate_pillar(day_master, value, position)
        for position, value in raw.items()
    }
    return FourPillarsChart(**annotated)


def _stem_of(raw: Pillar | str) -> HeavenlyStem:
    pillar = raw if isinstance(raw, Pillar) else Pillar.from_label(raw)
    return pillar.stem


__all__ = ["FourPillarsChart", "compose_four_pillars"]
