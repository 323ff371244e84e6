"""Utilities for working with the sixty Jia-Zi combinations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .constants import (
    BRANCH_BY_CHINESE,
    EARTHLY_BRANCHES,
    HEAVENLY_STEMS,
    STEM_BY_CHINESE,
    EarthlyBranch,
    HeavenlyStem,
)

SEXAGENARY_CYCLE_LENGTH: Final[int] = 60

# Gregorian year 4 CE was a Jia-Zi year.
_YEAR_ZERO_OFFSET: Final[int] = 4


class InvalidPillar(ValueError):
    """Raised when a stem/branch pairing is not one of the sixty valid pillars."""


@dataclass(frozen=True)
class Pillar:
    """A Heavenly Stem and Earthly Branch pairing from the sexagenary cycle.

    Only pairings whose stem and branch share polarity exist in the cycle;
    any other combination raises :class:`InvalidPillar` on construction.
    """

    stem: HeavenlyStem
    branch: EarthlyBranch

    def __post_init__(self) -> None:
        if self.stem.index % 2 != self.branch.index % 2:
            raise InvalidPillar(
                f"Invalid stem/branch pairing: {self.stem.chinese}{self.branch.chinese}"
            )

    @property
    def cycle_index(self) -> int:
        return sexagenary_index(self.stem.index, self.branch.index)

    def label(self) -> str:
        """Return the two-character label (e.g., ``丙子``)."""

        return f"{self.stem.chinese}{self.branch.chinese}"

    def pinyin(self) -> str:
        """Return a romanised stem-branch label (e.g., ``Bing-Zi``)."""

        return f"{self.stem.name}-{self.branch.name}"

    def shifted(self, steps: int) -> Pillar:
        """Return the pillar ``steps`` positions away along the cycle."""

        return pillar_for_index(self.cycle_index + steps)

    def __str__(self) -> str:
        return self.label()

    @classmethod
    def from_indices(cls, stem_index: int, branch_index: int) -> Pillar:
        if not 0 <= stem_index < len(HEAVENLY_STEMS):
            raise InvalidPillar(f"Stem index out of range: {stem_index}")
        if not 0 <= branch_index < len(EARTHLY_BRANCHES):
            raise InvalidPillar(f"Branch index out of range: {branch_index}")
        return cls(HEAVENLY_STEMS[stem_index], EARTHLY_BRANCHES[branch_index])

    @classmethod
    def from_label(cls, label: str) -> Pillar:
        """Parse a two-character label such as ``癸巳``."""

        text = label.strip()
        if len(text) != 2:
            raise InvalidPillar(f"Pillar labels have two characters, got {label!r}")
        stem = STEM_BY_CHINESE.get(text[0])
        branch = BRANCH_BY_CHINESE.get(text[1])
        if stem is None or branch is None:
            raise InvalidPillar(f"Unknown stem or branch in {label!r}")
        return cls(stem, branch)


def sexagenary_index(stem_index: int, branch_index: int) -> int:
    """Return the 0-59 index for the provided stem/branch combination."""

    target_stem = stem_index % 10
    target_branch = branch_index % 12
    for idx in range(SEXAGENARY_CYCLE_LENGTH):
        if idx % 10 == target_stem and idx % 12 == target_branch:
            return idx
    msg = f"Invalid stem/branch pairing: stem={stem_index}, branch={branch_index}"
    raise InvalidPillar(msg)


def pillar_for_index(index: int) -> Pillar:
    """Return the pillar at ``index`` (wrapped into 0-59)."""

    idx = index % SEXAGENARY_CYCLE_LENGTH
    return Pillar(HEAVENLY_STEMS[idx % 10], EARTHLY_BRANCHES[idx % 12])


def year_cycle_index(year: int) -> int:
    """Return the sexagenary index conventionally labelling Gregorian ``year``."""

    return (year - _YEAR_ZERO_OFFSET) % SEXAGENARY_CYCLE_LENGTH


def annual_pillar(year: int) -> Pillar:
    """Return the pillar of the solar year ``year`` (from Start of Spring)."""

    return pillar_for_index(year_cycle_index(year))


SEXAGENARY_CYCLE: Final[tuple[Pillar, ...]] = tuple(
    pillar_for_index(idx) for idx in range(SEXAGENARY_CYCLE_LENGTH)
)


__all__ = [
    "InvalidPillar",
    "Pillar",
    "SEXAGENARY_CYCLE",
    "SEXAGENARY_CYCLE_LENGTH",
    "annual_pillar",
    "pillar_for_index",
    "sexagenary_index",
    "year_cycle_index",
]
