"""Sexagenary cycle tables and Four Pillars derivations."""

from __future__ import annotations

from .constants import (
    EARTHLY_BRANCHES,
    HEAVENLY_STEMS,
    SHI_CHEN,
    EarthlyBranch,
    Element,
    Gender,
    HeavenlyStem,
    Polarity,
    ShiChen,
    shi_chen_for_hour,
    zodiac_for_branch,
)
from .elements import ElementTally, tally_elements
from .four_pillars import FourPillarsChart, compose_four_pillars
from .hidden_stems import HiddenStem, QiRole, hidden_stems_of
from .na_yin import NaYin, na_yin_of
from .pillars import AnnotatedPillar, annotate_pillar
from .sexagenary import (
    SEXAGENARY_CYCLE,
    InvalidPillar,
    Pillar,
    annual_pillar,
    pillar_for_index,
    sexagenary_index,
)
from .ten_gods import RelationshipCategory, TEN_GODS, relationship_of, ten_god

__all__ = [
    "EARTHLY_BRANCHES",
    "HEAVENLY_STEMS",
    "SHI_CHEN",
    "SEXAGENARY_CYCLE",
    "TEN_GODS",
    "AnnotatedPillar",
    "EarthlyBranch",
    "Element",
    "ElementTally",
    "FourPillarsChart",
    "Gender",
    "HeavenlyStem",
    "HiddenStem",
    "InvalidPillar",
    "NaYin",
    "Pillar",
    "Polarity",
    "QiRole",
    "RelationshipCategory",
    "ShiChen",
    "annotate_pillar",
    "annual_pillar",
    "compose_four_pillars",
    "hidden_stems_of",
    "na_yin_of",
    "pillar_for_index",
    "relationship_of",
    "sexagenary_index",
    "shi_chen_for_hour",
    "tally_elements",
    "ten_god",
    "zodiac_for_branch",
]
