"""Ten Gods (十神) relationships between stems and the Day Master.

The category of any stem relative to the Day Master is fixed by the element
generation and control cycles together with polarity agreement. The full
10x10 matrix is computed once at import and exposed read-only.
"""

from __future__ import annotations

from enum import StrEnum
from types import MappingProxyType
from typing import Final, Mapping

from .constants import HEAVENLY_STEMS, Element, HeavenlyStem


class RelationshipCategory(StrEnum):
    """Ten-fold relationship label, plus the distinguished Day Master marker."""

    SELF = "日主"
    COMPANION = "比肩"
    ROB_WEALTH = "劫财"
    EATING_GOD = "食神"
    HURTING_OFFICER = "伤官"
    INDIRECT_WEALTH = "偏财"
    DIRECT_WEALTH = "正财"
    SEVEN_KILLINGS = "七杀"
    DIRECT_OFFICER = "正官"
    INDIRECT_RESOURCE = "偏印"
    DIRECT_RESOURCE = "正印"

    @property
    def family(self) -> str | None:
        """Return the conceptual family (peer, output, ...) or ``None`` for SELF."""

        return _FAMILY_BY_CATEGORY.get(self)


TEN_GODS: Final[tuple[RelationshipCategory, ...]] = tuple(
    category for category in RelationshipCategory if category is not RelationshipCategory.SELF
)

# Production cycle: Wood -> Fire -> Earth -> Metal -> Water -> Wood
PRODUCTION_CYCLE: Final[Mapping[Element, Element]] = MappingProxyType(
    {
        Element.WOOD: Element.FIRE,
        Element.FIRE: Element.EARTH,
        Element.EARTH: Element.METAL,
        Element.METAL: Element.WATER,
        Element.WATER: Element.WOOD,
    }
)

# Control cycle: Wood -> Earth -> Water -> Fire -> Metal -> Wood
CONTROL_CYCLE: Final[Mapping[Element, Element]] = MappingProxyType(
    {
        Element.WOOD: Element.EARTH,
        Element.EARTH: Element.WATER,
        Element.WATER: Element.FIRE,
        Element.FIRE: Element.METAL,
        Element.METAL: Element.WOOD,
    }
)

# (family, same_polarity) -> category
_CATEGORY_BY_FAMILY: Final[Mapping[tuple[str, bool], RelationshipCategory]] = MappingProxyType(
    {
        ("peer", True): RelationshipCategory.COMPANION,
        ("peer", False): RelationshipCategory.ROB_WEALTH,
        ("output", True): RelationshipCategory.EATING_GOD,
        ("output", False): RelationshipCategory.HURTING_OFFICER,
        ("wealth", True): RelationshipCategory.INDIRECT_WEALTH,
        ("wealth", False): RelationshipCategory.DIRECT_WEALTH,
        ("authority", True): RelationshipCategory.SEVEN_KILLINGS,
        ("authority", False): RelationshipCategory.DIRECT_OFFICER,
        ("resource", True): RelationshipCategory.INDIRECT_RESOURCE,
        ("resource", False): RelationshipCategory.DIRECT_RESOURCE,
    }
)

_FAMILY_BY_CATEGORY: Final[Mapping[RelationshipCategory, str]] = MappingProxyType(
    {category: family for (family, _), category in _CATEGORY_BY_FAMILY.items()}
)


def element_family(day_master: Element, other: Element) -> str:
    """Return the family of ``other`` as seen from the Day Master's element."""

    if day_master is other:
        return "peer"
    if PRODUCTION_CYCLE[day_master] is other:
        return "output"
    if CONTROL_CYCLE[day_master] is other:
        return "wealth"
    if CONTROL_CYCLE[other] is day_master:
        return "authority"
    if PRODUCTION_CYCLE[other] is day_master:
        return "resource"
    raise ValueError(f"No elemental relationship between {day_master} and {other}")


def _derive(day_master: HeavenlyStem, other: HeavenlyStem) -> RelationshipCategory:
    family = element_family(day_master.element, other.element)
    return _CATEGORY_BY_FAMILY[(family, day_master.polarity is other.polarity)]


TEN_GOD_MATRIX: Final[tuple[tuple[RelationshipCategory, ...], ...]] = tuple(
    tuple(_derive(day_master, other) for other in HEAVENLY_STEMS)
    for day_master in HEAVENLY_STEMS
)


def ten_god(day_master: HeavenlyStem, other: HeavenlyStem) -> RelationshipCategory:
    """Return the strict ten-fold category; identical stems map to 比肩."""

    return TEN_GOD_MATRIX[day_master.index][other.index]


def relationship_of(day_master: HeavenlyStem, other: HeavenlyStem) -> RelationshipCategory:
    """Return the relationship of ``other`` to ``day_master``.

    ``other`` identical to the Day Master yields :attr:`RelationshipCategory.SELF`.
    """

    if other == day_master:
        return RelationshipCategory.SELF
    return ten_god(day_master, other)


__all__ = [
    "CONTROL_CYCLE",
    "PRODUCTION_CYCLE",
    "RelationshipCategory",
    "TEN_GODS",
    "TEN_GOD_MATRIX",
    "element_family",
    "relationship_of",
    "ten_god",
]
