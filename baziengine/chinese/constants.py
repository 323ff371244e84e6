"""Lookup tables for Heavenly Stems, Earthly Branches and the Five Elements."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType
from typing import Final, Mapping


class Element(StrEnum):
    """One of the Five Elements (五行)."""

    WOOD = "wood"
    FIRE = "fire"
    EARTH = "earth"
    METAL = "metal"
    WATER = "water"

    @property
    def chinese(self) -> str:
        return _ELEMENT_CHINESE[self]


class Polarity(StrEnum):
    YANG = "yang"
    YIN = "yin"


class Gender(StrEnum):
    """Gender used to orient the luck-pillar sequence."""

    MALE = "male"
    FEMALE = "female"

    @classmethod
    def parse(cls, value: str | Gender) -> Gender:
        """Return the gender for ``value`` accepting English or Chinese spellings."""

        if isinstance(value, Gender):
            return value
        key = str(value).strip().lower()
        try:
            return _GENDER_ALIASES[key]
        except KeyError:
            raise ValueError(f"Unknown gender: {value!r}") from None


_ELEMENT_CHINESE: Final[Mapping[Element, str]] = MappingProxyType(
    {
        Element.WOOD: "木",
        Element.FIRE: "火",
        Element.EARTH: "土",
        Element.METAL: "金",
        Element.WATER: "水",
    }
)

ELEMENT_BY_CHINESE: Final[Mapping[str, Element]] = MappingProxyType(
    {label: element for element, label in _ELEMENT_CHINESE.items()}
)

_GENDER_ALIASES: Final[Mapping[str, Gender]] = MappingProxyType(
    {
        "male": Gender.MALE,
        "m": Gender.MALE,
        "man": Gender.MALE,
        "男": Gender.MALE,
        "1": Gender.MALE,
        "female": Gender.FEMALE,
        "f": Gender.FEMALE,
        "woman": Gender.FEMALE,
        "女": Gender.FEMALE,
        "0": Gender.FEMALE,
    }
)


@dataclass(frozen=True)
class HeavenlyStem:
    """Representation of one of the ten Heavenly Stems (天干)."""

    index: int
    name: str
    chinese: str
    element: Element
    polarity: Polarity

    @property
    def is_yang(self) -> bool:
        return self.polarity is Polarity.YANG

    def __str__(self) -> str:
        return self.chinese


@dataclass(frozen=True)
class EarthlyBranch:
    """Representation of one of the twelve Earthly Branches (地支)."""

    index: int
    name: str
    chinese: str
    animal: str
    animal_chinese: str
    element: Element
    polarity: Polarity

    def __str__(self) -> str:
        return self.chinese


HEAVENLY_STEMS: Final[tuple[HeavenlyStem, ...]] = (
    HeavenlyStem(0, "Jia", "甲", Element.WOOD, Polarity.YANG),
    HeavenlyStem(1, "Yi", "乙", Element.WOOD, Polarity.YIN),
    HeavenlyStem(2, "Bing", "丙", Element.FIRE, Polarity.YANG),
    HeavenlyStem(3, "Ding", "丁", Element.FIRE, Polarity.YIN),
    HeavenlyStem(4, "Wu", "戊", Element.EARTH, Polarity.YANG),
    HeavenlyStem(5, "Ji", "己", Element.EARTH, Polarity.YIN),
    HeavenlyStem(6, "Geng", "庚", Element.METAL, Polarity.YANG),
    HeavenlyStem(7, "Xin", "辛", Element.METAL, Polarity.YIN),
    HeavenlyStem(8, "Ren", "壬", Element.WATER, Polarity.YANG),
    HeavenlyStem(9, "Gui", "癸", Element.WATER, Polarity.YIN),
)


EARTHLY_BRANCHES: Final[tuple[EarthlyBranch, ...]] = (
    EarthlyBranch(0, "Zi", "子", "Rat", "鼠", Element.WATER, Polarity.YANG),
    EarthlyBranch(1, "Chou", "丑", "Ox", "牛", Element.EARTH, Polarity.YIN),
    EarthlyBranch(2, "Yin", "寅", "Tiger", "虎", Element.WOOD, Polarity.YANG),
    EarthlyBranch(3, "Mao", "卯", "Rabbit", "兔", Element.WOOD, Polarity.YIN),
    EarthlyBranch(4, "Chen", "辰", "Dragon", "龙", Element.EARTH, Polarity.YANG),
    EarthlyBranch(5, "Si", "巳", "Snake", "蛇", Element.FIRE, Polarity.YIN),
    EarthlyBranch(6, "Wu", "午", "Horse", "马", Element.FIRE, Polarity.YANG),
    EarthlyBranch(7, "Wei", "未", "Goat", "羊", Element.EARTH, Polarity.YIN),
    EarthlyBranch(8, "Shen", "申", "Monkey", "猴", Element.METAL, Polarity.YANG),
    EarthlyBranch(9, "You", "酉", "Rooster", "鸡", Element.METAL, Polarity.YIN),
    EarthlyBranch(10, "Xu", "戌", "Dog", "狗", Element.EARTH, Polarity.YANG),
    EarthlyBranch(11, "Hai", "亥", "Pig", "猪", Element.WATER, Polarity.YIN),
)

STEM_BY_CHINESE: Final[Mapping[str, HeavenlyStem]] = MappingProxyType(
    {stem.chinese: stem for stem in HEAVENLY_STEMS}
)
BRANCH_BY_CHINESE: Final[Mapping[str, EarthlyBranch]] = MappingProxyType(
    {branch.chinese: branch for branch in EARTHLY_BRANCHES}
)


@dataclass(frozen=True)
class ShiChen:
    """A two-hour period (时辰) named after its Earthly Branch."""

    branch: EarthlyBranch
    start_hour: int
    end_hour: int

    @property
    def name(self) -> str:
        return f"{self.branch.chinese}时"

    def label(self) -> str:
        """Return the display label, e.g. ``申时 (15:00-17:00)``."""

        return f"{self.name} ({self.start_hour:02d}:00-{self.end_hour:02d}:00)"


# The Zi period straddles midnight: 23:00-01:00.
SHI_CHEN: Final[tuple[ShiChen, ...]] = tuple(
    ShiChen(branch, (2 * branch.index - 1) % 24, (2 * branch.index + 1) % 24)
    for branch in EARTHLY_BRANCHES
)


def shi_chen_for_hour(hour: int) -> ShiChen:
    """Return the 时辰 containing clock ``hour`` (0-23)."""

    if not 0 <= hour <= 23:
        raise ValueError(f"hour must be within 0-23, got {hour}")
    return SHI_CHEN[((hour + 1) // 2) % 12]


def zodiac_for_branch(branch: EarthlyBranch) -> str:
    """Return the Chinese zodiac animal (生肖) keyed by ``branch``."""

    return EARTHLY_BRANCHES[branch.index].animal_chinese


__all__ = [
    "BRANCH_BY_CHINESE",
    "EARTHLY_BRANCHES",
    "ELEMENT_BY_CHINESE",
    "EarthlyBranch",
    "Element",
    "Gender",
    "HEAVENLY_STEMS",
    "HeavenlyStem",
    "Polarity",
    "SHI_CHEN",
    "STEM_BY_CHINESE",
    "ShiChen",
    "shi_chen_for_hour",
    "zodiac_for_branch",
]
