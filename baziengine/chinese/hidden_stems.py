"""Hidden stems (藏干) stored within each Earthly Branch."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum
from types import MappingProxyType
from typing import Final, Mapping

from .constants import EARTHLY_BRANCHES, STEM_BY_CHINESE, EarthlyBranch, HeavenlyStem
from .ten_gods import RelationshipCategory, relationship_of


class QiRole(StrEnum):
    PRINCIPAL = "principal"
    SECONDARY = "secondary"
    RESIDUAL = "residual"


_ROLES: Final[tuple[QiRole, ...]] = (QiRole.PRINCIPAL, QiRole.SECONDARY, QiRole.RESIDUAL)


@dataclass(frozen=True)
class HiddenStem:
    """A stem latent in a branch, optionally tagged with its Ten God."""

    stem: HeavenlyStem
    role: QiRole
    relationship: RelationshipCategory | None = None

    def with_day_master(self, day_master: HeavenlyStem) -> HiddenStem:
        """Return a copy annotated with the relationship to ``day_master``."""

        return replace(self, relationship=relationship_of(day_master, self.stem))

    def to_dict(self) -> dict[str, object]:
        return {
            "stem": self.stem.chinese,
            "element": self.stem.element.value,
            "polarity": self.stem.polarity.value,
            "role": self.role.value,
            "relationship": self.relationship.value if self.relationship else None,
        }


# Principal qi first. Cardinal branches hold one stem, Wu and Hai two, the
# seasonal transition branches three.
HIDDEN_STEM_TABLE: Final[Mapping[str, str]] = MappingProxyType(
    {
        "子": "癸",
        "丑": "己癸辛",
        "寅": "甲丙戊",
        "卯": "乙",
        "辰": "戊乙癸",
        "巳": "丙戊庚",
        "午": "丁己",
        "未": "己丁乙",
        "申": "庚壬戊",
        "酉": "辛",
        "戌": "戊辛丁",
        "亥": "壬甲",
    }
)

_HIDDEN_BY_BRANCH: Final[tuple[tuple[HiddenStem, ...], ...]] = tuple(
    tuple(
        HiddenStem(stem=STEM_BY_CHINESE[char], role=_ROLES[position])
        for position, char in enumerate(HIDDEN_STEM_TABLE[branch.chinese])
    )
    for branch in EARTHLY_BRANCHES
)


def hidden_stems_of(branch: EarthlyBranch) -> tuple[HiddenStem, ...]:
    """Return the 1-3 hidden stems of ``branch``, principal qi first."""

    return _HIDDEN_BY_BRANCH[branch.index]


__all__ = ["HIDDEN_STEM_TABLE", "HiddenStem", "QiRole", "hidden_stems_of"]
