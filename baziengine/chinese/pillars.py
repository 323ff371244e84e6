"""Pillar annotation: elements, Ten Gods, hidden stems and Na Yin."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .constants import EarthlyBranch, Element, HeavenlyStem
from .hidden_stems import HiddenStem, hidden_stems_of
from .na_yin import NaYin, na_yin_of
from .sexagenary import InvalidPillar, Pillar
from .ten_gods import RelationshipCategory, relationship_of

PILLAR_POSITIONS: Final[tuple[str, ...]] = ("year", "month", "day", "hour")


@dataclass(frozen=True)
class AnnotatedPillar:
    """A pillar with every attribute derived relative to the Day Master."""

    position: str
    pillar: Pillar
    relationship: RelationshipCategory
    na_yin: NaYin
    hidden_stems: tuple[HiddenStem, ...]

    @property
    def stem(self) -> HeavenlyStem:
        return self.pillar.stem

    @property
    def branch(self) -> EarthlyBranch:
        return self.pillar.branch

    @property
    def stem_element(self) -> Element:
        return self.pillar.stem.element

    @property
    def branch_element(self) -> Element:
        return self.pillar.branch.element

    def label(self) -> str:
        return self.pillar.label()

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-serialisable mapping describing the pillar."""

        return {
            "position": self.position,
            "label": self.pillar.label(),
            "pinyin": self.pillar.pinyin(),
            "cycle_index": self.pillar.cycle_index,
            "stem": {
                "chinese": self.stem.chinese,
                "element": self.stem_element.value,
                "polarity": self.stem.polarity.value,
            },
            "branch": {
                "chinese": self.branch.chinese,
                "element": self.branch_element.value,
                "polarity": self.branch.polarity.value,
                "animal": self.branch.animal_chinese,
            },
            "relationship": self.relationship.value,
            "family": self.relationship.family,
            "na_yin": {"name": self.na_yin.name, "element": self.na_yin.element.value},
            "hidden_stems": [hidden.to_dict() for hidden in self.hidden_stems],
        }


def _coerce_pillar(raw: Pillar | str) -> Pillar:
    if isinstance(raw, Pillar):
        return raw
    if isinstance(raw, str):
        return Pillar.from_label(raw)
    raise InvalidPillar(f"Unsupported pillar value: {raw!r}")


def annotate_pillar(
    day_master: HeavenlyStem,
    pillar: Pillar | str,
    position: str,
) -> AnnotatedPillar:
    """Annotate ``pillar`` relative to ``day_master``.

    Parameters
    ----------
    day_master:
        Stem of the natal day pillar.
    pillar:
        A :class:`Pillar` or its two-character label. Labels outside the sixty
        valid combinations raise :class:`InvalidPillar`.
    position:
        ``year``/``month``/``day``/``hour`` for natal pillars, ``luck`` or
        ``annual`` for derived pillars. The day position always carries the
        Day Master marker.
    """

    resolved = _coerce_pillar(pillar)
    if position == "day":
        relationship = RelationshipCategory.SELF
    else:
        relationship = relationship_of(day_master, resolved.stem)
    hidden = tuple(
        stem.with_day_master(day_master) for stem in hidden_stems_of(resolved.branch)
    )
    return AnnotatedPillar(
        position=position,
        pillar=resolved,
        relationship=relationship,
        na_yin=na_yin_of(resolved),
        hidden_stems=hidden,
    )


__all__ = ["AnnotatedPillar", "PILLAR_POSITIONS", "annotate_pillar"]
