"""Five-element distribution across the surface stems and branches."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .constants import Element
from .pillars import AnnotatedPillar

__all__ = ["ElementTally", "tally_elements"]


@dataclass(frozen=True)
class ElementTally:
    """Count of each element over the eight visible characters of a chart."""

    counts: Mapping[Element, int]

    def __getitem__(self, element: Element) -> int:
        return self.counts[element]

    @property
    def total(self) -> int:
        return sum(self.counts.values())

    def missing(self) -> tuple[Element, ...]:
        """Elements absent from the chart, in generation-cycle order."""

        return tuple(element for element in Element if self.counts[element] == 0)

    def strongest(self) -> tuple[Element, ...]:
        """Elements sharing the highest count."""

        peak = max(self.counts.values())
        return tuple(element for element in Element if self.counts[element] == peak)

    def as_chinese(self) -> dict[str, int]:
        return {element.chinese: self.counts[element] for element in Element}

    def to_dict(self) -> dict[str, int]:
        return {element.value: self.counts[element] for element in Element}


def tally_elements(pillars: Iterable[AnnotatedPillar]) -> ElementTally:
    """Count stem and branch elements of ``pillars``; hidden stems are excluded."""

    counts = {element: 0 for element in Element}
    for pillar in pillars:
        counts[pillar.stem_element] += 1
        counts[pillar.branch_element] += 1
    return ElementTally(counts=MappingProxyType(counts))
