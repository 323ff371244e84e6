from __future__ import annotations

import pytest

from baziengine.chinese import compose_four_pillars
from baziengine.chinese.constants import Element, STEM_BY_CHINESE
from baziengine.chinese.elements import tally_elements
from baziengine.chinese.pillars import annotate_pillar
from baziengine.chinese.sexagenary import InvalidPillar
from baziengine.chinese.ten_gods import RelationshipCategory


def test_compose_known_chart() -> None:
    """Pillars of 1996-05-07 15:00 annotate against Jia wood."""

    chart = compose_four_pillars("丙子", "癸巳", "甲辰", "壬申")

    assert chart.labels() == ["丙子", "癸巳", "甲辰", "壬申"]
    assert chart.day_master.chinese == "甲"
    assert chart.zodiac == "鼠"
    assert chart.zodiac_animal == "Rat"
    assert [pillar.relationship for pillar in chart] == [
        RelationshipCategory.EATING_GOD,
        RelationshipCategory.DIRECT_RESOURCE,
        RelationshipCategory.SELF,
        RelationshipCategory.INDIRECT_RESOURCE,
    ]
    assert [pillar.na_yin.name for pillar in chart] == ["涧下水", "长流水", "覆灯火", "剑锋金"]


def test_day_pillar_is_always_self() -> None:
    chart = compose_four_pillars("甲子", "丙寅", "戊辰", "庚申")
    assert chart.day.relationship is RelationshipCategory.SELF
    assert chart.year.relationship is RelationshipCategory.SEVEN_KILLINGS


def test_annotate_pillar_hidden_stems_relative_to_day_master() -> None:
    annotated = annotate_pillar(STEM_BY_CHINESE["甲"], "甲辰", "year")
    assert annotated.relationship is RelationshipCategory.SELF
    assert [hidden.relationship for hidden in annotated.hidden_stems] == [
        RelationshipCategory.INDIRECT_WEALTH,
        RelationshipCategory.ROB_WEALTH,
        RelationshipCategory.DIRECT_RESOURCE,
    ]


@pytest.mark.parametrize("raw", ["甲丑", "XX", 42])
def test_annotate_pillar_rejects_invalid_input(raw: object) -> None:
    with pytest.raises(InvalidPillar):
        annotate_pillar(STEM_BY_CHINESE["甲"], raw, "year")  # type: ignore[arg-type]


def test_element_tally_counts_eight_characters() -> None:
    chart = compose_four_pillars("丙子", "癸巳", "甲辰", "壬申")
    tally = tally_elements(chart)

    assert tally.total == 8
    assert tally.to_dict() == {"wood": 1, "fire": 2, "earth": 1, "metal": 1, "water": 3}
    assert tally.as_chinese() == {"木": 1, "火": 2, "土": 1, "金": 1, "水": 3}
    assert tally.missing() == ()
    assert tally.strongest() == (Element.WATER,)


def test_element_tally_reports_missing_elements() -> None:
    chart = compose_four_pillars("甲寅", "甲寅", "甲寅", "甲寅")
    tally = tally_elements(chart)

    assert tally[Element.WOOD] == 8
    assert tally.missing() == (Element.FIRE, Element.EARTH, Element.METAL, Element.WATER)


def test_chart_to_dict_preserves_chinese_labels() -> None:
    payload = compose_four_pillars("丙子", "癸巳", "甲辰", "壬申").to_dict()

    assert list(payload) == ["year", "month", "day", "hour"]
    assert payload["day"]["relationship"] == "日主"
    assert payload["day"]["family"] is None
    assert payload["year"]["family"] == "output"
    assert payload["hour"]["family"] == "resource"
    assert payload["year"]["na_yin"] == {"name": "涧下水", "element": "water"}
    assert payload["month"]["hidden_stems"][0]["stem"] == "丙"
