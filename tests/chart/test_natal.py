from __future__ import annotations

import json

import pytest

from baziengine.chart import build_chart
from baziengine.chinese.constants import Gender
from baziengine.config import LuckCfg, Settings
from baziengine.providers import BirthMoment, ChartUnavailable
from baziengine.timelords import Direction


def test_build_chart_without_luck(stub_provider, birth_moment) -> None:
    result = build_chart(birth_moment, "male", provider=stub_provider)

    assert result.chart.labels() == ["丙子", "癸巳", "甲辰", "壬申"]
    assert result.day_master.chinese == "甲"
    assert result.zodiac == "鼠"
    assert result.zodiac_animal == "Rat"
    assert result.shi_chen.label() == "申时 (15:00-17:00)"
    assert result.elements.total == 8
    assert result.luck is None and result.onset is None
    assert stub_provider.calls == ["resolve"]


def test_build_chart_is_deterministic(stub_provider, birth_moment) -> None:
    first = build_chart(birth_moment, Gender.MALE, include_luck=True, provider=stub_provider)
    second = build_chart(birth_moment, Gender.MALE, include_luck=True, provider=stub_provider)

    assert first == second
    assert first.to_dict() == second.to_dict()


def test_luck_direction_depends_on_gender(stub_provider, birth_moment) -> None:
    male = build_chart(birth_moment, Gender.MALE, include_luck=True, provider=stub_provider)
    female = build_chart(birth_moment, Gender.FEMALE, include_luck=True, provider=stub_provider)

    assert male.luck.direction is Direction.FORWARD
    assert female.luck.direction is Direction.BACKWARD
    assert male.luck.labels()[0] == "甲午"
    assert female.luck.labels()[0] == "壬辰"
    assert male.luck[0].start_age == 8
    assert male.luck[0].start_year == 2004
    assert male.onset.label() == "8年4个月10天后起运"


def test_settings_drive_luck_sequencing(stub_provider, birth_moment) -> None:
    settings = Settings(luck=LuckCfg(horizon_age=40, band_years=5, max_pillars=3))
    result = build_chart(
        birth_moment, Gender.MALE, include_luck=True, provider=stub_provider, settings=settings
    )

    assert len(result.luck) == 3
    assert [(p.start_age, p.end_age) for p in result.luck] == [(8, 13), (13, 18), (18, 23)]


def test_unresolvable_moment_propagates(stub_provider) -> None:
    with pytest.raises(ChartUnavailable):
        build_chart(BirthMoment(1996, 13, 1), Gender.MALE, include_luck=True, provider=stub_provider)
    assert stub_provider.calls == ["resolve"]


def test_to_dict_is_json_serialisable(stub_provider, birth_moment) -> None:
    payload = build_chart(birth_moment, Gender.FEMALE, include_luck=True, provider=stub_provider).to_dict()
    encoded = json.dumps(payload, ensure_ascii=False)

    assert "日主" in encoded
    assert payload["gender"] == "female"
    assert payload["solar"] == "1996-05-07T15:00"
    assert payload["lunar"]["label"] == "一九九六年三月二十"
    assert payload["luck"]["direction"] == "backward"
    assert payload["elements"]["water"] == 3


def test_build_chart_with_default_provider(birth_moment) -> None:
    pytest.importorskip("lunar_python")
    result = build_chart(birth_moment, Gender.MALE, include_luck=True)

    assert result.chart.labels() == ["丙子", "癸巳", "甲辰", "壬申"]
    assert result.luck.direction is Direction.FORWARD
    assert result.luck[0].start_age == result.onset.years
