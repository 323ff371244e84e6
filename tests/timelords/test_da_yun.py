from __future__ import annotations

import pytest

from baziengine.chinese.constants import STEM_BY_CHINESE, Gender, Polarity
from baziengine.chinese.sexagenary import Pillar
from baziengine.timelords import (
    Direction,
    OnsetAge,
    annual_pillars,
    luck_direction,
    sequence_luck_pillars,
)

MONTH = Pillar.from_label("癸巳")
JIA = STEM_BY_CHINESE["甲"]


def _timeline(gender: Gender = Gender.MALE, onset: int = 8, **kwargs):
    return sequence_luck_pillars(MONTH, Polarity.YANG, gender, onset, JIA, 1996, **kwargs)


@pytest.mark.parametrize(
    ("polarity", "gender", "expected"),
    [
        (Polarity.YANG, Gender.MALE, Direction.FORWARD),
        (Polarity.YIN, Gender.FEMALE, Direction.FORWARD),
        (Polarity.YANG, Gender.FEMALE, Direction.BACKWARD),
        (Polarity.YIN, Gender.MALE, Direction.BACKWARD),
    ],
)
def test_luck_direction(polarity: Polarity, gender: Gender, expected: Direction) -> None:
    assert luck_direction(polarity, gender) is expected


def test_forward_sequence_starts_after_month_pillar() -> None:
    timeline = _timeline()

    assert timeline.direction is Direction.FORWARD
    assert timeline.labels()[:3] == ["甲午", "乙未", "丙申"]
    assert timeline[0].start_age == 8
    assert timeline[0].end_age == 18
    assert timeline[0].start_year == 2004


def test_backward_sequence_for_female() -> None:
    timeline = _timeline(Gender.FEMALE)

    assert timeline.direction is Direction.BACKWARD
    assert timeline.labels()[:3] == ["壬辰", "辛卯", "庚寅"]


def test_bands_are_contiguous_and_clamped_to_horizon() -> None:
    timeline = _timeline()

    assert len(timeline) == 9
    for current, following in zip(timeline.pillars, timeline.pillars[1:]):
        assert current.end_age == following.start_age
        assert current.end_year == following.start_year
    assert timeline[-1].start_age == 88
    assert timeline[-1].end_age == 90


def test_onset_zero_starts_first_band_at_birth() -> None:
    timeline = _timeline(onset=0)

    assert timeline[0].start_age == 0
    assert timeline[0].start_year == 1996
    assert len(timeline) == 9
    assert timeline[-1].end_age == 90


def test_pillar_cap_limits_narrow_bands() -> None:
    timeline = _timeline(onset=0, band_years=5)

    assert len(timeline) == 12
    assert timeline[-1].end_age == 60


def test_onset_beyond_horizon_yields_empty_timeline() -> None:
    timeline = _timeline(onset=95)

    assert len(timeline) == 0
    assert timeline.at_age(95) is None


@pytest.mark.parametrize(
    "kwargs",
    [{"onset": -1}, {"band_years": 0}, {"horizon_age": 0}, {"max_pillars": 13}, {"max_pillars": 0}],
)
def test_invalid_parameters_raise(kwargs: dict[str, int]) -> None:
    with pytest.raises(ValueError):
        _timeline(**kwargs)


def test_luck_pillars_annotated_against_day_master() -> None:
    timeline = _timeline()

    first = timeline[0].pillar
    assert first.position == "luck"
    assert first.relationship.value == "日主"


def test_at_age_and_at_year() -> None:
    timeline = _timeline()

    assert timeline.at_age(7) is None
    assert timeline.at_age(8).label() == "甲午"
    assert timeline.at_age(17).label() == "甲午"
    assert timeline.at_age(18).label() == "乙未"
    assert timeline.at_year(2014).label() == "乙未"
    assert timeline.at_age(90) is None


def test_annual_pillars_within_band() -> None:
    timeline = _timeline()
    annuals = annual_pillars(timeline[0], JIA, 1996)

    assert [annual.year for annual in annuals] == list(range(2004, 2014))
    assert annuals[0].age == 8
    assert annuals[0].pillar.label() == "甲申"
    assert annuals[0].pillar.position == "annual"
    assert annuals[0].to_dict() == {"year": 2004, "age": 8, "label": "甲申"}


def test_onset_age_label_and_validation() -> None:
    onset = OnsetAge(8, 4, 10)
    assert onset.label() == "8年4个月10天后起运"
    with pytest.raises(ValueError):
        OnsetAge(-1)


def test_timeline_to_dict() -> None:
    payload = _timeline().to_dict()

    assert payload["direction"] == "forward"
    assert payload["pillars"][0]["label"] == "甲午"
    assert payload["pillars"][0]["start_year"] == 2004
