from __future__ import annotations

from datetime import datetime

import pytest

from baziengine.chinese.constants import Gender
from baziengine.providers import (
    BirthMoment,
    CalendarKind,
    ChartUnavailable,
    LunarPythonProvider,
    get_provider,
    list_providers,
    register_provider,
)
from baziengine.timelords.models import OnsetAge

pytest.importorskip("lunar_python")


def _labels(resolution) -> list[str]:
    return [p.label() for p in (resolution.year, resolution.month, resolution.day, resolution.hour)]


def test_known_solar_moment_resolves() -> None:
    """1996-05-07 15:00 is 丙子年 癸巳月 甲辰日 壬申时."""

    resolution = LunarPythonProvider().resolve(BirthMoment(1996, 5, 7, 15, 0))

    assert _labels(resolution) == ["丙子", "癸巳", "甲辰", "壬申"]
    assert resolution.solar == datetime(1996, 5, 7, 15, 0)
    assert resolution.lunar.year_ganzhi == "丙子"
    assert (resolution.lunar.month, resolution.lunar.day) == (3, 20)
    assert resolution.lunar.is_leap_month is False


def test_lunar_input_matches_solar_input() -> None:
    provider = LunarPythonProvider()
    solar = provider.resolve(BirthMoment(1996, 5, 7, 15, 0))
    lunar = provider.resolve(BirthMoment(1996, 3, 20, 15, 0, calendar=CalendarKind.LUNAR))

    assert _labels(lunar) == _labels(solar)
    assert lunar.solar == solar.solar


def test_leap_month_lunar_input() -> None:
    resolution = LunarPythonProvider().resolve(
        BirthMoment(2020, 4, 1, 12, 0, calendar=CalendarKind.LUNAR, leap_month=True)
    )

    assert resolution.lunar.is_leap_month is True
    assert resolution.lunar.month == 4
    assert resolution.lunar.month_label.startswith("闰")
    assert resolution.solar.date() == datetime(2020, 5, 23).date()


@pytest.mark.parametrize(
    "moment",
    [
        BirthMoment(1996, 13, 1),
        BirthMoment(2023, 2, 29),
        BirthMoment(1996, 5, 7, 24, 0),
        BirthMoment(2021, 4, 1, calendar=CalendarKind.LUNAR, leap_month=True),
        BirthMoment(2021, 2, 31, calendar=CalendarKind.LUNAR),
        BirthMoment(1996, 5, 7, leap_month=True),
        BirthMoment(0, 1, 12, calendar=CalendarKind.LUNAR),
        BirthMoment(-1, 1, 1, calendar=CalendarKind.LUNAR),
        BirthMoment(9999, 12, 15, calendar=CalendarKind.LUNAR),
        BirthMoment(10000, 1, 1, calendar=CalendarKind.LUNAR),
    ],
)
def test_nonexistent_moments_raise_chart_unavailable(moment: BirthMoment) -> None:
    with pytest.raises(ChartUnavailable) as excinfo:
        LunarPythonProvider().resolve(moment)

    assert excinfo.value.provider_id == "lunar_python"
    assert excinfo.value.moment == moment
    assert excinfo.value.reason


def test_onset_age_is_non_negative() -> None:
    provider = LunarPythonProvider()
    moment = BirthMoment(1996, 5, 7, 15, 0)

    male = provider.onset_age(moment, Gender.MALE)
    female = provider.onset_age(moment, Gender.FEMALE)

    assert isinstance(male, OnsetAge)
    assert male.years >= 0 and female.years >= 0
    assert male != female


def test_invalid_sect_rejected() -> None:
    with pytest.raises(ValueError):
        LunarPythonProvider(day_boundary_sect=3)


def test_registry_returns_configured_provider() -> None:
    provider = get_provider("lunar_python", day_boundary_sect=1)

    assert isinstance(provider, LunarPythonProvider)
    assert provider.day_boundary_sect == 1
    assert "lunar_python" in list_providers()


def test_registry_rejects_duplicates_and_unknown_names() -> None:
    with pytest.raises(ValueError):
        register_provider("lunar_python", LunarPythonProvider)
    with pytest.raises(KeyError):
        get_provider("missing")
