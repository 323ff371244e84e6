from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest

from baziengine.chinese.constants import Gender
from baziengine.chinese.sexagenary import Pillar
from baziengine.providers.base import (
    BirthMoment,
    CalendarResolution,
    ChartUnavailable,
    LunarDate,
)
from baziengine.timelords.models import OnsetAge


class StubCalendarProvider:
    """Deterministic provider answering for a single known birth moment."""

    provider_id = "stub"

    def __init__(self, moment: BirthMoment, pillars: tuple[str, str, str, str], onset: OnsetAge) -> None:
        self.moment = moment
        self.pillars = pillars
        self.onset = onset
        self.calls: list[str] = []

    def resolve(self, moment: BirthMoment) -> CalendarResolution:
        self.calls.append("resolve")
        if moment != self.moment:
            raise ChartUnavailable("unknown moment", moment=moment, provider_id=self.provider_id)
        year, month, day, hour = (Pillar.from_label(label) for label in self.pillars)
        return CalendarResolution(
            year=year,
            month=month,
            day=day,
            hour=hour,
            solar=datetime(moment.year, moment.month, moment.day, moment.hour, moment.minute),
            lunar=LunarDate(
                year=1996,
                month=3,
                day=20,
                is_leap_month=False,
                year_label="一九九六",
                month_label="三",
                day_label="二十",
                year_ganzhi="丙子",
            ),
        )

    def onset_age(self, moment: BirthMoment, gender: Gender) -> OnsetAge:
        self.calls.append("onset_age")
        return self.onset


@pytest.fixture
def birth_moment() -> BirthMoment:
    return BirthMoment(1996, 5, 7, 15, 0)


@pytest.fixture
def stub_provider(birth_moment: BirthMoment) -> StubCalendarProvider:
    return StubCalendarProvider(
        birth_moment,
        ("丙子", "癸巳", "甲辰", "壬申"),
        OnsetAge(years=8, months=4, days=10),
    )


@pytest.fixture
def bazi_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point ``BAZIENGINE_HOME`` at a scratch directory."""

    home = tmp_path / "bazi-home"
    monkeypatch.setenv("BAZIENGINE_HOME", str(home))
    return home
