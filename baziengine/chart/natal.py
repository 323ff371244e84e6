"""Natal BaZi chart assembly."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime

from ..chinese.constants import Gender, HeavenlyStem, ShiChen, shi_chen_for_hour
from ..chinese.elements import ElementTally, tally_elements
from ..chinese.four_pillars import FourPillarsChart, compose_four_pillars
from ..config.settings import Settings, default_settings
from ..providers import get_provider
from ..providers.base import BirthMoment, CalendarProvider, LunarDate
from ..timelords.da_yun import sequence_luck_pillars
from ..timelords.models import LuckPillarTimeline, OnsetAge

LOG = logging.getLogger(__name__)

__all__ = ["ChartResult", "build_chart", "provider_from_settings"]


@dataclass(frozen=True)
class ChartResult:
    """Fully annotated natal chart with optional luck-pillar timeline."""

    moment: BirthMoment
    gender: Gender
    chart: FourPillarsChart
    elements: ElementTally
    shi_chen: ShiChen
    lunar: LunarDate
    solar: datetime
    luck: LuckPillarTimeline | None = None
    onset: OnsetAge | None = None

    @property
    def day_master(self) -> HeavenlyStem:
        return self.chart.day_master

    @property
    def zodiac(self) -> str:
        return self.chart.zodiac

    @property
    def zodiac_animal(self) -> str:
        return self.chart.zodiac_animal

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-serialisable payload with Chinese labels preserved."""

        return {
            "moment": self.moment.to_dict(),
            "gender": self.gender.value,
            "solar": self.solar.isoformat(timespec="minutes"),
            "lunar": self.lunar.to_dict(),
            "pillars": self.chart.to_dict(),
            "day_master": {
                "stem": self.day_master.chinese,
                "element": self.day_master.element.value,
                "polarity": self.day_master.polarity.value,
            },
            "zodiac": self.zodiac,
            "zodiac_animal": self.zodiac_animal,
            "shi_chen": self.shi_chen.label(),
            "elements": self.elements.to_dict(),
            "onset": self.onset.to_dict() if self.onset is not None else None,
            "luck": self.luck.to_dict() if self.luck is not None else None,
        }


def provider_from_settings(settings: Settings) -> CalendarProvider:
    """Instantiate the calendar provider named in ``settings.calendar``."""

    calendar = settings.calendar
    return get_provider(
        calendar.provider,
        day_boundary_sect=calendar.day_boundary_sect,
        onset_sect=calendar.onset_sect,
    )


def build_chart(
    moment: BirthMoment,
    gender: Gender | str,
    *,
    include_luck: bool = False,
    provider: CalendarProvider | None = None,
    settings: Settings | None = None,
) -> ChartResult:
    """Assemble the natal chart for ``moment``.

    Parameters
    ----------
    moment:
        Local civil birth moment in the solar or lunar calendar.
    gender:
        Native's gender; drives the luck-pillar direction.
    include_luck:
        When ``True`` the onset age is requested from the provider and the
        luck-pillar timeline is attached.
    provider:
        Calendar provider override. Defaults to the provider configured in
        ``settings``.
    settings:
        Engine settings; :func:`default_settings` when omitted.

    Raises
    ------
    ChartUnavailable
        The moment does not exist in the requested calendar.
    """

    settings = settings or default_settings()
    provider = provider or provider_from_settings(settings)
    gender = Gender.parse(gender)

    resolution = provider.resolve(moment)
    chart = compose_four_pillars(resolution.year, resolution.month, resolution.day, resolution.hour)

    luck: LuckPillarTimeline | None = None
    onset: OnsetAge | None = None
    if include_luck:
        onset = provider.onset_age(moment, gender)
        luck = sequence_luck_pillars(
            resolution.month,
            resolution.year.stem.polarity,
            gender,
            onset.years,
            chart.day_master,
            resolution.solar.year,
            horizon_age=settings.luck.horizon_age,
            band_years=settings.luck.band_years,
            max_pillars=settings.luck.max_pillars,
        )

    LOG.debug(
        "Assembled chart %s for %s (%s) via %s",
        " ".join(chart.labels()),
        moment.to_dict(),
        gender.value,
        provider.provider_id,
    )
    return ChartResult(
        moment=moment,
        gender=gender,
        chart=chart,
        elements=tally_elements(chart),
        shi_chen=shi_chen_for_hour(moment.hour),
        lunar=resolution.lunar,
        solar=resolution.solar,
        luck=luck,
        onset=onset,
    )
