"""Calendar provider backed by the ``lunar_python`` almanac library."""

from __future__ import annotations

import logging
from datetime import MAXYEAR, MINYEAR, datetime

from lunar_python import Lunar, Solar

from ..chinese.constants import Gender
from ..chinese.sexagenary import Pillar
from ..timelords.models import OnsetAge
from .base import BirthMoment, CalendarKind, CalendarResolution, ChartUnavailable, LunarDate

LOG = logging.getLogger(__name__)

__all__ = ["LunarPythonProvider"]


class LunarPythonProvider:
    """Resolve birth moments with solar-term-accurate pillars.

    Parameters
    ----------
    day_boundary_sect:
        ``2`` keeps the current day pillar during 23:00-24:00, ``1`` advances
        it to the next day as soon as the Zi hour starts.
    onset_sect:
        ``1`` converts the distance to the governing solar term with the
        three-days-per-year rule, ``2`` uses the minute-precise variant.
    """

    provider_id = "lunar_python"

    def __init__(self, *, day_boundary_sect: int = 2, onset_sect: int = 1) -> None:
        if day_boundary_sect not in (1, 2):
            raise ValueError("day_boundary_sect must be 1 or 2")
        if onset_sect not in (1, 2):
            raise ValueError("onset_sect must be 1 or 2")
        self.day_boundary_sect = day_boundary_sect
        self.onset_sect = onset_sect

    def _unavailable(self, moment: BirthMoment, reason: str, exc: Exception | None = None) -> ChartUnavailable:
        LOG.warning("Cannot resolve %s birth moment %s: %s", moment.calendar.value, moment.to_dict(), reason)
        return ChartUnavailable(
            f"Birth moment cannot be resolved: {reason}",
            moment=moment,
            provider_id=self.provider_id,
            reason=reason,
            context={"error": str(exc)} if exc is not None else None,
        )

    def _lunar(self, moment: BirthMoment) -> Lunar:
        if not (0 <= moment.hour <= 23 and 0 <= moment.minute <= 59):
            raise self._unavailable(moment, "time of day out of range")

        if moment.calendar is CalendarKind.SOLAR:
            if moment.leap_month:
                raise self._unavailable(moment, "leap months only exist in the lunar calendar")
            try:
                datetime(moment.year, moment.month, moment.day, moment.hour, moment.minute)
            except ValueError as exc:
                raise self._unavailable(moment, "nonexistent solar date", exc) from exc
            try:
                solar = Solar.fromYmdHms(
                    moment.year, moment.month, moment.day, moment.hour, moment.minute, 0
                )
            except Exception as exc:  # lunar_python signals bad input with bare Exception
                raise self._unavailable(moment, "solar date outside the supported range", exc) from exc
            return solar.getLunar()

        if not (1 <= moment.month <= 12 and 1 <= moment.day <= 30):
            raise self._unavailable(moment, "nonexistent lunar date")
        month = -moment.month if moment.leap_month else moment.month
        try:
            lunar = Lunar.fromYmdHms(moment.year, month, moment.day, moment.hour, moment.minute, 0)
        except Exception as exc:  # lunar_python signals bad input with bare Exception
            raise self._unavailable(moment, "nonexistent lunar date", exc) from exc
        # datetime only holds solar years 1-9999.
        if not MINYEAR <= lunar.getSolar().getYear() <= MAXYEAR:
            raise self._unavailable(moment, "solar date outside the supported range")
        return lunar

    def _eight_char(self, lunar: Lunar):
        eight_char = lunar.getEightChar()
        eight_char.setSect(self.day_boundary_sect)
        return eight_char

    def resolve(self, moment: BirthMoment) -> CalendarResolution:
        lunar = self._lunar(moment)
        eight_char = self._eight_char(lunar)
        solar = lunar.getSolar()
        lunar_month = lunar.getMonth()

        resolution = CalendarResolution(
            year=Pillar.from_label(eight_char.getYear()),
            month=Pillar.from_label(eight_char.getMonth()),
            day=Pillar.from_label(eight_char.getDay()),
            hour=Pillar.from_label(eight_char.getTime()),
            solar=datetime(
                solar.getYear(),
                solar.getMonth(),
                solar.getDay(),
                solar.getHour(),
                solar.getMinute(),
            ),
            lunar=LunarDate(
                year=lunar.getYear(),
                month=abs(lunar_month),
                day=lunar.getDay(),
                is_leap_month=lunar_month < 0,
                year_label=lunar.getYearInChinese(),
                month_label=lunar.getMonthInChinese(),
                day_label=lunar.getDayInChinese(),
                year_ganzhi=lunar.getYearInGanZhi(),
            ),
        )
        LOG.debug(
            "Resolved %s -> %s %s %s %s",
            moment.to_dict(),
            resolution.year,
            resolution.month,
            resolution.day,
            resolution.hour,
        )
        return resolution

    def onset_age(self, moment: BirthMoment, gender: Gender) -> OnsetAge:
        eight_char = self._eight_char(self._lunar(moment))
        yun = eight_char.getYun(1 if gender is Gender.MALE else 0, self.onset_sect)
        return OnsetAge(
            years=yun.getStartYear(),
            months=yun.getStartMonth(),
            days=yun.getStartDay(),
        )
