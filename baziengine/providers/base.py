"""Contract for calendar conversion providers."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import Any, Protocol

from ..chinese.constants import Gender
from ..chinese.sexagenary import Pillar
from ..timelords.models import OnsetAge

__all__ = [
    "BirthMoment",
    "CalendarKind",
    "CalendarProvider",
    "CalendarResolution",
    "ChartUnavailable",
    "LunarDate",
]


class ChartUnavailable(RuntimeError):
    """Raised when a birth moment cannot be resolved into a chart."""

    def __init__(
        self,
        message: str,
        *,
        moment: BirthMoment | None = None,
        provider_id: str | None = None,
        reason: str | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.moment = moment
        self.provider_id = provider_id
        self.reason = reason
        self.context = dict(context or {})


class CalendarKind(StrEnum):
    SOLAR = "solar"
    LUNAR = "lunar"


@dataclass(frozen=True)
class BirthMoment:
    """Local civil birth moment expressed in the solar or lunar calendar.

    Fields are stored verbatim; nonexistent dates are rejected by the calendar
    provider rather than on construction.
    """

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    calendar: CalendarKind = CalendarKind.SOLAR
    leap_month: bool = False

    def to_dict(self) -> dict[str, object]:
        return {
            "year": self.year,
            "month": self.month,
            "day": self.day,
            "hour": self.hour,
            "minute": self.minute,
            "calendar": self.calendar.value,
            "leap_month": self.leap_month,
        }


@dataclass(frozen=True)
class LunarDate:
    """Chinese lunisolar date of a resolved birth moment."""

    year: int
    month: int
    day: int
    is_leap_month: bool
    year_label: str
    month_label: str
    day_label: str
    year_ganzhi: str

    def label(self) -> str:
        """Return the display form, e.g. ``一九九六年三月二十``.

        ``month_label`` already carries the 闰 prefix for leap months.
        """

        return f"{self.year_label}年{self.month_label}月{self.day_label}"

    def to_dict(self) -> dict[str, object]:
        return {
            "year": self.year,
            "month": self.month,
            "day": self.day,
            "is_leap_month": self.is_leap_month,
            "label": self.label(),
            "year_ganzhi": self.year_ganzhi,
        }


@dataclass(frozen=True)
class CalendarResolution:
    """Raw pillars and calendar fields returned for one birth moment."""

    year: Pillar
    month: Pillar
    day: Pillar
    hour: Pillar
    solar: datetime
    lunar: LunarDate


class CalendarProvider(Protocol):
    """Calendar conversion contract consumed by the chart assembler."""

    provider_id: str

    def resolve(self, moment: BirthMoment) -> CalendarResolution:
        """Return the four raw pillars and lunar fields for ``moment``.

        Raises :class:`ChartUnavailable` when the moment does not exist in
        the requested calendar.
        """

        ...

    def onset_age(self, moment: BirthMoment, gender: Gender) -> OnsetAge:
        """Return the offset from birth to the first luck pillar."""

        ...
