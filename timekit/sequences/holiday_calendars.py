# SPDX-FileCopyrightText: 2024-2025 Contributors to the timekit project
#
# SPDX-License-Identifier: MPL-2.0
"""Holiday calendar lookups.

A holiday calendar answers one question: which dates between ``start`` and
``end`` are holidays of calendar ``calendar_id``. The default implementation
is backed by the ``holidays`` package and knows its financial markets
(``"NYSE"``, ``"ECB"``, ...) and countries (``"NL"``, ``"US"``, ...).
"""
from abc import ABC, abstractmethod
from datetime import date
from typing import Iterable, Mapping

import holidays

from timekit.exceptions import UnknownCalendarError


class HolidayCalendar(ABC):
    """Range query over named holiday calendars."""

    @abstractmethod
    def supports(self, calendar_id: str) -> bool:
        pass

    @abstractmethod
    def lookup(self, calendar_id: str, start: date, end: date) -> set[date]:
        """Holidays of the calendar between start and end, both inclusive.

        Raises:
            UnknownCalendarError: If the calendar is not supported.

        """


class HolidaysLibraryCalendar(HolidayCalendar):
    """Calendars of the ``holidays`` package.

    Calendar identifiers are the market and country codes the package exports,
    including aliases such as ``"NYSE"`` and ``"XNYS"``. A new holiday table is
    built for every lookup, so lookups share no state.
    """

    def supports(self, calendar_id: str) -> bool:
        return self._holiday_class(calendar_id) is not None

    def lookup(self, calendar_id: str, start: date, end: date) -> set[date]:
        holiday_class = self._holiday_class(calendar_id)
        if holiday_class is None:
            raise UnknownCalendarError(calendar_id)

        table = holiday_class(years=range(start.year, end.year + 1))
        return {day for day in table.keys() if start <= day <= end}

    @staticmethod
    def _holiday_class(calendar_id: str):
        holiday_class = getattr(holidays, calendar_id.upper(), None)
        if isinstance(holiday_class, type) and issubclass(
            holiday_class, holidays.HolidayBase
        ):
            return holiday_class
        return None


class StaticHolidayCalendar(HolidayCalendar):
    """Calendars given as fixed collections of dates, e.g. company holidays."""

    def __init__(self, calendars: Mapping[str, Iterable[date]]):
        self._calendars = {
            calendar_id.upper(): frozenset(days) for calendar_id, days in calendars.items()
        }

    def supports(self, calendar_id: str) -> bool:
        return calendar_id.upper() in self._calendars

    def lookup(self, calendar_id: str, start: date, end: date) -> set[date]:
        try:
            days = self._calendars[calendar_id.upper()]
        except KeyError:
            raise UnknownCalendarError(calendar_id) from None
        return {day for day in days if start <= day <= end}


def get_default_holiday_calendar() -> HolidayCalendar:
    return HolidaysLibraryCalendar()
