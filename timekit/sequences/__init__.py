# SPDX-FileCopyrightText: 2024-2025 Contributors to the timekit project
#
# SPDX-License-Identifier: MPL-2.0
"""Generation of time sequences."""

from .business_days import (
    get_holidays,
    make_holiday_sequence,
    make_weekday_sequence,
    make_weekend_sequence,
)
from .future import make_future_timeseries
from .holiday_calendars import (
    HolidayCalendar,
    HolidaysLibraryCalendar,
    StaticHolidayCalendar,
)
from .make_timeseries import make_timeseries, make_timeseries_from_spec

__all__ = [
    "HolidayCalendar",
    "HolidaysLibraryCalendar",
    "StaticHolidayCalendar",
    "get_holidays",
    "make_future_timeseries",
    "make_holiday_sequence",
    "make_timeseries",
    "make_timeseries_from_spec",
    "make_weekday_sequence",
    "make_weekend_sequence",
]
