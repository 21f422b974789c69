# SPDX-FileCopyrightText: 2024-2025 Contributors to the timekit project
#
# SPDX-License-Identifier: MPL-2.0
"""Holiday, weekday and weekend date sequences."""
from datetime import date
from typing import Any, Optional

import numpy as np
import pandas as pd

from timekit.data_classes.time_index import TimeIndex
from timekit.enums import IndexUnit
from timekit.exceptions import ContradictorySpecError
from timekit.logging.logger_factory import get_logger
from timekit.sequences.holiday_calendars import (
    HolidayCalendar,
    get_default_holiday_calendar,
)
from timekit.sequences.timestamps import apply_skip_and_insert, parse_timestamp
from timekit.settings import Settings

logger = get_logger(__name__)

# Saturday and Sunday in pandas dayofweek numbering
WEEKEND_DAYS = [5, 6]


def get_holidays(
    start: Any,
    end: Any,
    calendar: Optional[str] = None,
    holiday_calendar: Optional[HolidayCalendar] = None,
) -> list[date]:
    """Sorted holidays of a calendar between start and end, both inclusive."""
    start_date, end_date = _date_range_bounds(start, end)
    if calendar is None:
        calendar = Settings.default_calendar
    if holiday_calendar is None:
        holiday_calendar = get_default_holiday_calendar()
    return sorted(holiday_calendar.lookup(calendar, start_date, end_date))


def make_holiday_sequence(
    start: Any,
    end: Any,
    calendar: Optional[str] = None,
    skip_values: Optional[list] = None,
    insert_values: Optional[list] = None,
    holiday_calendar: Optional[HolidayCalendar] = None,
) -> TimeIndex:
    """Make the sequence of holiday dates of a calendar.

    Args:
        start: First date of the range.
        end: Last date of the range.
        calendar: Calendar identifier such as ``"NYSE"``, defaults to
            ``Settings.default_calendar``.
        skip_values: Dates removed from the sequence.
        insert_values: Dates added to the sequence.
        holiday_calendar: Holiday lookup, defaults to the ``holidays`` package.

    Returns:
        Ascending day index of holidays.

    Raises:
        UnknownCalendarError: If the calendar is not known to the lookup.

    """
    days = get_holidays(start, end, calendar, holiday_calendar)
    values = pd.DatetimeIndex([pd.Timestamp(day) for day in days])
    values = apply_skip_and_insert(values, IndexUnit.DAYS, skip_values, insert_values)
    return TimeIndex(values, IndexUnit.DAYS)


def make_weekday_sequence(
    start: Any,
    end: Any,
    remove_weekends: bool = True,
    remove_holidays: bool = False,
    calendar: Optional[str] = None,
    skip_values: Optional[list] = None,
    insert_values: Optional[list] = None,
    holiday_calendar: Optional[HolidayCalendar] = None,
) -> TimeIndex:
    """Make a daily date sequence without weekends and, optionally, holidays.

    Args:
        start: First date of the range.
        end: Last date of the range.
        remove_weekends: Drop Saturdays and Sundays.
        remove_holidays: Drop the holidays of ``calendar``.
        calendar: Calendar identifier such as ``"NYSE"``, defaults to
            ``Settings.default_calendar``.
        skip_values: Dates removed from the sequence.
        insert_values: Dates added to the sequence.
        holiday_calendar: Holiday lookup, defaults to the ``holidays`` package.

    Returns:
        Ascending day index.

    """
    days = _daily(start, end)
    if remove_weekends:
        days = days[~np.isin(days.dayofweek, WEEKEND_DAYS)]
    if remove_holidays:
        holidays = get_holidays(start, end, calendar, holiday_calendar)
        days = days[~np.isin(days.date, np.array(holidays, dtype=object))]
        logger.debug(
            "Removed holidays from weekday sequence",
            calendar=calendar or Settings.default_calendar,
            n_holidays=len(holidays),
        )

    values = apply_skip_and_insert(days, IndexUnit.DAYS, skip_values, insert_values)
    return TimeIndex(values, IndexUnit.DAYS)


def make_weekend_sequence(
    start: Any,
    end: Any,
    skip_values: Optional[list] = None,
    insert_values: Optional[list] = None,
) -> TimeIndex:
    """Make the sequence of Saturdays and Sundays between start and end."""
    days = _daily(start, end)
    days = days[np.isin(days.dayofweek, WEEKEND_DAYS)]
    values = apply_skip_and_insert(days, IndexUnit.DAYS, skip_values, insert_values)
    return TimeIndex(values, IndexUnit.DAYS)


def _date_range_bounds(start: Any, end: Any) -> tuple[date, date]:
    start_date = _as_date(start)
    end_date = _as_date(end)
    if start_date > end_date:
        raise ContradictorySpecError(f"Start {start_date} is after end {end_date}")
    return start_date, end_date


def _as_date(value: Any) -> date:
    timestamp = parse_timestamp(value).timestamp
    if timestamp.tz is not None:
        timestamp = timestamp.tz_localize(None)
    return timestamp.date()


def _daily(start: Any, end: Any) -> pd.DatetimeIndex:
    start_date, end_date = _date_range_bounds(start, end)
    return pd.date_range(start=start_date, end=end_date, freq="D")
