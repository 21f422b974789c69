# SPDX-FileCopyrightText: 2024-2025 Contributors to the timekit project
#
# SPDX-License-Identifier: MPL-2.0
"""Parsing of sequence boundaries and of skip and insert values."""
import re
from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import Any, NamedTuple, Optional, Union

import numpy as np
import pandas as pd

from timekit.enums import PERIOD_UNIT_ORDER, IndexUnit, PeriodUnit
from timekit.exceptions import ContradictorySpecError, InvalidIndexTypeError

_TIMESTAMP_PATTERN = re.compile(
    r"^(?P<year>\d{4})"
    r"(?:[-/](?P<month>\d{1,2})"
    r"(?:[-/](?P<day>\d{1,2})"
    r"(?:[ T](?P<hour>\d{1,2})"
    r"(?::(?P<minute>\d{2})"
    r"(?::(?P<second>\d{2})(?:\.(?P<fraction>\d{1,6}))?)?)?"
    r"(?P<offset>Z|[+-]\d{2}(?::?\d{2})?)?)?)?)?$"
)

# Precisions that describe a whole calendar date rather than an instant
DATE_PRECISIONS = {PeriodUnit.YEAR, PeriodUnit.MONTH, PeriodUnit.DAY}

# Timezone name such as "Europe/Amsterdam" or a tzinfo object
Timezone = Optional[Union[str, tzinfo]]


class ParsedTimestamp(NamedTuple):
    timestamp: pd.Timestamp
    precision: PeriodUnit
    is_date: bool


def parse_timestamp(value: Any, tz: Timezone = None) -> ParsedTimestamp:
    """Parse a boundary value and record the precision it was given in.

    Strings may be truncated: ``"2012"`` has year precision, ``"2012-07"`` month
    precision and ``"2012-07-01 10:30"`` minute precision. Truncated strings
    point at the start of the period they name. Strings with a time of day may
    carry a UTC offset, ``"2012-07-01T10:00:00Z"`` or ``"...+02:00"``; the
    result is converted to ``tz`` when given. ``date`` objects and strings
    without a time of day are date values, everything else is a datetime.

    Raises:
        InvalidIndexTypeError: If the value is not a timestamp.

    """
    if isinstance(value, str):
        return _parse_string(value, tz)

    if value is None or value is pd.NaT:
        raise InvalidIndexTypeError("Expected a timestamp, got a missing value", value)

    if isinstance(value, (datetime, np.datetime64)):
        timestamp = localize(pd.Timestamp(value), tz)
        return ParsedTimestamp(timestamp, _precision_of(timestamp), False)

    if isinstance(value, date):
        return ParsedTimestamp(pd.Timestamp(value), PeriodUnit.DAY, True)

    raise InvalidIndexTypeError(
        f"Expected a date, datetime or string timestamp, got {value!r}", value
    )


def precision_period_unit(*parsed: Optional[ParsedTimestamp]) -> PeriodUnit:
    """Finest precision among the given boundaries."""
    precisions = [p.precision for p in parsed if p is not None]
    return max(precisions, key=PERIOD_UNIT_ORDER.index)


def skip_mask(
    values: pd.DatetimeIndex, skip_values: Optional[list], tz: Timezone = None
) -> np.ndarray:
    """Boolean mask of the values hit by a skip value.

    Date level skip values (``date`` objects or strings without a time of day)
    remove every value on that calendar date, datetime skip values remove exact
    matches only.
    """
    mask = np.zeros(len(values), dtype=bool)
    if not skip_values:
        return mask

    exact, dates = [], []
    for value in skip_values:
        parsed = parse_timestamp(value, tz)
        if parsed.is_date:
            dates.append(parsed.timestamp.date())
        else:
            exact.append(parsed.timestamp)

    if exact:
        mask |= np.asarray(values.isin(exact))
    if dates:
        mask |= np.isin(values.date, np.array(dates, dtype=object))
    return mask


def parse_insert_values(
    insert_values: Optional[list], unit: IndexUnit, tz: Timezone = None
) -> pd.DatetimeIndex:
    """Timestamps to add to a sequence of the given granularity."""
    if not insert_values:
        return pd.DatetimeIndex([], tz=tz)

    timestamps = []
    for value in insert_values:
        parsed = parse_timestamp(value, tz)
        if unit == IndexUnit.DAYS and not parsed.is_date:
            raise ContradictorySpecError(
                f"Cannot insert datetime {value!r} into a sequence of dates"
            )
        timestamp = parsed.timestamp
        if unit == IndexUnit.SECS:
            timestamp = localize(timestamp, tz)
        timestamps.append(timestamp)
    return pd.DatetimeIndex(timestamps)


def apply_skip_and_insert(
    values: pd.DatetimeIndex,
    unit: IndexUnit,
    skip_values: Optional[list] = None,
    insert_values: Optional[list] = None,
    tz: Timezone = None,
) -> pd.DatetimeIndex:
    """Remove skip values, add insert values and return sorted unique values."""
    values = values[~skip_mask(values, skip_values, tz)]
    inserted = parse_insert_values(insert_values, unit, tz)
    if len(inserted):
        values = values.append(inserted)
    return values.unique().sort_values()


def _parse_string(value: str, tz: Timezone) -> ParsedTimestamp:
    match = _TIMESTAMP_PATTERN.match(value.strip())
    if match is None:
        raise InvalidIndexTypeError(
            f"Cannot parse timestamp {value!r}, expected e.g. '2012', '2012-07', "
            "'2012-07-01', '2012-07-01 10:30:00' or '2012-07-01T10:30:00Z'",
            value,
        )

    parts = match.groupdict()
    precision = PeriodUnit.YEAR
    for name, unit in [
        ("month", PeriodUnit.MONTH),
        ("day", PeriodUnit.DAY),
        ("hour", PeriodUnit.HOUR),
        ("minute", PeriodUnit.MINUTE),
        ("second", PeriodUnit.SECOND),
    ]:
        if parts[name] is not None:
            precision = unit

    try:
        timestamp = pd.Timestamp(
            year=int(parts["year"]),
            month=int(parts["month"] or 1),
            day=int(parts["day"] or 1),
            hour=int(parts["hour"] or 0),
            minute=int(parts["minute"] or 0),
            second=int(parts["second"] or 0),
            microsecond=int((parts["fraction"] or "0").ljust(6, "0")),
        )
        offset = _utc_offset(parts["offset"]) if parts["offset"] else None
    except ValueError as e:
        raise InvalidIndexTypeError(f"Invalid timestamp {value!r}: {e}", value) from e

    is_date = precision in DATE_PRECISIONS
    if offset is not None:
        timestamp = localize(timestamp.tz_localize(offset), tz)
    elif not is_date:
        timestamp = localize(timestamp, tz)
    return ParsedTimestamp(timestamp, precision, is_date)


def localize(timestamp: pd.Timestamp, tz: Timezone) -> pd.Timestamp:
    if tz is None:
        return timestamp
    if timestamp.tz is None:
        return timestamp.tz_localize(tz)
    return timestamp.tz_convert(tz)


def _utc_offset(offset: str) -> tzinfo:
    if offset == "Z":
        return timezone.utc
    digits = offset[1:].replace(":", "")
    delta = timedelta(hours=int(digits[:2]), minutes=int(digits[2:] or 0))
    return timezone(-delta if offset[0] == "-" else delta)


def _precision_of(timestamp: pd.Timestamp) -> PeriodUnit:
    if timestamp.second or timestamp.microsecond or timestamp.nanosecond:
        return PeriodUnit.SECOND
    if timestamp.minute:
        return PeriodUnit.MINUTE
    if timestamp.hour:
        return PeriodUnit.HOUR
    return PeriodUnit.DAY
