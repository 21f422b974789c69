# SPDX-FileCopyrightText: 2024-2025 Contributors to the timekit project
#
# SPDX-License-Identifier: MPL-2.0
"""Extraction of time indices from pandas objects and plain sequences."""
from datetime import date, datetime
from typing import Any, Optional

import numpy as np
import pandas as pd

from timekit.data_classes.time_index import TimeIndex
from timekit.enums import IndexUnit
from timekit.exceptions import InvalidIndexTypeError


def get_index(data: Any, column: Optional[str] = None) -> TimeIndex:
    """Extract the time index of a time indexed collection.

    Args:
        data: A TimeIndex, DatetimeIndex, Series, DataFrame or a sequence of
            ``date``/``datetime`` objects.
        column: Name of the timestamp column when ``data`` is a DataFrame. If not
            given the DataFrame index is used when it is a DatetimeIndex, otherwise
            the first date-like column.

    Returns:
        The time index. ``datetime64`` data and ``datetime`` elements give a
        ``"secs"`` index, pure ``date`` elements give a ``"days"`` index.

    Raises:
        InvalidIndexTypeError: If no timestamps can be found or an element is not
            a timestamp.

    """
    if isinstance(data, TimeIndex):
        return data

    if isinstance(data, pd.DataFrame):
        return _index_from_frame(data, column)

    if column is not None:
        raise InvalidIndexTypeError(
            f"A column can only be selected from a DataFrame, got {type(data).__name__}",
            value=data,
        )

    if isinstance(data, pd.DatetimeIndex):
        return TimeIndex(data, IndexUnit.SECS)

    if isinstance(data, (pd.Series, pd.Index, np.ndarray)):
        if pd.api.types.is_datetime64_any_dtype(data.dtype):
            return TimeIndex(pd.DatetimeIndex(data), IndexUnit.SECS)
        if data.dtype == object:
            return _index_from_elements(list(data))
        raise InvalidIndexTypeError(
            f"Expected timestamps, got values of dtype {data.dtype}", value=data
        )

    if isinstance(data, (str, bytes, date, np.datetime64)) or not hasattr(
        data, "__iter__"
    ):
        raise InvalidIndexTypeError(
            f"Expected a sequence of timestamps, got {type(data).__name__}", value=data
        )

    return _index_from_elements(list(data))


def has_timeseries_index(data: Any) -> bool:
    """Whether the object is indexed by a DatetimeIndex."""
    return isinstance(getattr(data, "index", None), pd.DatetimeIndex)


def get_timeseries_variables(data: pd.DataFrame) -> list:
    """Labels of the columns holding timestamps, in column order."""
    if not isinstance(data, pd.DataFrame):
        raise InvalidIndexTypeError(
            f"Expected a DataFrame, got {type(data).__name__}", value=data
        )
    return [name for name in data.columns if _is_timestamp_column(data[name])]


def _index_from_frame(data: pd.DataFrame, column: Any) -> TimeIndex:
    if column is not None:
        if column not in data.columns:
            raise InvalidIndexTypeError(
                f"Column {column!r} not found in DataFrame", value=column
            )
        return get_index(data[column])

    if isinstance(data.index, pd.DatetimeIndex):
        return TimeIndex(data.index, IndexUnit.SECS)

    timestamp_columns = get_timeseries_variables(data)
    if not timestamp_columns:
        raise InvalidIndexTypeError(
            "DataFrame has neither a DatetimeIndex nor a timestamp column", value=None
        )
    return get_index(data[timestamp_columns[0]])


def _is_timestamp_column(series: pd.Series) -> bool:
    if pd.api.types.is_datetime64_any_dtype(series.dtype):
        return True
    if series.dtype != object:
        return False
    values = series.dropna()
    return len(values) > 0 and all(
        isinstance(value, (date, np.datetime64)) for value in values
    )


def _is_missing(value: Any) -> bool:
    return value is None or value is pd.NaT or (
        isinstance(value, (float, np.floating)) and np.isnan(value)
    )


def _index_from_elements(values: list) -> TimeIndex:
    if not values:
        return TimeIndex.empty(IndexUnit.SECS)

    units = set()
    timezones = set()
    for value in values:
        if _is_missing(value) or not isinstance(value, (date, np.datetime64)):
            raise InvalidIndexTypeError(
                f"Expected a date or datetime, got {value!r}", value=value
            )
        if isinstance(value, (datetime, np.datetime64)):
            units.add(IndexUnit.SECS)
            timezones.add(_tz_key(pd.Timestamp(value)))
        else:
            units.add(IndexUnit.DAYS)

    if len(units) > 1:
        raise InvalidIndexTypeError(
            "Time index mixes dates and datetimes; all elements must share one granularity",
            value=values,
        )
    if len(timezones) > 1:
        raise InvalidIndexTypeError(
            f"Time index mixes timezones {sorted(timezones)}", value=values
        )

    if units == {IndexUnit.DAYS}:
        return TimeIndex.from_dates(values)
    return TimeIndex(
        pd.DatetimeIndex([pd.Timestamp(value) for value in values]), IndexUnit.SECS
    )


def _tz_key(timestamp: pd.Timestamp) -> str:
    return "naive" if timestamp.tz is None else str(timestamp.tz)
