# SPDX-FileCopyrightText: 2024-2025 Contributors to the timekit project
#
# SPDX-License-Identifier: MPL-2.0

# Decomposition of a time index into calendar features: epoch offsets, successive
# differences and year, quarter, month, week and day counters.

from typing import Any, Optional

import numpy as np
import pandas as pd

from timekit.data_classes.signature_row import (
    MONTH_LABELS,
    WEEKDAY_LABELS,
    SignatureRow,
)
from timekit.data_classes.time_index import TimeIndex
from timekit.index import get_index
from timekit.logging.logger_factory import get_logger

logger = get_logger(__name__)

UNIX_EPOCH = pd.Timestamp("1970-01-01")

SIGNATURE_COLUMNS = [
    "index",
    "index_num",
    "diff",
    "year",
    "year_iso",
    "half",
    "quarter",
    "month",
    "month_xts",
    "month_lbl",
    "day",
    "hour",
    "minute",
    "second",
    "hour12",
    "am_pm",
    "wday",
    "wday_xts",
    "wday_lbl",
    "mday",
    "qday",
    "yday",
    "mweek",
    "week",
    "week_iso",
    "week2",
    "week3",
    "week4",
    "mday7",
]


def epoch_seconds(values: pd.DatetimeIndex) -> np.ndarray:
    """Whole seconds since 1970-01-01 00:00:00 UTC, floored.

    Timezone aware values are converted to UTC first, naive values are read as UTC.
    """
    if values.tz is not None:
        values = values.tz_convert("UTC").tz_localize(None)
    return np.asarray((values - UNIX_EPOCH) // pd.Timedelta(seconds=1), dtype="int64")


def get_timeseries_signature(data: Any, column: Optional[str] = None) -> pd.DataFrame:
    """Decompose a time index into its calendar signature.

    Every row describes one element of the index, in the order of the index.
    The ``diff`` column is the difference in seconds with the *previous element*,
    so unsorted input gives negative differences instead of being reordered.

    Args:
        data: Anything :func:`timekit.index.get_index` accepts.
        column: Timestamp column when ``data`` is a DataFrame.

    Returns:
        DataFrame with the columns of :data:`SIGNATURE_COLUMNS`. Time of day
        columns are zero for day indices.

    Raises:
        InvalidIndexTypeError: If ``data`` does not hold valid timestamps.

    """
    index = get_index(data, column)
    values = index.values
    n = len(values)

    if n > 1 and not values.is_monotonic_increasing:
        logger.warning(
            "Time index is not sorted, differences are taken in sequence order",
            n_obs=n,
        )

    # Calendar fields use local wall clock time
    local = values.tz_localize(None) if values.tz is not None else values

    index_num = epoch_seconds(values)
    diff = pd.array(
        [pd.NA] + np.diff(index_num).tolist() if n else [], dtype="Int64"
    )

    year = np.asarray(local.year, dtype="int64")
    month = np.asarray(local.month, dtype="int64")
    day = np.asarray(local.day, dtype="int64")
    quarter = np.asarray(local.quarter, dtype="int64")
    yday = np.asarray(local.dayofyear, dtype="int64")

    iso = local.isocalendar()
    year_iso = iso["year"].to_numpy(dtype="int64")
    week_iso = iso["week"].to_numpy(dtype="int64")

    if index.is_date:
        hour = minute = second = np.zeros(n, dtype="int64")
    else:
        hour = np.asarray(local.hour, dtype="int64")
        minute = np.asarray(local.minute, dtype="int64")
        second = np.asarray(local.second, dtype="int64")

    # pandas counts Monday as 0, the signature counts Sunday as 0
    wday_xts = (np.asarray(local.dayofweek, dtype="int64") + 1) % 7

    # Sunday based weekday of the first day of the month and of the year
    first_of_month_wday = (wday_xts - (day - 1)) % 7
    first_of_year_wday = (wday_xts - (yday - 1)) % 7
    week = (yday + first_of_year_wday - 1) // 7 + 1

    days = local.to_numpy().astype("datetime64[D]")
    quarter_start = local.to_numpy().astype("datetime64[Y]").astype(
        "datetime64[M]"
    ) + ((quarter - 1) * 3).astype("timedelta64[M]")
    qday = (days - quarter_start.astype("datetime64[D]")).astype("int64") + 1

    signature = pd.DataFrame(
        {
            "index": _index_column(index),
            "index_num": index_num,
            "diff": diff,
            "year": year,
            "year_iso": year_iso,
            "half": np.where(month <= 6, 1, 2),
            "quarter": quarter,
            "month": month,
            "month_xts": month - 1,
            "month_lbl": pd.Categorical.from_codes(
                month - 1, categories=MONTH_LABELS, ordered=True
            ),
            "day": day,
            "hour": hour,
            "minute": minute,
            "second": second,
            "hour12": hour % 12,
            "am_pm": np.where(hour < 12, 1, 2),
            "wday": wday_xts + 1,
            "wday_xts": wday_xts,
            "wday_lbl": pd.Categorical.from_codes(
                wday_xts, categories=WEEKDAY_LABELS, ordered=True
            ),
            "mday": day,
            "qday": qday,
            "yday": yday,
            "mweek": (day + first_of_month_wday - 1) // 7 + 1,
            "week": week,
            "week_iso": week_iso,
            "week2": week % 2,
            "week3": week % 3,
            "week4": week % 4,
            "mday7": (day - 1) // 7 + 1,
        },
        index=pd.RangeIndex(n),
        columns=SIGNATURE_COLUMNS,
    )

    logger.debug(
        "Computed time series signature", n_obs=n, unit=index.unit.value, tz=index.tz
    )

    return signature


def get_signature_rows(data: Any, column: Optional[str] = None) -> list[SignatureRow]:
    """Signature of a time index as immutable records."""
    rows = []
    for record in get_timeseries_signature(data, column).to_dict("records"):
        record = {
            key: value.item() if isinstance(value, np.generic) else value
            for key, value in record.items()
        }
        record["diff"] = None if pd.isna(record["diff"]) else int(record["diff"])
        rows.append(SignatureRow(**record))
    return rows


def augment_timeseries_signature(
    data: pd.DataFrame, column: Optional[str] = None
) -> pd.DataFrame:
    """Adds the signature columns of the time index to the input data.

    Args:
        data: DataFrame indexed by datetime or with a timestamp column.
        column: Timestamp column, by default the DatetimeIndex or the first
            timestamp column is used.

    Returns:
        Copy of the input data with every signature column except ``index``
        appended. Existing columns with the same name are replaced.

    """
    if not isinstance(data, pd.DataFrame):
        raise TypeError(f"Expected a DataFrame, got {type(data).__name__}")

    signature = get_timeseries_signature(data, column).drop(columns="index")
    signature.index = data.index

    overlapping = [name for name in signature.columns if name in data.columns]
    if overlapping:
        logger.warning(
            f"Replacing {len(overlapping)} existing columns with signature features",
            replaced_columns=overlapping,
        )

    # Make a copy of the DataFrame to avoid modifying the original
    data = data.drop(columns=overlapping).copy()

    return pd.concat([data, signature], axis=1)


def _index_column(index: TimeIndex):
    if index.is_date:
        return pd.Series(index.to_list(), index=pd.RangeIndex(len(index)), dtype=object)
    return pd.Series(index.values, index=pd.RangeIndex(len(index)))
