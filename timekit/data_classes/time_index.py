# SPDX-FileCopyrightText: 2024-2025 Contributors to the timekit project
#
# SPDX-License-Identifier: MPL-2.0
"""Specifies the time index value type."""
from datetime import date
from typing import Iterator, Union

import pandas as pd

from timekit.enums import IndexUnit
from timekit.exceptions import InvalidIndexTypeError


class TimeIndex:
    """Ordered timestamps sharing one granularity and one timezone.

    Day indices (``unit == "days"``) are stored as timezone naive midnight
    timestamps and yield :class:`datetime.date` objects. Second indices
    (``unit == "secs"``) yield :class:`pandas.Timestamp` objects.
    """

    __slots__ = ("_values", "_unit")

    def __init__(self, values: pd.DatetimeIndex, unit: Union[str, IndexUnit]):
        if not isinstance(values, pd.DatetimeIndex):
            raise InvalidIndexTypeError(
                f"Expected a pandas DatetimeIndex, got {type(values).__name__}",
                value=values,
            )
        if values.hasnans:
            raise InvalidIndexTypeError(
                "Time index contains missing timestamps", value=values
            )
        unit = IndexUnit(unit)
        if unit == IndexUnit.DAYS:
            if values.tz is not None:
                raise InvalidIndexTypeError(
                    "Day indices cannot carry a timezone", value=values
                )
            if not (values == values.normalize()).all():
                raise InvalidIndexTypeError(
                    "Day indices must not have a time of day", value=values
                )
        self._values = values.rename(None)
        self._unit = unit

    @classmethod
    def from_dates(cls, dates) -> "TimeIndex":
        return cls(pd.DatetimeIndex([pd.Timestamp(d) for d in dates]), IndexUnit.DAYS)

    @classmethod
    def empty(cls, unit: Union[str, IndexUnit] = IndexUnit.SECS) -> "TimeIndex":
        return cls(pd.DatetimeIndex([]), unit)

    @property
    def values(self) -> pd.DatetimeIndex:
        return self._values

    @property
    def unit(self) -> IndexUnit:
        return self._unit

    @property
    def is_date(self) -> bool:
        return self._unit == IndexUnit.DAYS

    @property
    def tz(self) -> str:
        """Timezone name; naive and day indices are read as UTC."""
        if self._values.tz is None:
            return "UTC"
        return str(self._values.tz)

    def _element(self, timestamp: pd.Timestamp) -> Union[date, pd.Timestamp]:
        return timestamp.date() if self.is_date else timestamp

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator:
        return (self._element(timestamp) for timestamp in self._values)

    def __getitem__(self, item):
        if isinstance(item, slice):
            return TimeIndex(self._values[item], self._unit)
        return self._element(self._values[item])

    def __eq__(self, other) -> bool:
        if not isinstance(other, TimeIndex):
            return NotImplemented
        return self._unit == other._unit and self._values.equals(other._values)

    __hash__ = None

    def __repr__(self) -> str:
        return f"TimeIndex(unit={self._unit.value!r}, tz={self.tz!r}, values={self.to_list()!r})"

    def to_list(self) -> list:
        return list(self)

    def to_pandas(self) -> pd.DatetimeIndex:
        return self._values.copy()

    @property
    def is_monotonic_increasing(self) -> bool:
        return self._values.is_monotonic_increasing
