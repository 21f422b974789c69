# SPDX-FileCopyrightText: 2024-2025 Contributors to the timekit project
#
# SPDX-License-Identifier: MPL-2.0
"""Calendar aware step arithmetic.

A :class:`Period` is an ordered list of ``(unit, magnitude)`` pairs such as
``1 year 6 months``. Adding a period to a timestamp applies the month based
parts first (clamping the day of month to the end of the target month, so
``Jan 31 + 1 month`` is the last day of February), then calendar days and
weeks, then absolute hours, minutes and seconds.

Sequences should always be built as ``start + k * step`` with
:meth:`Period.add`, never by repeatedly adding one step, because clamping is
not reversible: ``Jan 31 + 1 month + 1 month`` is ``Mar 28/29`` while
``Jan 31 + 2 months`` is ``Mar 31``.
"""
import re
from typing import Union

import pandas as pd
from pydantic import BaseModel, ConfigDict

from timekit.enums import PERIOD_UNIT_ORDER, PeriodUnit
from timekit.exceptions import InvalidPeriodError

SECONDS_PER_DAY = 24 * 60 * 60
# Nominal month length, only used to compare and classify periods
NOMINAL_SECONDS_PER_MONTH = 30.4375 * SECONDS_PER_DAY

_UNIT_ALIASES = {
    "sec": PeriodUnit.SECOND,
    "secs": PeriodUnit.SECOND,
    "second": PeriodUnit.SECOND,
    "seconds": PeriodUnit.SECOND,
    "min": PeriodUnit.MINUTE,
    "mins": PeriodUnit.MINUTE,
    "minute": PeriodUnit.MINUTE,
    "minutes": PeriodUnit.MINUTE,
    "hr": PeriodUnit.HOUR,
    "hrs": PeriodUnit.HOUR,
    "hour": PeriodUnit.HOUR,
    "hours": PeriodUnit.HOUR,
    "day": PeriodUnit.DAY,
    "days": PeriodUnit.DAY,
    "week": PeriodUnit.WEEK,
    "weeks": PeriodUnit.WEEK,
    "month": PeriodUnit.MONTH,
    "months": PeriodUnit.MONTH,
    "quarter": PeriodUnit.QUARTER,
    "quarters": PeriodUnit.QUARTER,
    "year": PeriodUnit.YEAR,
    "years": PeriodUnit.YEAR,
}

_MONTHS_PER_UNIT = {PeriodUnit.YEAR: 12, PeriodUnit.QUARTER: 3, PeriodUnit.MONTH: 1}
_DAYS_PER_UNIT = {PeriodUnit.WEEK: 7, PeriodUnit.DAY: 1}
_SECONDS_PER_UNIT = {PeriodUnit.HOUR: 3600, PeriodUnit.MINUTE: 60, PeriodUnit.SECOND: 1}

_TOKEN = re.compile(r"(?P<n>[+-]?\d+)?\s*(?P<unit>[a-z]+)")


class Period(BaseModel):
    """Compound calendar step, e.g. ``Period.parse("1 year 4 months 6 days")``."""

    model_config = ConfigDict(frozen=True)

    parts: tuple[tuple[PeriodUnit, int], ...]

    @classmethod
    def parse(cls, text: Union[str, "Period"]) -> "Period":
        """Parse a period descriptor.

        Accepts a number followed by a unit, repeated, e.g. ``"15 min"``,
        ``"1 year 6 months"`` or a bare unit such as ``"quarter"``.

        Raises:
            InvalidPeriodError: If the text is not a valid period.

        """
        if isinstance(text, Period):
            return text
        if not isinstance(text, str):
            raise InvalidPeriodError(text)

        normalized = text.strip().lower()
        if not normalized:
            raise InvalidPeriodError(text)

        magnitudes: dict[PeriodUnit, int] = {}
        position = 0
        for match in _TOKEN.finditer(normalized):
            if normalized[position : match.start()].strip():
                raise InvalidPeriodError(text)
            unit = _UNIT_ALIASES.get(match.group("unit"))
            if unit is None:
                raise InvalidPeriodError(
                    text, f"Unknown unit {match.group('unit')!r} in period {text!r}"
                )
            n = int(match.group("n")) if match.group("n") is not None else 1
            magnitudes[unit] = magnitudes.get(unit, 0) + n
            position = match.end()

        if normalized[position:].strip():
            raise InvalidPeriodError(text)

        return cls._from_magnitudes(magnitudes)

    @classmethod
    def from_unit(cls, unit: Union[str, PeriodUnit], n: int = 1) -> "Period":
        return cls(parts=((PeriodUnit(unit), int(n)),))

    @classmethod
    def from_seconds(cls, seconds: int) -> "Period":
        """Exact period for a duration, in whole days where possible."""
        seconds = int(seconds)
        if seconds % SECONDS_PER_DAY == 0:
            return cls.from_unit(PeriodUnit.DAY, seconds // SECONDS_PER_DAY)
        return cls.from_unit(PeriodUnit.SECOND, seconds)

    @classmethod
    def _from_magnitudes(cls, magnitudes: dict) -> "Period":
        return cls(
            parts=tuple(
                (unit, magnitudes[unit])
                for unit in PERIOD_UNIT_ORDER
                if magnitudes.get(unit, 0) != 0
            )
        )

    @property
    def months(self) -> int:
        return sum(_MONTHS_PER_UNIT.get(unit, 0) * n for unit, n in self.parts)

    @property
    def days(self) -> int:
        return sum(_DAYS_PER_UNIT.get(unit, 0) * n for unit, n in self.parts)

    @property
    def clock_seconds(self) -> int:
        return sum(_SECONDS_PER_UNIT.get(unit, 0) * n for unit, n in self.parts)

    @property
    def seconds(self) -> float:
        """Nominal length in seconds, months counted as 30.4375 days."""
        return (
            self.months * NOMINAL_SECONDS_PER_MONTH
            + self.days * SECONDS_PER_DAY
            + self.clock_seconds
        )

    @property
    def finest_unit(self) -> PeriodUnit:
        if not self.parts:
            raise InvalidPeriodError(self, "An empty period has no unit")
        return self.parts[-1][0]

    @property
    def is_calendar(self) -> bool:
        """Whether the period has month based parts."""
        return self.months != 0

    @property
    def has_time(self) -> bool:
        """Whether the period has parts finer than a day."""
        return self.clock_seconds != 0

    @property
    def is_zero(self) -> bool:
        return not self.parts

    def is_positive(self) -> bool:
        return bool(self.parts) and all(n > 0 for _, n in self.parts)

    def add(self, timestamp, k: int = 1) -> pd.Timestamp:
        """Return ``timestamp + k * self``."""
        result = pd.Timestamp(timestamp)
        if self.months:
            result = result + pd.DateOffset(months=self.months * k)
        if self.days:
            result = result + pd.DateOffset(days=self.days * k)
        if self.clock_seconds:
            result = result + pd.Timedelta(seconds=self.clock_seconds * k)
        return result

    def subtract(self, timestamp, k: int = 1) -> pd.Timestamp:
        return self.add(timestamp, -k)

    def __mul__(self, k: int) -> "Period":
        return Period(parts=tuple((unit, n * int(k)) for unit, n in self.parts))

    __rmul__ = __mul__

    def __neg__(self) -> "Period":
        return self * -1

    def __str__(self) -> str:
        if not self.parts:
            return "0 seconds"
        return " ".join(
            f"{n} {unit.value}{'' if abs(n) == 1 else 's'}" for unit, n in self.parts
        )
