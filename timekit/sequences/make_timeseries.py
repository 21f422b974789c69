# SPDX-FileCopyrightText: 2024-2025 Contributors to the timekit project
#
# SPDX-License-Identifier: MPL-2.0
"""Generation of time sequences from sparse specifications."""
import numbers
from typing import Any, Optional, Union

import pandas as pd

from timekit.data_classes.sequence_spec import SequenceSpec
from timekit.data_classes.time_index import TimeIndex
from timekit.enums import IndexUnit
from timekit.exceptions import ContradictorySpecError, UnderDeterminedSpecError
from timekit.logging.logger_factory import get_logger
from timekit.period import Period
from timekit.sequences.timestamps import (
    ParsedTimestamp,
    apply_skip_and_insert,
    localize,
    parse_timestamp,
    precision_period_unit,
)

logger = get_logger(__name__)


def make_timeseries(
    start: Any = None,
    end: Any = None,
    by: Union[str, Period, None] = None,
    length_out: Union[int, str, Period, None] = None,
    include_endpoint: bool = True,
    skip_values: Optional[list] = None,
    insert_values: Optional[list] = None,
    tz: Optional[str] = None,
) -> TimeIndex:
    """Make a time sequence from any two of start, end, length_out and by.

    Args:
        start: First timestamp. Strings may be truncated, e.g. ``"2012"`` or
            ``"2012-07"``.
        end: Last timestamp, same formats as start.
        by: Step such as ``"1 month"`` or ``"1 year 6 months"``. When omitted the
            step is the finest precision of start and end: ``"2012"`` steps by
            year, ``"2012-07"`` by month and ``"2012-07-01"`` by day.
        length_out: Number of timestamps, or a period such as ``"1 year 6 months"``
            spanned from start (or back from end).
        include_endpoint: Whether the terminal boundary is kept. Walking forward
            from start this is the end, walking back from end it is the start.
        skip_values: Timestamps removed after generation. Dates remove every
            timestamp on that day.
        insert_values: Timestamps added after generation.
        tz: Timezone of datetime sequences.

    Returns:
        Ascending time index. It holds dates when every boundary is a date and
        the step has no time of day part.

    Raises:
        UnderDeterminedSpecError: If the inputs do not determine a sequence.
        ContradictorySpecError: If the inputs conflict.

    Example:
        >>> make_timeseries("2012-07", by="1 month", length_out="1 year 6 months",
        ...                 include_endpoint=False)  # 18 monthly dates

    """
    if by is not None:
        by = Period.parse(by)
    if isinstance(length_out, numbers.Integral) and not isinstance(length_out, bool):
        length_out = int(length_out)
    elif length_out is not None:
        length_out = Period.parse(length_out)

    spec = SequenceSpec(
        start=start,
        end=end,
        by=by,
        length_out=length_out,
        include_endpoint=include_endpoint,
        skip_values=skip_values,
        insert_values=insert_values,
        tz=tz,
    )
    return make_timeseries_from_spec(spec)


def make_timeseries_from_spec(spec: SequenceSpec) -> TimeIndex:
    """Make a time sequence from a :class:`SequenceSpec`."""
    start = parse_timestamp(spec.start, spec.tz) if spec.start is not None else None
    end = parse_timestamp(spec.end, spec.tz) if spec.end is not None else None
    by = spec.by
    length_out = spec.length_out

    _validate(start, end, by, length_out)

    tz = spec.tz
    if tz is None:
        aware = [p for p in (start, end) if p is not None and p.timestamp.tz is not None]
        if aware:
            tz = aware[0].timestamp.tz

    unit = _output_unit(start, end, by, length_out, tz)
    if unit == IndexUnit.SECS:
        start = _as_instant(start, tz)
        end = _as_instant(end, tz)

    if start is not None and end is not None and start.timestamp > end.timestamp:
        raise ContradictorySpecError(
            f"Start {start.timestamp} is after end {end.timestamp}"
        )

    if by is None and not (
        start is not None and end is not None and isinstance(length_out, int)
    ):
        by = Period.from_unit(precision_period_unit(start, end))
        logger.debug("Inferred step from boundary precision", step=str(by))

    if start is not None and end is not None:
        values = _between(start.timestamp, end.timestamp, by, length_out, spec)
    elif start is not None:
        values = _forward(start.timestamp, by, length_out, spec.include_endpoint)
    else:
        values = _backward(end.timestamp, by, length_out, spec.include_endpoint)

    if unit == IndexUnit.DAYS and not (values == values.normalize()).all():
        unit = IndexUnit.SECS

    values = apply_skip_and_insert(
        values, unit, spec.skip_values, spec.insert_values, tz
    )

    logger.debug(
        "Generated time sequence",
        n_obs=len(values),
        step=str(by) if by is not None else None,
        unit=unit.value,
    )

    return TimeIndex(values, unit)


def _validate(
    start: Optional[ParsedTimestamp],
    end: Optional[ParsedTimestamp],
    by: Optional[Period],
    length_out: Union[int, Period, None],
) -> None:
    if start is None and end is None:
        raise UnderDeterminedSpecError(
            "A start or an end is required to make a time sequence"
        )
    if (start is None or end is None) and length_out is None:
        raise UnderDeterminedSpecError(
            "A sequence with only a start or only an end needs length_out"
        )
    if by is not None and not by.is_positive():
        raise ContradictorySpecError(f"Step must be positive, got {by}")
    if isinstance(length_out, int) and length_out <= 0:
        raise ContradictorySpecError(
            f"length_out must be a positive count, got {length_out}"
        )
    if isinstance(length_out, Period) and not length_out.is_positive():
        raise ContradictorySpecError(
            f"length_out must be a positive period, got {length_out}"
        )


def _output_unit(start, end, by, length_out, tz) -> IndexUnit:
    date_only = all(p.is_date for p in (start, end) if p is not None)
    for period in (by, length_out):
        if isinstance(period, Period) and period.has_time:
            date_only = False
    if tz is not None:
        date_only = False
    return IndexUnit.DAYS if date_only else IndexUnit.SECS


def _as_instant(
    parsed: Optional[ParsedTimestamp], tz: Optional[str]
) -> Optional[ParsedTimestamp]:
    if parsed is None:
        return None
    return parsed._replace(timestamp=localize(parsed.timestamp, tz), is_date=False)


def _fixed_step(by: Period, timestamp: pd.Timestamp) -> Optional[pd.Timedelta]:
    """Step as an exact duration when adding it never depends on the calendar."""
    if by.is_calendar or (by.days and timestamp.tz is not None):
        return None
    return pd.Timedelta(days=by.days, seconds=by.clock_seconds)


def _count(start: pd.Timestamp, by: Period, n: int) -> pd.DatetimeIndex:
    step = _fixed_step(by, start)
    if step is not None:
        return pd.date_range(start=start, periods=n, freq=step)
    return pd.DatetimeIndex([by.add(start, k) for k in range(n)])


def _count_back(end: pd.Timestamp, by: Period, n: int) -> pd.DatetimeIndex:
    step = _fixed_step(by, end)
    if step is not None:
        return pd.date_range(end=end, periods=n, freq=step)
    return pd.DatetimeIndex([by.subtract(end, k) for k in reversed(range(n))])


def _grid(
    anchor: pd.Timestamp, limit: pd.Timestamp, by: Period, backward: bool = False
) -> pd.DatetimeIndex:
    """All points ``anchor +/- k * by`` between anchor and limit, ascending."""
    step = _fixed_step(by, anchor)
    if step is not None:
        n = int(abs(limit - anchor) // step) + 1
        return _count_back(anchor, by, n) if backward else _count(anchor, by, n)

    values = []
    k = 0
    while True:
        value = by.subtract(anchor, k) if backward else by.add(anchor, k)
        if (value < limit) if backward else (value > limit):
            break
        values.append(value)
        k += 1
    if backward:
        values.reverse()
    return pd.DatetimeIndex(values)


def _forward(
    start: pd.Timestamp,
    by: Period,
    length_out: Union[int, Period],
    include_endpoint: bool,
) -> pd.DatetimeIndex:
    if isinstance(length_out, int):
        return _count(start, by, length_out)
    end = length_out.add(start)
    return _with_endpoint(_grid(start, end, by), end, include_endpoint, at_end=True)


def _backward(
    end: pd.Timestamp,
    by: Period,
    length_out: Union[int, Period],
    include_endpoint: bool,
) -> pd.DatetimeIndex:
    if isinstance(length_out, int):
        return _count_back(end, by, length_out)
    start = length_out.subtract(end)
    return _with_endpoint(
        _grid(end, start, by, backward=True), start, include_endpoint, at_end=False
    )


def _between(
    start: pd.Timestamp,
    end: pd.Timestamp,
    by: Optional[Period],
    length_out: Union[int, Period, None],
    spec: SequenceSpec,
) -> pd.DatetimeIndex:
    if by is None:
        # start, end and a count: evenly spaced points
        if length_out == 1 and start != end:
            raise ContradictorySpecError(
                f"A single point cannot both start at {start} and end at {end}"
            )
        return pd.date_range(start=start, end=end, periods=length_out)

    if isinstance(length_out, Period) and length_out.add(start) != end:
        raise ContradictorySpecError(
            f"length_out {length_out} from {start} ends at {length_out.add(start)}, "
            f"not at {end}"
        )

    values = _with_endpoint(
        _grid(start, end, by), end, spec.include_endpoint, at_end=True
    )

    if isinstance(length_out, int) and len(values) != length_out:
        raise ContradictorySpecError(
            f"Stepping by {by} from {start} to {end} gives {len(values)} points, "
            f"not length_out={length_out}"
        )
    return values


def _with_endpoint(
    values: pd.DatetimeIndex,
    boundary: pd.Timestamp,
    include_endpoint: bool,
    at_end: bool,
) -> pd.DatetimeIndex:
    """Make sure the terminal boundary is present, or absent."""
    present = len(values) > 0 and (values[-1] if at_end else values[0]) == boundary
    if include_endpoint and not present:
        boundary_index = pd.DatetimeIndex([boundary])
        values = values.append(boundary_index) if at_end else boundary_index.append(values)
    elif not include_endpoint and present:
        values = values[:-1] if at_end else values[1:]
    return values
