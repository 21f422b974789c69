# SPDX-FileCopyrightText: 2024-2025 Contributors to the timekit project
#
# SPDX-License-Identifier: MPL-2.0
"""Continuation of an existing time index into the future."""
import numbers
from typing import Any, Optional, Union

import numpy as np
import pandas as pd

from timekit.data_classes.time_index import TimeIndex
from timekit.exceptions import (
    ContradictorySpecError,
    EmptyIndexError,
    UnderDeterminedSpecError,
    UnreachableTargetError,
)
from timekit.feature_engineering.frequency import infer_period
from timekit.index import get_index
from timekit.logging.logger_factory import get_logger
from timekit.period import Period
from timekit.sequences.timestamps import (
    localize,
    parse_insert_values,
    parse_timestamp,
    skip_mask,
)
from timekit.settings import Settings

logger = get_logger(__name__)

# Saturday and Sunday in pandas dayofweek numbering
WEEKEND_DAYS = [5, 6]


def make_future_timeseries(
    data: Any,
    length_out: Union[int, str, Period, None] = None,
    end: Any = None,
    inspect_weekdays: bool = False,
    skip_values: Optional[list] = None,
    insert_values: Optional[list] = None,
    max_candidate_multiple: Optional[int] = None,
) -> TimeIndex:
    """Continue a time index after its last timestamp.

    The step is inferred from the median difference of the index, see
    :func:`timekit.feature_engineering.frequency.infer_period`. Candidates are
    ``last + k * step`` for ``k = 1, 2, ...``.

    Args:
        data: Anything :func:`timekit.index.get_index` accepts, with at least two
            timestamps.
        length_out: Number of future timestamps to *keep* after removing skipped
            ones, or a period such as ``"3 months"`` after the last timestamp.
        end: Last allowed future timestamp, instead of ``length_out``.
        inspect_weekdays: Drop candidates that fall on a Saturday or Sunday.
        skip_values: Timestamps to drop, dates drop every candidate on that day.
        insert_values: Future timestamps to add.
        max_candidate_multiple: Generate at most ``length_out`` times this many
            candidates, defaults to ``Settings.future_max_candidate_multiple``.

    Returns:
        Ascending time index with the granularity and timezone of the input.

    Raises:
        UnreachableTargetError: If ``length_out`` points cannot be kept within the
            candidate bound.
        UnderDeterminedSpecError: If neither ``length_out`` nor ``end`` is given,
            or the step cannot be inferred.
        ContradictorySpecError: If both ``length_out`` and ``end`` are given, or a
            boundary or inserted value is not after the last timestamp.

    """
    index = get_index(data)
    if len(index) == 0:
        raise EmptyIndexError("Cannot extend an empty time index")
    if length_out is None and end is None:
        raise UnderDeterminedSpecError("Either length_out or end is required")
    if length_out is not None and end is not None:
        raise ContradictorySpecError("Give either length_out or end, not both")
    if isinstance(length_out, bool):
        raise ContradictorySpecError("length_out must be a count or a period")
    if isinstance(length_out, numbers.Integral):
        length_out = int(length_out)

    if max_candidate_multiple is None:
        max_candidate_multiple = Settings.future_max_candidate_multiple
    if max_candidate_multiple <= 0:
        raise ContradictorySpecError(
            f"max_candidate_multiple must be positive, got {max_candidate_multiple}"
        )

    step = infer_period(index)
    tz = index.values.tz
    last = index.values.max()

    if length_out is not None and not isinstance(length_out, int):
        limit = Period.parse(length_out).add(last)
    elif end is not None:
        limit = localize(parse_timestamp(end, tz).timestamp, tz)
    else:
        limit = None
    if limit is not None and limit <= last:
        raise ContradictorySpecError(
            f"Future sequence must end after the last timestamp {last}, got {limit}"
        )

    def is_kept(candidates: pd.DatetimeIndex) -> np.ndarray:
        dropped = skip_mask(candidates, skip_values, tz)
        if inspect_weekdays:
            dropped |= np.isin(candidates.dayofweek, WEEKEND_DAYS)
        return ~dropped

    if limit is None:
        values = _take(last, step, length_out, max_candidate_multiple, is_kept)
    else:
        values = _until(last, step, limit, is_kept)

    inserted = parse_insert_values(insert_values, index.unit, tz)
    if len(inserted):
        if (inserted <= last).any():
            raise ContradictorySpecError(
                f"Inserted values must be after the last timestamp {last}"
            )
        values = values.append(inserted).unique().sort_values()

    logger.debug(
        "Extended time index",
        n_obs=len(index),
        n_future=len(values),
        step=str(step),
        inspect_weekdays=inspect_weekdays,
    )

    return TimeIndex(values, index.unit)


def _take(
    last: pd.Timestamp,
    step: Period,
    length_out: int,
    max_candidate_multiple: int,
    is_kept,
) -> pd.DatetimeIndex:
    """First ``length_out`` kept candidates, generated in bounded batches."""
    if length_out <= 0:
        raise ContradictorySpecError(
            f"length_out must be a positive count, got {length_out}"
        )

    max_candidates = length_out * max_candidate_multiple
    kept = []
    k = 1
    while len(kept) < length_out and k <= max_candidates:
        batch_size = min(max(length_out - len(kept), 1) * 2, max_candidates - k + 1)
        candidates = pd.DatetimeIndex(
            [step.add(last, i) for i in range(k, k + batch_size)]
        )
        kept.extend(candidates[is_kept(candidates)])
        k += batch_size

    if len(kept) < length_out:
        raise UnreachableTargetError(
            requested=length_out, retained=len(kept), candidates=k - 1
        )

    skipped = k - 1 - len(kept)
    if skipped:
        logger.debug("Skipped future candidates", n_skipped=skipped)

    return pd.DatetimeIndex(kept[:length_out])


def _until(
    last: pd.Timestamp, step: Period, limit: pd.Timestamp, is_kept
) -> pd.DatetimeIndex:
    candidates = []
    k = 1
    candidate = step.add(last, k)
    while candidate <= limit:
        candidates.append(candidate)
        k += 1
        candidate = step.add(last, k)

    if not candidates:
        return pd.DatetimeIndex([], tz=last.tz)
    candidates = pd.DatetimeIndex(candidates)
    return candidates[is_kept(candidates)]
