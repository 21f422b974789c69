# SPDX-FileCopyrightText: 2024-2025 Contributors to the timekit project
#
# SPDX-License-Identifier: MPL-2.0
"""Median based frequency inference of time indices."""
from typing import Any, Optional

import numpy as np

from timekit.data_classes.time_index import TimeIndex
from timekit.enums import PeriodUnit
from timekit.exceptions import UnderDeterminedSpecError
from timekit.feature_engineering.signature import epoch_seconds
from timekit.index import get_index
from timekit.logging.logger_factory import get_logger
from timekit.period import SECONDS_PER_DAY, Period
from timekit.settings import Settings

logger = get_logger(__name__)

# Scales stepped with calendar (month based) arithmetic
CALENDAR_SCALES = {"month": 1, "quarter": 3, "year": 12}


def classify_scale(median_seconds: float, thresholds: Optional[dict] = None) -> str:
    """Classify a median difference into a named time scale.

    Each threshold is the inclusive lower bound of its bucket, the coarsest
    bucket reached wins. A median exactly on a threshold, e.g. 86400 seconds,
    is classified as the coarser bucket (``"day"``). Medians below the finest
    threshold are classified as the finest bucket.

    Args:
        median_seconds: Median difference between observations in seconds.
        thresholds: Mapping of scale name to lower bound in seconds, defaults to
            ``Settings.scale_thresholds``.

    Returns:
        Name of the scale.

    """
    if thresholds is None:
        thresholds = Settings.scale_thresholds
    if not thresholds:
        raise ValueError("At least one scale threshold is required")

    ladder = sorted(thresholds.items(), key=lambda item: item[1])
    scale = ladder[0][0]
    for name, lower_bound in ladder:
        if median_seconds >= lower_bound:
            scale = name
    return scale


def infer_period(data: Any, thresholds: Optional[dict] = None) -> Period:
    """Infer the dominant step of a time index from its median difference.

    Month, quarter and year scaled indices get a calendar step of the median
    number of months between neighbours, so that month ends and leap years do
    not make the step drift. Other indices get the median difference as an exact
    duration, in whole days where possible.

    Raises:
        UnderDeterminedSpecError: If the index has fewer than two distinct
            timestamps.

    """
    index = get_index(data)
    if len(index) < 2:
        raise UnderDeterminedSpecError(
            f"At least two timestamps are needed to infer a step, got {len(index)}"
        )

    ordered = np.sort(epoch_seconds(index.values))
    median = float(np.median(np.diff(ordered)))
    if median <= 0:
        raise UnderDeterminedSpecError(
            "Cannot infer a step from an index of repeated timestamps"
        )

    scale = classify_scale(median, thresholds)

    if scale in CALENDAR_SCALES:
        local = _local_values(index).sort_values()
        month_number = np.asarray(local.year * 12 + local.month, dtype="int64")
        months = int(round(float(np.median(np.diff(month_number)))))
        if months <= 0:
            months = CALENDAR_SCALES[scale]
        period = Period.from_unit(PeriodUnit.MONTH, months)
    elif index.is_date:
        period = Period.from_unit(
            PeriodUnit.DAY, max(1, int(round(median / SECONDS_PER_DAY)))
        )
    else:
        period = Period.from_seconds(int(round(median)))

    logger.debug(
        "Inferred step of time index",
        scale=scale,
        step=str(period),
        median_seconds=median,
    )
    return period


def _local_values(index: TimeIndex):
    values = index.values
    return values.tz_localize(None) if values.tz is not None else values
