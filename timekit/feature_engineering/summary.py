# SPDX-FileCopyrightText: 2024-2025 Contributors to the timekit project
#
# SPDX-License-Identifier: MPL-2.0
from typing import Any, Optional

import numpy as np

from timekit.data_classes.summary_record import SummaryRecord
from timekit.enums import IndexUnit
from timekit.exceptions import EmptyIndexError
from timekit.feature_engineering.frequency import classify_scale
from timekit.feature_engineering.signature import epoch_seconds
from timekit.index import get_index
from timekit.logging.logger_factory import get_logger

logger = get_logger(__name__)

# Quantile levels of the difference statistics
DIFF_QUANTILES = [0.0, 0.25, 0.5, 0.75, 1.0]


def get_timeseries_summary(
    data: Any, column: Optional[str] = None, thresholds: Optional[dict] = None
) -> SummaryRecord:
    """Summarize a time index.

    The differences are taken between successive elements in sequence order.
    Quartiles interpolate linearly between order statistics. The scale is
    derived from the median difference, see
    :func:`timekit.feature_engineering.frequency.classify_scale`.

    Args:
        data: Anything :func:`timekit.index.get_index` accepts.
        column: Timestamp column when ``data`` is a DataFrame.
        thresholds: Scale thresholds, defaults to ``Settings.scale_thresholds``.

    Returns:
        Summary of the index. For a single timestamp all difference statistics
        are None and the scale is the native unit of the index.

    Raises:
        EmptyIndexError: If the index has no timestamps.

    """
    index = get_index(data, column)
    if len(index) == 0:
        raise EmptyIndexError("Cannot summarize an empty time index")

    diffs = np.diff(epoch_seconds(index.values)).astype("float64")

    if len(diffs) == 0:
        statistics = dict.fromkeys(
            ["minimum", "q1", "median", "q3", "maximum", "mean"], None
        )
        scale = classify_scale(86400 if index.is_date else 1, thresholds)
    else:
        minimum, q1, median, q3, maximum = np.quantile(diffs, DIFF_QUANTILES)
        statistics = {
            "minimum": float(minimum),
            "q1": float(q1),
            "median": float(median),
            "q3": float(q3),
            "maximum": float(maximum),
            "mean": float(np.mean(diffs)),
        }
        scale = classify_scale(median, thresholds)

    summary = SummaryRecord(
        n_obs=len(index),
        start=index[0],
        end=index[-1],
        units=IndexUnit.DAYS if index.is_date else IndexUnit.SECS,
        scale=scale,
        tzone=index.tz,
        diff_minimum=statistics["minimum"],
        diff_q1=statistics["q1"],
        diff_median=statistics["median"],
        diff_mean=statistics["mean"],
        diff_q3=statistics["q3"],
        diff_maximum=statistics["maximum"],
    )

    logger.debug("Summarized time index", n_obs=summary.n_obs, scale=scale)

    return summary
