# SPDX-FileCopyrightText: 2024-2025 Contributors to the timekit project
#
# SPDX-License-Identifier: MPL-2.0
"""Calendar feature extraction for time indices."""

from .frequency import classify_scale, infer_period
from .signature import (
    SIGNATURE_COLUMNS,
    augment_timeseries_signature,
    get_signature_rows,
    get_timeseries_signature,
)
from .summary import get_timeseries_summary

__all__ = [
    "SIGNATURE_COLUMNS",
    "augment_timeseries_signature",
    "classify_scale",
    "get_signature_rows",
    "get_timeseries_signature",
    "get_timeseries_summary",
    "infer_period",
]
