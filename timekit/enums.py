# SPDX-FileCopyrightText: 2024-2025 Contributors to the timekit project
#
# SPDX-License-Identifier: MPL-2.0
from enum import StrEnum


class IndexUnit(StrEnum):
    DAYS = "days"
    SECS = "secs"


class PeriodUnit(StrEnum):
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    QUARTER = "quarter"
    YEAR = "year"


# Coarse to fine
PERIOD_UNIT_ORDER = [
    PeriodUnit.YEAR,
    PeriodUnit.QUARTER,
    PeriodUnit.MONTH,
    PeriodUnit.WEEK,
    PeriodUnit.DAY,
    PeriodUnit.HOUR,
    PeriodUnit.MINUTE,
    PeriodUnit.SECOND,
]
