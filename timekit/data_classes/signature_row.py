# SPDX-FileCopyrightText: 2024-2025 Contributors to the timekit project
#
# SPDX-License-Identifier: MPL-2.0
"""Specifies the signature row dataclass."""
from datetime import date
from typing import Optional, Union

import pandas as pd
from pydantic import BaseModel, ConfigDict, Field

MONTH_LABELS = [
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
]
WEEKDAY_LABELS = [
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
]


class SignatureRow(BaseModel):
    """Calendar decomposition of a single timestamp."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    index: Union[pd.Timestamp, date]
    index_num: int = Field(..., description="Whole seconds since the Unix epoch.")
    diff: Optional[int] = Field(
        None, description="Seconds since the previous element, None for the first."
    )
    year: int
    year_iso: int
    half: int
    quarter: int
    month: int = Field(..., description="Month of the year, January is 1.")
    month_xts: int = Field(..., description="Month of the year, January is 0.")
    month_lbl: str
    day: int
    hour: int
    minute: int
    second: int
    hour12: int
    am_pm: int = Field(..., description="1 before noon, 2 from noon onwards.")
    wday: int = Field(..., description="Day of the week, Sunday is 1.")
    wday_xts: int = Field(..., description="Day of the week, Sunday is 0.")
    wday_lbl: str
    mday: int
    qday: int
    yday: int
    mweek: int
    week: int
    week_iso: int
    week2: int
    week3: int
    week4: int
    mday7: int
