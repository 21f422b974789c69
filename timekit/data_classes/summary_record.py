# SPDX-FileCopyrightText: 2024-2025 Contributors to the timekit project
#
# SPDX-License-Identifier: MPL-2.0
"""Specifies the time series summary dataclass."""
from datetime import date
from typing import Optional, Union

import pandas as pd
from pydantic import BaseModel, ConfigDict, Field

from timekit.enums import IndexUnit


class SummaryRecord(BaseModel):
    """Holds the summary of a single time index."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    n_obs: int = Field(..., description="Number of observations in the index.")
    start: Union[pd.Timestamp, date] = Field(..., description="First timestamp.")
    end: Union[pd.Timestamp, date] = Field(..., description="Last timestamp.")
    units: IndexUnit = Field(
        ..., description="Native granularity of the index, 'days' or 'secs'."
    )
    scale: str = Field(
        ..., description="Dominant frequency bucket derived from the median difference."
    )
    tzone: str = Field(..., description="Timezone of the index.")
    diff_minimum: Optional[float] = None
    diff_q1: Optional[float] = None
    diff_median: Optional[float] = None
    diff_mean: Optional[float] = None
    diff_q3: Optional[float] = None
    diff_maximum: Optional[float] = None

    def to_frame(self) -> pd.DataFrame:
        """One row DataFrame with a column per field."""
        record = self.model_dump()
        record["units"] = self.units.value
        return pd.DataFrame([record], columns=list(record))
