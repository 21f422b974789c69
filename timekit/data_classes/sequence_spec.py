# SPDX-FileCopyrightText: 2024-2025 Contributors to the timekit project
#
# SPDX-License-Identifier: MPL-2.0
"""Specifies the sequence specification dataclass."""
import numbers
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from timekit.period import Period


class SequenceSpec(BaseModel):
    """Sparse description of a time sequence.

    Any two of start, end, length_out and by (which may be inferred from the
    precision of start and end) determine the sequence.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    start: Any = Field(
        None,
        description="First timestamp, as a date, datetime or string such as '2012', '2012-07' or '2012-07-01 10:00'.",
    )
    end: Any = Field(None, description="Last timestamp, same formats as start.")
    by: Optional[Union[Period, str]] = Field(
        None,
        description="Step between timestamps, e.g. '1 month'. Inferred from the precision of start and end when omitted.",
    )
    length_out: Optional[Union[Period, int, str]] = Field(
        None,
        description="Either the number of timestamps or a period such as '1 year 6 months' spanned by the sequence.",
    )
    include_endpoint: bool = Field(
        True,
        description="Whether the terminal boundary (derived end, or derived start when walking back from end) is included.",
    )
    skip_values: Optional[list[Any]] = Field(
        None, description="Timestamps removed from the generated sequence."
    )
    insert_values: Optional[list[Any]] = Field(
        None, description="Timestamps added to the generated sequence."
    )
    tz: Optional[str] = Field(None, description="Timezone of datetime sequences.")

    @field_validator("by", mode="before")
    @classmethod
    def parse_by(cls, value):
        if value is None:
            return value
        return Period.parse(value)

    @field_validator("length_out", mode="before")
    @classmethod
    def parse_length_out(cls, value):
        if value is None or isinstance(value, Period):
            return value
        if isinstance(value, bool):
            raise ValueError("length_out must be a count or a period, not a boolean")
        if isinstance(value, numbers.Integral):
            return int(value)
        return Period.parse(value)
