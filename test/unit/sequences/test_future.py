# SPDX-FileCopyrightText: 2024-2025 Contributors to the timekit project
#
# SPDX-License-Identifier: MPL-2.0

from datetime import date, timedelta

import numpy as np
import pandas as pd
import pytest

from timekit.enums import IndexUnit
from timekit.exceptions import (
    ContradictorySpecError,
    EmptyIndexError,
    UnderDeterminedSpecError,
    UnreachableTargetError,
)
from timekit.sequences.future import make_future_timeseries


def days_from(first: date, n: int) -> list[date]:
    return [first + timedelta(days=i) for i in range(n)]


class TestMakeFutureTimeseries:
    @pytest.fixture
    def business_week(self) -> list[date]:
        # Monday 2 January up to and including Friday 6 January 2023
        return days_from(date(2023, 1, 2), 5)

    def test_daily_continuation(self, business_week):
        future = make_future_timeseries(business_week, length_out=3)

        assert future.unit == IndexUnit.DAYS
        assert future.to_list() == days_from(date(2023, 1, 7), 3)

    def test_weekends_are_skipped_and_count_is_kept(self, business_week):
        future = make_future_timeseries(
            business_week, length_out=5, inspect_weekdays=True
        )

        assert future.to_list() == days_from(date(2023, 1, 9), 5)

    def test_skip_values(self, business_week):
        future = make_future_timeseries(
            business_week, length_out=3, skip_values=["2023-01-08", date(2023, 1, 9)]
        )

        assert future.to_list() == [date(2023, 1, 7), date(2023, 1, 10), date(2023, 1, 11)]

    def test_unreachable_count(self, business_week):
        with pytest.raises(UnreachableTargetError) as error:
            make_future_timeseries(
                business_week,
                length_out=2,
                inspect_weekdays=True,
                max_candidate_multiple=1,
            )

        assert error.value.requested == 2
        assert error.value.retained == 0
        assert error.value.candidates == 2

    def test_bounded_search_fails_on_exhausting_skip_values(self, business_week):
        skip_values = days_from(date(2023, 1, 7), 100)

        with pytest.raises(UnreachableTargetError):
            make_future_timeseries(business_week, length_out=3, skip_values=skip_values)

    def test_numpy_integer_length(self, business_week):
        future = make_future_timeseries(business_week, length_out=np.int64(2))

        assert future.to_list() == [date(2023, 1, 7), date(2023, 1, 8)]

    def test_period_length(self):
        index = pd.date_range("2023-01-01", periods=4, freq="MS")

        future = make_future_timeseries(index, length_out="3 months")

        assert list(future) == list(pd.date_range("2023-05-01", periods=3, freq="MS"))

    def test_end(self, business_week):
        future = make_future_timeseries(business_week, end="2023-01-10")

        assert future.to_list() == days_from(date(2023, 1, 7), 4)

    def test_end_with_weekend_filter(self, business_week):
        future = make_future_timeseries(
            business_week, end=date(2023, 1, 15), inspect_weekdays=True
        )

        assert future.to_list() == days_from(date(2023, 1, 9), 5)

    def test_timezone_is_kept(self):
        index = pd.date_range("2023-01-01", periods=3, freq="h", tz="Europe/Amsterdam")

        future = make_future_timeseries(index, length_out=2)

        assert future.tz == "Europe/Amsterdam"
        assert list(future) == list(
            pd.date_range("2023-01-01 03:00", periods=2, freq="h", tz="Europe/Amsterdam")
        )

    def test_continues_after_latest_timestamp(self):
        days = [date(2023, 1, 3), date(2023, 1, 1), date(2023, 1, 2)]

        future = make_future_timeseries(days, length_out=1)

        assert future.to_list() == [date(2023, 1, 4)]

    def test_insert_values(self, business_week):
        future = make_future_timeseries(
            business_week, length_out=2, insert_values=[date(2023, 1, 20)]
        )

        assert future.to_list() == [date(2023, 1, 7), date(2023, 1, 8), date(2023, 1, 20)]

    def test_insert_values_must_be_in_the_future(self, business_week):
        with pytest.raises(ContradictorySpecError):
            make_future_timeseries(
                business_week, length_out=2, insert_values=[date(2023, 1, 6)]
            )

    def test_length_and_end_are_exclusive(self, business_week):
        with pytest.raises(ContradictorySpecError):
            make_future_timeseries(business_week, length_out=2, end="2023-02-01")

    def test_length_or_end_is_required(self, business_week):
        with pytest.raises(UnderDeterminedSpecError):
            make_future_timeseries(business_week)

    def test_end_before_last_timestamp(self, business_week):
        with pytest.raises(ContradictorySpecError):
            make_future_timeseries(business_week, end="2023-01-01")

    def test_single_timestamp_has_no_step(self):
        with pytest.raises(UnderDeterminedSpecError):
            make_future_timeseries([date(2023, 1, 1)], length_out=2)

    def test_empty_index(self):
        with pytest.raises(EmptyIndexError):
            make_future_timeseries([], length_out=2)
