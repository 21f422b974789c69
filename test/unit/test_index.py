# SPDX-FileCopyrightText: 2024-2025 Contributors to the timekit project
#
# SPDX-License-Identifier: MPL-2.0

from datetime import date, datetime

import numpy as np
import pandas as pd
import pytest

from timekit.data_classes.time_index import TimeIndex
from timekit.enums import IndexUnit
from timekit.exceptions import InvalidIndexTypeError
from timekit.index import get_index, get_timeseries_variables, has_timeseries_index


class TestGetIndex:
    def test_datetime_index_gives_secs(self):
        values = pd.date_range("2023-01-01", periods=4, freq="h", tz="UTC")

        index = get_index(values)

        assert index.unit == IndexUnit.SECS
        assert index.tz == "UTC"
        assert len(index) == 4
        assert index[0] == pd.Timestamp("2023-01-01", tz="UTC")

    def test_dates_give_days(self):
        index = get_index([date(2023, 1, 1), date(2023, 1, 3)])

        assert index.unit == IndexUnit.DAYS
        assert index.is_date
        assert index.to_list() == [date(2023, 1, 1), date(2023, 1, 3)]
        assert index.tz == "UTC"

    def test_python_datetimes_give_secs(self):
        index = get_index([datetime(2023, 1, 1, 12), datetime(2023, 1, 1, 13)])

        assert index.unit == IndexUnit.SECS
        assert index[1] == pd.Timestamp("2023-01-01 13:00")

    def test_frame_with_datetime_index(self):
        data = pd.DataFrame(
            {"load": [1.0, 2.0]},
            index=pd.date_range("2023-01-01", periods=2, freq="D"),
        )

        assert has_timeseries_index(data)
        assert len(get_index(data)) == 2

    def test_frame_with_date_column(self):
        data = pd.DataFrame(
            {
                "value": [1, 2, 3],
                "date": [date(2023, 1, 1), date(2023, 1, 2), date(2023, 1, 3)],
            }
        )

        assert not has_timeseries_index(data)
        assert get_timeseries_variables(data) == ["date"]
        assert get_index(data).unit == IndexUnit.DAYS

    def test_frame_with_integer_column_labels(self):
        data = pd.DataFrame(
            {0: [date(2023, 1, 1), date(2023, 1, 2)], 1: [1.0, 2.0]}
        )

        assert get_timeseries_variables(data) == [0]
        assert get_index(data).to_list() == [date(2023, 1, 1), date(2023, 1, 2)]
        assert get_index(data, column=0).unit == IndexUnit.DAYS

    def test_frame_with_explicit_column(self):
        data = pd.DataFrame(
            {
                "created": pd.date_range("2023-01-01", periods=2, freq="D"),
                "updated": pd.date_range("2023-02-01", periods=2, freq="D"),
            }
        )

        index = get_index(data, column="updated")

        assert index[0] == pd.Timestamp("2023-02-01")

    def test_frame_without_timestamps(self):
        data = pd.DataFrame({"value": [1, 2, 3]})

        with pytest.raises(InvalidIndexTypeError):
            get_index(data)

    def test_missing_column(self):
        data = pd.DataFrame({"value": [1, 2, 3]})

        with pytest.raises(InvalidIndexTypeError, match="not found"):
            get_index(data, column="date")

    def test_series_of_datetimes(self):
        series = pd.Series(pd.date_range("2023-01-01", periods=3, freq="D"))

        assert get_index(series).unit == IndexUnit.SECS

    def test_numpy_datetimes(self):
        values = np.array(["2023-01-01", "2023-01-02"], dtype="datetime64[ns]")

        assert get_index(values).unit == IndexUnit.SECS

    def test_time_index_is_returned_as_is(self):
        index = TimeIndex.from_dates([date(2023, 1, 1)])

        assert get_index(index) is index

    @pytest.mark.parametrize(
        "data",
        [
            ["2023-01-01", "2023-01-02"],
            [1, 2, 3],
            [date(2023, 1, 1), None],
            pd.Series([1.0, 2.0]),
            "2023-01-01",
            date(2023, 1, 1),
            pd.DatetimeIndex(["2023-01-01", None]),
        ],
    )
    def test_invalid_elements_fail(self, data):
        with pytest.raises(InvalidIndexTypeError):
            get_index(data)

    def test_mixed_granularity_fails(self):
        with pytest.raises(InvalidIndexTypeError, match="granularity"):
            get_index([date(2023, 1, 1), datetime(2023, 1, 2, 10)])

    def test_mixed_timezones_fail(self):
        with pytest.raises(InvalidIndexTypeError, match="timezones"):
            get_index(
                [
                    pd.Timestamp("2023-01-01", tz="UTC"),
                    pd.Timestamp("2023-01-02", tz="Europe/Amsterdam"),
                ]
            )

    def test_empty_sequence(self):
        assert len(get_index([])) == 0


class TestTimeIndex:
    def test_day_index_rejects_time_of_day(self):
        with pytest.raises(InvalidIndexTypeError):
            TimeIndex(pd.DatetimeIndex(["2023-01-01 10:00"]), IndexUnit.DAYS)

    def test_day_index_rejects_timezone(self):
        with pytest.raises(InvalidIndexTypeError):
            TimeIndex(pd.DatetimeIndex(["2023-01-01"], tz="UTC"), IndexUnit.DAYS)

    def test_equality_and_slicing(self):
        index = TimeIndex.from_dates(
            [date(2023, 1, 1), date(2023, 1, 2), date(2023, 1, 3)]
        )

        assert index[1:] == TimeIndex.from_dates([date(2023, 1, 2), date(2023, 1, 3)])
        assert index != TimeIndex(index.values, IndexUnit.SECS)

    def test_to_pandas_returns_a_copy(self):
        index = TimeIndex.from_dates([date(2023, 1, 2), date(2023, 1, 1)])

        values = index.to_pandas()

        assert isinstance(values, pd.DatetimeIndex)
        assert values is not index.values
        assert not index.is_monotonic_increasing

    def test_value_type_cannot_be_changed_or_hashed(self):
        index = TimeIndex.from_dates([date(2023, 1, 1)])

        with pytest.raises(AttributeError):
            index.unit = IndexUnit.SECS
        with pytest.raises(AttributeError):
            index.name = "dates"
        with pytest.raises(TypeError):
            hash(index)
