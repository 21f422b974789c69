# SPDX-FileCopyrightText: 2024-2025 Contributors to the timekit project
#
# SPDX-License-Identifier: MPL-2.0

from datetime import date

import pandas as pd

from timekit.enums import IndexUnit
from timekit.exceptions import EmptyIndexError, InvalidIndexTypeError
from timekit.feature_engineering.summary import get_timeseries_summary
from test.unit.utils.base import BaseTestCase


class TestTimeseriesSummary(BaseTestCase):
    def test_summary_of_irregular_hourly_index(self):
        index = pd.DatetimeIndex(
            [
                "2023-01-01 00:00",
                "2023-01-01 01:00",
                "2023-01-01 02:00",
                "2023-01-01 04:00",
            ]
        )

        summary = get_timeseries_summary(index)

        self.assertEqual(summary.n_obs, 4)
        self.assertEqual(summary.start, pd.Timestamp("2023-01-01 00:00"))
        self.assertEqual(summary.end, pd.Timestamp("2023-01-01 04:00"))
        self.assertEqual(summary.units, IndexUnit.SECS)
        self.assertEqual(summary.tzone, "UTC")
        self.assertEqual(summary.scale, "hour")
        self.assertEqual(summary.diff_minimum, 3600.0)
        self.assertEqual(summary.diff_q1, 3600.0)
        self.assertEqual(summary.diff_median, 3600.0)
        self.assertEqual(summary.diff_q3, 5400.0)
        self.assertEqual(summary.diff_maximum, 7200.0)
        self.assertEqual(summary.diff_mean, 4800.0)

    def test_summary_of_monthly_dates(self):
        days = [date(2023, 1, 1), date(2023, 2, 1), date(2023, 3, 1), date(2023, 4, 1)]

        summary = get_timeseries_summary(days)

        self.assertEqual(summary.units, IndexUnit.DAYS)
        self.assertEqual(summary.start, date(2023, 1, 1))
        self.assertEqual(summary.end, date(2023, 4, 1))
        self.assertEqual(summary.diff_median, 31 * 86400.0)
        self.assertEqual(summary.scale, "month")

    def test_daily_median_on_threshold_is_day(self):
        index = pd.date_range("2023-01-01", periods=10, freq="D")

        self.assertEqual(get_timeseries_summary(index).scale, "day")

    def test_timezone_is_reported(self):
        index = pd.date_range(
            "2023-01-01", periods=3, freq="15min", tz="Europe/Amsterdam"
        )

        summary = get_timeseries_summary(index)

        self.assertEqual(summary.tzone, "Europe/Amsterdam")
        self.assertEqual(summary.scale, "minute")

    def test_single_timestamp(self):
        summary = get_timeseries_summary([date(2023, 1, 1)])

        self.assertEqual(summary.n_obs, 1)
        self.assertEqual(summary.start, summary.end)
        self.assertEqual(summary.scale, "day")
        for statistic in [
            summary.diff_minimum,
            summary.diff_q1,
            summary.diff_median,
            summary.diff_mean,
            summary.diff_q3,
            summary.diff_maximum,
        ]:
            self.assertIsNone(statistic)

        summary = get_timeseries_summary(pd.DatetimeIndex(["2023-01-01 10:00"]))
        self.assertEqual(summary.scale, "second")

    def test_start_and_end_follow_sequence_order(self):
        days = [date(2023, 1, 3), date(2023, 1, 1)]

        summary = get_timeseries_summary(days)

        self.assertEqual(summary.start, date(2023, 1, 3))
        self.assertEqual(summary.end, date(2023, 1, 1))
        self.assertEqual(summary.diff_minimum, -172800.0)

    def test_custom_thresholds(self):
        index = pd.date_range("2023-01-01", periods=3, freq="h")

        summary = get_timeseries_summary(
            index, thresholds={"fast": 1, "slow": 3600}
        )

        self.assertEqual(summary.scale, "slow")

    def test_to_frame(self):
        summary = get_timeseries_summary(pd.date_range("2023-01-01", periods=3))

        frame = summary.to_frame()

        self.assertEqual(len(frame), 1)
        self.assertEqual(frame.loc[0, "n_obs"], 3)
        self.assertEqual(frame.loc[0, "units"], "secs")
        self.assertEqual(frame.loc[0, "scale"], "day")

    def test_empty_index(self):
        with self.assertRaises(EmptyIndexError):
            get_timeseries_summary([])

    def test_invalid_index(self):
        with self.assertRaises(InvalidIndexTypeError):
            get_timeseries_summary([1, 2, 3])
