# SPDX-FileCopyrightText: 2024-2025 Contributors to the timekit project
#
# SPDX-License-Identifier: MPL-2.0

import os
from unittest import TestCase, mock

from pydantic import ValidationError

from timekit.app_settings import DEFAULT_SCALE_THRESHOLDS, AppSettings
from timekit.logging.logger_types import LoggerType


class TestAppSettings(TestCase):
    def test_defaults(self):
        """Test the defaults without environment overrides."""
        # Act
        with mock.patch.dict(os.environ, {}, clear=True):
            settings = AppSettings(_env_file=None)

        # Assert
        self.assertEqual(settings.logger_type, LoggerType.STRUCTLOG)
        self.assertEqual(settings.scale_thresholds, DEFAULT_SCALE_THRESHOLDS)
        self.assertEqual(settings.future_max_candidate_multiple, 10)
        self.assertEqual(settings.default_calendar, "NYSE")

    def test_parsing_scale_thresholds_env(self):
        """Test scale thresholds given as JSON in the environment."""
        # Arrange
        env = {"TIMEKIT_SCALE_THRESHOLDS": '{"fast": 1, "slow": 3600}'}

        # Act
        with mock.patch.dict(os.environ, env):
            settings = AppSettings(_env_file=None)

        # Assert
        self.assertEqual(settings.scale_thresholds, {"fast": 1, "slow": 3600})

    def test_parsing_candidate_multiple_env(self):
        env = {
            "TIMEKIT_FUTURE_MAX_CANDIDATE_MULTIPLE": "25",
            "TIMEKIT_LOGGER_TYPE": "logging",
        }

        with mock.patch.dict(os.environ, env):
            settings = AppSettings(_env_file=None)

        self.assertEqual(settings.future_max_candidate_multiple, 25)
        self.assertEqual(settings.logger_type, LoggerType.STANDARD)

    def test_candidate_multiple_must_be_positive(self):
        with mock.patch.dict(os.environ, {"TIMEKIT_FUTURE_MAX_CANDIDATE_MULTIPLE": "0"}):
            with self.assertRaises(ValidationError):
                AppSettings(_env_file=None)
