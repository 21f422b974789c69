# SPDX-FileCopyrightText: 2024-2025 Contributors to the timekit project
#
# SPDX-License-Identifier: MPL-2.0

from enum import StrEnum


class LoggerType(StrEnum):
    STANDARD = "logging"
    STRUCTLOG = "structlog"
