# SPDX-FileCopyrightText: 2024-2025 Contributors to the timekit project
#
# SPDX-License-Identifier: MPL-2.0

from timekit.logging.base_logger import BaseLogger
from timekit.logging.logger_types import LoggerType
from timekit.logging.standard_logger import StandardLogger
from timekit.logging.structlog_logger import StructlogLogger
from timekit.settings import Settings


def get_logger(name: str, logger_type: str = None) -> BaseLogger:
    if logger_type is None:
        logger_type = Settings.logger_type

    if logger_type == LoggerType.STANDARD:
        return StandardLogger(name)
    elif logger_type == LoggerType.STRUCTLOG:
        return StructlogLogger(name)
    else:
        raise ValueError(f"Unknown logger type: {logger_type}")
