# SPDX-FileCopyrightText: 2024-2025 Contributors to the timekit project
#
# SPDX-License-Identifier: MPL-2.0

import logging

import structlog

from timekit.logging.base_logger import BaseLogger
from timekit.settings import Settings


class StructlogLogger(BaseLogger):
    def __init__(self, name: str, logger=None):
        if logger is None:
            structlog.configure(
                wrapper_class=structlog.make_filtering_bound_logger(
                    logging.getLevelName(Settings.log_level)
                )
            )
            logger = structlog.get_logger(name)
        self.name = name
        self.logger = logger

    def debug(self, message: str, **kwargs):
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        self.logger.error(message, **kwargs)

    def bind(self, **kwargs):
        return StructlogLogger(self.name, logger=self.logger.bind(**kwargs))
