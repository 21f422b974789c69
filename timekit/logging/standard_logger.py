# SPDX-FileCopyrightText: 2024-2025 Contributors to the timekit project
#
# SPDX-License-Identifier: MPL-2.0

import logging

from timekit.logging.base_logger import BaseLogger
from timekit.settings import Settings


class StandardLogger(BaseLogger):
    def __init__(self, name: str, context: dict = None):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(Settings.log_level)
        self.context = context or {}

    def _extra(self, kwargs: dict) -> dict:
        return {**self.context, **kwargs}

    def debug(self, message: str, **kwargs):
        self.logger.debug(message, extra=self._extra(kwargs))

    def info(self, message: str, **kwargs):
        self.logger.info(message, extra=self._extra(kwargs))

    def warning(self, message: str, **kwargs):
        self.logger.warning(message, extra=self._extra(kwargs))

    def error(self, message: str, **kwargs):
        self.logger.error(message, extra=self._extra(kwargs))

    def bind(self, **kwargs):
        return StandardLogger(self.logger.name, context=self._extra(kwargs))
