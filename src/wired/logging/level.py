# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: wired framework
"""Log levels accepted by `LoggingSettings` and `WiredLogger`."""

from __future__ import annotations

import logging
from enum import Enum


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    @property
    def stdlib_level(self) -> int:
        return logging.getLevelNamesMapping()[self.value]

    @classmethod
    def parse(cls, value: str | LogLevel) -> LogLevel:
        """Accept a level in any case, e.g. ``"debug"``.

        Raises:
            ValueError: If ``value`` names no level
        """
        if isinstance(value, LogLevel):
            return value
        try:
            return cls(value.upper())
        except ValueError:
            raise ValueError(f"Invalid log level: {value}") from None
