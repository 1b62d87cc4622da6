# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: wired framework

"""
Public API for the wired logging system.

This module exports structured logging and context management helpers.
"""

from __future__ import annotations

from wired.logging.config import LoggingSettings
from wired.logging.level import LogLevel
from wired.logging.logger import StructuredFormatter, WiredLogger, get_logger
from wired.logging.protocols import LoggerProtocol

__all__ = [
    "LoggerProtocol",
    "LogLevel",
    "LoggingSettings",
    "StructuredFormatter",
    "WiredLogger",
    "get_logger",
]
