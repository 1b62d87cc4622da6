# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: wired framework

"""
Error handling for the wired framework.
"""

from __future__ import annotations

from wired.errors.base import (
    INTERNAL,
    INTERNAL_ERROR,
    ErrorCategory,
    ErrorCode,
    ErrorSeverity,
    WiredError,
)
from wired.errors.registry import ErrorRegistry, registry

__all__ = [
    "ErrorCode",
    "ErrorCategory",
    "ErrorSeverity",
    "ErrorRegistry",
    "INTERNAL",
    "INTERNAL_ERROR",
    "WiredError",
    "registry",
]
