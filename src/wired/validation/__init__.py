# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
#
# SPDX-License-Identifier: MIT

"""
Validation module for the wired framework.
"""

from __future__ import annotations

from wired.validation.errors import (
    VALIDATION,
    VALIDATION_FAILED,
    VALIDATION_RULE_UNKNOWN,
    UnknownRuleError,
    ValidationError,
)
from wired.validation.validator import Validator, normalize_rules

__all__ = [
    "VALIDATION",
    "VALIDATION_FAILED",
    "VALIDATION_RULE_UNKNOWN",
    "UnknownRuleError",
    "ValidationError",
    "Validator",
    "normalize_rules",
]
