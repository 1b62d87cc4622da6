# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
#
# SPDX-License-Identifier: MIT

"""
Validation-specific error classes for the wired framework.
"""

from __future__ import annotations

from typing import Any, Final

from wired.errors.base import ErrorCategory, ErrorCode, ErrorSeverity, WiredError

VALIDATION = ErrorCategory.get_or_create("VALIDATION")
VALIDATION_FAILED: Final = ErrorCode.get_or_create("VALIDATION_FAILED", VALIDATION)
VALIDATION_RULE_UNKNOWN: Final = ErrorCode.get_or_create(
    "VALIDATION_RULE_UNKNOWN", VALIDATION
)


class UnknownRuleError(WiredError):
    """Raised when a rule string names no rule the validator knows."""

    def __init__(self, rule: str, **kwargs: Any) -> None:
        self.rule = rule
        super().__init__(
            f"Unknown validation rule [{rule}].",
            code=VALIDATION_RULE_UNKNOWN,
            rule=rule,
            **kwargs,
        )


class ValidationError(WiredError):
    """Raised when component state fails its validation rules.

    ``errors`` maps each failing state path to its messages, in rule order.
    """

    def __init__(
        self,
        errors: dict[str, list[str]],
        message: str | None = None,
        code: ErrorCode = VALIDATION_FAILED,
        severity: ErrorSeverity = ErrorSeverity.WARNING,
        context: dict[str, Any] | None = None,
    ) -> None:
        self.errors = {key: list(messages) for key, messages in errors.items()}
        super().__init__(
            message or self._summarize(self.errors),
            code=code,
            severity=severity,
            context=context,
        )

    @staticmethod
    def _summarize(errors: dict[str, list[str]]) -> str:
        messages = [message for bag in errors.values() for message in bag]
        if not messages:
            return "The given data was invalid."
        if len(messages) == 1:
            return messages[0]
        return f"{messages[0]} (and {len(messages) - 1} more)"

    @classmethod
    def with_messages(cls, messages: dict[str, str | list[str]]) -> ValidationError:
        """Build an error from hand-written messages, one or many per key."""
        return cls(
            {
                key: [value] if isinstance(value, str) else list(value)
                for key, value in messages.items()
            }
        )

    def first(self, key: str) -> str | None:
        """Return the first message recorded for ``key``."""
        messages = self.errors.get(key)
        return messages[0] if messages else None

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["errors"] = self.errors
        return data
