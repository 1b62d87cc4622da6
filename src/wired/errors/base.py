# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: wired framework
"""
Structured errors for wired.

Each subsystem registers an `ErrorCategory` and its `ErrorCode`s at import
time and raises subclasses of `WiredError` carrying one of those codes:

    SCHEMA = ErrorCategory.get_or_create("SCHEMA")
    SCHEMA_NOT_FOUND = ErrorCode.get_or_create("SCHEMA_NOT_FOUND", SCHEMA)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import Any, Final

from wired.errors.registry import registry


class ErrorSeverity(str, Enum):
    CRITICAL = "critical"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True)
class ErrorCategory:
    """Named group of error codes; categories compare by name."""

    name: str
    parent: ErrorCategory | None = field(default=None, compare=False, repr=False)

    def __str__(self) -> str:
        return self.name

    def is_subcategory_of(self, category: ErrorCategory) -> bool:
        current: ErrorCategory | None = self
        while current is not None:
            if current == category:
                return True
            current = current.parent
        return False

    @classmethod
    def get_or_create(
        cls, name: str, parent: ErrorCategory | None = None
    ) -> ErrorCategory:
        return registry.get_category(name, parent)


INTERNAL: Final = ErrorCategory.get_or_create("INTERNAL")


def _internal() -> ErrorCategory:
    return registry.get_category("INTERNAL")


@dataclass(frozen=True)
class ErrorCode:
    """Machine-readable error identifier; codes compare by code string."""

    code: str
    category: ErrorCategory = field(default_factory=_internal, compare=False)

    def __str__(self) -> str:
        return self.code

    @classmethod
    def get_by_code(
        cls, code: str, *, raise_if_missing: bool = True
    ) -> ErrorCode | None:
        """Find a registered code.

        Raises:
            ValueError: If the code is unknown and ``raise_if_missing`` is set
        """
        error_code = registry.lookup_code(code)
        if error_code is None and raise_if_missing:
            raise ValueError(f"Error code '{code}' not found in registry")
        return error_code

    @classmethod
    def get_or_create(cls, name: str, category: ErrorCategory) -> ErrorCode:
        return registry.get_code(name, category.name)


INTERNAL_ERROR: Final = ErrorCode.get_or_create("INTERNAL_ERROR", INTERNAL)


class WiredError(Exception):
    """
    Base class of every error wired raises.

    Subclass it per failure and give the subclass a default code; it cannot be
    raised directly. Keyword arguments beyond the named ones are merged into
    ``context``.
    """

    message: str
    code: ErrorCode
    category: ErrorCategory
    severity: ErrorSeverity
    context: dict[str, Any]
    timestamp: datetime

    def __new__(cls, *args: Any, **kwargs: Any) -> WiredError:
        if cls is WiredError:
            raise TypeError(
                "Do not instantiate WiredError directly; subclass it for specific errors."
            )
        return super().__new__(cls)

    def __init__(
        self,
        message: str,
        code: ErrorCode,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        if not isinstance(code, ErrorCode):
            raise TypeError("code must be an ErrorCode instance, not a string")

        super().__init__(message)
        self.message = message
        self.code = code
        self.category = code.category
        self.severity = severity
        self.context = {**(context or {}), **kwargs}
        self.timestamp = datetime.now(UTC)

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"

    def add_context(self, key: str, value: Any) -> WiredError:
        self.context[key] = value
        return self

    def to_dict(self) -> dict[str, Any]:
        """Serialise for logs and API responses."""
        return {
            "code": self.code.code,
            "message": self.message,
            "category": self.category.name,
            "severity": self.severity.name,
            "context": self.context,
            "timestamp": self.timestamp.isoformat(),
        }
