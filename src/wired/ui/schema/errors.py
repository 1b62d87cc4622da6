# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: wired framework
"""
Schema-specific error classes for the wired framework.
"""

from __future__ import annotations

from typing import Any, Final

from wired.errors.base import ErrorCategory, ErrorCode, ErrorSeverity, WiredError

SCHEMA = ErrorCategory.get_or_create("SCHEMA")
SCHEMA_NOT_FOUND: Final = ErrorCode.get_or_create("SCHEMA_NOT_FOUND", SCHEMA)
SCHEMA_RESOLUTION_ERROR: Final = ErrorCode.get_or_create(
    "SCHEMA_RESOLUTION_ERROR", SCHEMA
)


class SchemaError(WiredError):
    """Base class for all schema-related errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = SCHEMA_RESOLUTION_ERROR,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            message,
            code=code,
            severity=severity,
            context=context,
            **kwargs,
        )


class SchemaNotFoundError(SchemaError):
    """Raised when a component key points at a schema the host does not have."""

    def __init__(self, schema_name: str, **kwargs: Any) -> None:
        self.schema_name = schema_name
        super().__init__(
            f"Schema [{schema_name}] not found.",
            code=SCHEMA_NOT_FOUND,
            schema_name=schema_name,
            **kwargs,
        )


class SchemaResolutionError(SchemaError):
    """Raised when a schema method cannot produce a schema it promised."""

    def __init__(self, message: str, schema_name: str, **kwargs: Any) -> None:
        self.schema_name = schema_name
        super().__init__(
            message,
            code=SCHEMA_RESOLUTION_ERROR,
            schema_name=schema_name,
            **kwargs,
        )
