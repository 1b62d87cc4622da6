# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: wired framework
"""
Event dispatch error classes for the wired framework.
"""

from __future__ import annotations

from typing import Any, Final

from wired.errors.base import ErrorCategory, ErrorCode, ErrorSeverity, WiredError

EVENTS = ErrorCategory.get_or_create("EVENTS")
EVENT_HANDLER_ERROR: Final = ErrorCode.get_or_create("EVENT_HANDLER_ERROR", EVENTS)


class EventHandlerError(WiredError):
    """Raised when a subscriber fails while handling a dispatched event."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = EVENT_HANDLER_ERROR,
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
