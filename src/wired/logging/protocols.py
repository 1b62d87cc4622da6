# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: wired framework

"""
Logging interface definitions for the wired framework.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from contextlib import AbstractContextManager


class LoggerProtocol(Protocol):
    """
    Protocol defining the interface for loggers in the wired framework.

    This protocol is NOT runtime_checkable and should be used
    for static type checking only.
    """

    def debug(self, message: str, **kwargs: Any) -> None:
        """Log a debug message."""
        ...

    def info(self, message: str, **kwargs: Any) -> None:
        """Log an info message."""
        ...

    def warning(self, message: str, **kwargs: Any) -> None:
        """Log a warning message."""
        ...

    def error(self, message: str, **kwargs: Any) -> None:
        """Log an error message."""
        ...

    def bind(self, **kwargs: Any) -> LoggerProtocol:
        """Return a logger with additional bound context."""
        ...

    def context(self, **kwargs: Any) -> AbstractContextManager[None]:
        """Scope extra context to the enclosed block."""
        ...
