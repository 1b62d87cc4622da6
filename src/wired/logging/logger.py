# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: wired framework
"""
Structured logging for wired.

`WiredLogger` wraps a stdlib logger. Keyword arguments passed to a log call
travel on the record as the ``wired_context`` attribute, merged with values
bound through `WiredLogger.bind` and values scoped with `WiredLogger.context`.
`StructuredFormatter` renders that context as ``key=value`` pairs or JSON.
"""

from __future__ import annotations

import contextlib
import datetime
import enum
import json
import logging
import sys
import uuid
from contextvars import ContextVar
from typing import TYPE_CHECKING, Any

from wired.logging.config import LoggingSettings
from wired.logging.level import LogLevel

if TYPE_CHECKING:
    from collections.abc import Iterator

CONTEXT_ATTRIBUTE = "wired_context"

_scoped_context: ContextVar[dict[str, Any]] = ContextVar(
    "wired_log_context", default={}
)


class WiredJsonEncoder(json.JSONEncoder):
    """Encode the values components put into log context."""

    def default(self, obj: Any) -> Any:
        match obj:
            case datetime.datetime() | datetime.date():
                return obj.isoformat()
            case uuid.UUID():
                return str(obj)
            case enum.Enum():
                return obj.value
            case BaseException():
                to_dict = getattr(obj, "to_dict", None)
                if callable(to_dict):
                    return to_dict()
                return {"type": type(obj).__name__, "message": str(obj)}
        return repr(obj)


class StructuredFormatter(logging.Formatter):
    """Render a record followed by its wired context."""

    def __init__(
        self,
        json_format: bool = False,
        include_timestamp: bool = True,
        include_level: bool = True,
    ) -> None:
        self.json_format = json_format
        self.include_timestamp = include_timestamp
        self.include_level = include_level

        parts = ["%(message)s"]
        if include_timestamp:
            parts.insert(0, "%(asctime)s")
        if include_level and not json_format:
            parts.append("[%(levelname)s]")

        super().__init__(fmt=" ".join(parts), datefmt="%Y-%m-%d %H:%M:%S")

    @classmethod
    def from_settings(cls, settings: LoggingSettings) -> StructuredFormatter:
        return cls(
            json_format=settings.json_format,
            include_timestamp=settings.include_timestamp,
            include_level=settings.include_level,
        )

    def format(self, record: logging.LogRecord) -> str:
        context = dict(getattr(record, CONTEXT_ATTRIBUTE, None) or {})

        if self.json_format:
            return self._as_json(record, context)

        line = super().format(record)
        if not context:
            return line
        pairs = " ".join(f"{key}={self._render(value)}" for key, value in context.items())
        return f"{line} {pairs}"

    def _as_json(self, record: logging.LogRecord, context: dict[str, Any]) -> str:
        payload: dict[str, Any] = {"message": record.getMessage(), "name": record.name}
        payload.update(context)

        if self.include_level:
            payload["level"] = record.levelname
        if self.include_timestamp:
            payload["timestamp"] = self.formatTime(record, self.datefmt)
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, cls=WiredJsonEncoder, ensure_ascii=False)

    @staticmethod
    def _render(value: Any) -> str:
        match value:
            case str() if " " in value:
                return f'"{value}"'
            case str():
                return value
            case enum.Enum():
                return value.name
            case dict() | list() | tuple():
                return json.dumps(value, cls=WiredJsonEncoder, ensure_ascii=False)
            case datetime.datetime() | datetime.date():
                return value.isoformat()
        return str(value)


def _install_handlers(target: logging.Logger, settings: LoggingSettings) -> None:
    """Replace the handlers of ``target`` with the ones ``settings`` enables."""
    for handler in list(target.handlers):
        target.removeHandler(handler)

    handlers: list[logging.Handler] = []
    if settings.console_enabled:
        handlers.append(logging.StreamHandler(sys.stdout))
    if settings.file_enabled and settings.file_path:
        handlers.append(logging.FileHandler(settings.file_path))

    formatter = StructuredFormatter.from_settings(settings)
    for handler in handlers:
        handler.setFormatter(formatter)
        target.addHandler(handler)

    target.propagate = settings.propagate


class WiredLogger:
    """Logger whose keyword arguments become structured context.

    Example:
        logger = get_logger(__name__)
        logger.debug("Resolved schema", schema="contact")
    """

    def __init__(
        self,
        name: str,
        level: str | None = None,
        settings: LoggingSettings | None = None,
    ) -> None:
        self.name = name
        self._settings = settings or LoggingSettings.load()
        self._logger = logging.getLogger(name)
        self._bound: dict[str, Any] = {}

        self._logger.setLevel(LogLevel.parse(level or self._settings.level).stdlib_level)
        _install_handlers(self._logger, self._settings)

    def _emit(self, level: int, message: str, context: dict[str, Any]) -> None:
        if not self._logger.isEnabledFor(level):
            return

        exc_info = context.pop("exc_info", None)
        merged = {**self._bound, **_scoped_context.get(), **context}
        self._logger.log(
            level, message, exc_info=exc_info, extra={CONTEXT_ATTRIBUTE: merged}
        )

    def debug(self, message: str, **kwargs: Any) -> None:
        self._emit(logging.DEBUG, message, kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._emit(logging.INFO, message, kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._emit(logging.WARNING, message, kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        """Log at ERROR; pass ``exc_info=True`` to attach the active exception."""
        self._emit(logging.ERROR, message, kwargs)

    def critical(self, message: str, **kwargs: Any) -> None:
        self._emit(logging.CRITICAL, message, kwargs)

    def set_level(self, level: LogLevel) -> None:
        self._logger.setLevel(level.stdlib_level)

    @contextlib.contextmanager
    def context(self, **kwargs: Any) -> Iterator[None]:
        """Attach ``kwargs`` to every record logged inside the block, by any logger."""
        token = _scoped_context.set({**_scoped_context.get(), **kwargs})
        try:
            yield
        finally:
            _scoped_context.reset(token)

    def bind(self, **kwargs: Any) -> WiredLogger:
        """Return a logger for the same name that always carries ``kwargs``."""
        bound = WiredLogger(
            self.name,
            level=logging.getLevelName(self._logger.level),
            settings=self._settings,
        )
        bound._bound = {**self._bound, **kwargs}
        return bound


def get_logger(name: str, level: LogLevel | None = None) -> WiredLogger:
    """Return a `WiredLogger` configured from `LoggingSettings`."""
    logger = WiredLogger(name)
    if level is not None:
        logger.set_level(level)
    return logger
