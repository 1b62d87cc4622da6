# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: wired framework
"""
events.dispatcher
Synchronous in-process dispatch of browser-bound component events
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from wired.events.errors import EventHandlerError
from wired.logging import LoggerProtocol, get_logger

EventHandler = Callable[["DispatchedEvent"], None]


class DispatchedEvent(BaseModel):
    """An event emitted by a component during one interaction."""

    model_config = ConfigDict(frozen=True)

    name: str
    component_id: str
    params: dict[str, Any] = Field(default_factory=dict)
    occurred_at: datetime = Field(default_factory=lambda: datetime.now(UTC))


class EventDispatcher:
    """Deliver dispatched events to subscribers in subscription order.

    Handlers run synchronously inside the interaction that dispatched the event.
    """

    def __init__(self, logger: LoggerProtocol | None = None) -> None:
        self._handlers: dict[str, list[EventHandler]] = {}
        self._logger = logger or get_logger(__name__)

    def subscribe(self, name: str, handler: EventHandler) -> None:
        """Register ``handler`` for events called ``name``.

        Args:
            name: Event name, e.g. ``form-validation-error``
            handler: Callable receiving the `DispatchedEvent`
        """
        self._handlers.setdefault(name, []).append(handler)

    def unsubscribe(self, name: str, handler: EventHandler) -> None:
        handlers = self._handlers.get(name, [])
        if handler in handlers:
            handlers.remove(handler)

    def handlers_for(self, name: str) -> list[EventHandler]:
        return list(self._handlers.get(name, []))

    def dispatch(self, event: DispatchedEvent) -> None:
        """Invoke every handler subscribed to ``event.name``.

        Raises:
            EventHandlerError: If a handler raises; later handlers do not run.
        """
        for handler in self.handlers_for(event.name):
            try:
                handler(event)
            except Exception as e:
                self._logger.error(
                    "Error in event handler",
                    handler=repr(handler),
                    event_name=event.name,
                    component_id=event.component_id,
                    error=str(e),
                )
                raise EventHandlerError(
                    f"Handler failed for event {event.name}: {e}",
                    handler=repr(handler),
                    event_name=event.name,
                ) from e
