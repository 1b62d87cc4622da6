# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: wired framework
"""Component event dispatch."""

from wired.events.dispatcher import DispatchedEvent, EventDispatcher, EventHandler
from wired.events.errors import EVENT_HANDLER_ERROR, EVENTS, EventHandlerError

__all__ = [
    "DispatchedEvent",
    "EventDispatcher",
    "EventHandler",
    "EventHandlerError",
    "EVENTS",
    "EVENT_HANDLER_ERROR",
]
