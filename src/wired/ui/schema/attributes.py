# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: wired framework
"""
Markers for schema component methods that the browser may call.

Only methods decorated with `exposed` can be reached through
`InteractsWithSchemas.call_schema_component_method`. Adding `renderless`
tells the host that the call does not change what is on screen.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any, TypeVar

F = TypeVar("F", bound=Callable[..., Any])

EXPOSED_MARKER = "__wired_exposed__"
RENDERLESS_MARKER = "__wired_renderless__"


def exposed(func: F) -> F:
    """Allow ``func`` to be invoked from the client."""
    setattr(func, EXPOSED_MARKER, True)
    return func


def renderless(func: F) -> F:
    """Skip the next render after ``func`` runs."""
    setattr(func, RENDERLESS_MARKER, True)
    return func


def _unwrap(attribute: Any) -> Any:
    if isinstance(attribute, staticmethod | classmethod):
        return attribute.__func__
    return attribute


def find_method(target: object, name: str) -> Callable[..., Any] | None:
    """Look up a plain method on ``target`` without triggering descriptors.

    Properties and data attributes are not methods and yield ``None``.
    """
    attribute = _unwrap(inspect.getattr_static(target, name, None))
    if not inspect.isfunction(attribute):
        return None
    return attribute


def is_exposed(method: Callable[..., Any]) -> bool:
    return getattr(method, EXPOSED_MARKER, False) is True


def is_renderless(method: Callable[..., Any]) -> bool:
    return getattr(method, RENDERLESS_MARKER, False) is True
