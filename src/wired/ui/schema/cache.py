# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: wired framework
"""
Per-component cache of resolved schemas.

Every name is in exactly one `SchemaState`. ``RESOLVED`` entries may hold
``None``, meaning the component has no schema under that name.
"""

from __future__ import annotations

import contextlib
from collections.abc import Generator
from enum import Enum

from wired.ui.schema.container import Schema


class SchemaState(str, Enum):
    """Lifecycle of a schema name within one component."""

    UNRESOLVED = "unresolved"
    RESOLVING = "resolving"
    RESOLVED = "resolved"


class SchemaCache:
    """Resolved schemas in insertion order, plus names currently resolving."""

    def __init__(self) -> None:
        self._schemas: dict[str, Schema | None] = {}
        self._resolving: dict[str, int] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._schemas

    def __len__(self) -> int:
        return len(self._schemas)

    def state(self, name: str) -> SchemaState:
        if name in self._resolving:
            return SchemaState.RESOLVING
        if name in self._schemas:
            return SchemaState.RESOLVED
        return SchemaState.UNRESOLVED

    def is_resolving(self, name: str | None = None) -> bool:
        """Whether ``name`` (or any name, when omitted) is being resolved."""
        if name is None:
            return bool(self._resolving)
        return name in self._resolving

    @contextlib.contextmanager
    def resolving(self, name: str) -> Generator[None]:
        """Mark ``name`` as resolving for the duration of the block."""
        self._resolving[name] = self._resolving.get(name, 0) + 1
        try:
            yield
        finally:
            depth = self._resolving[name] - 1
            if depth:
                self._resolving[name] = depth
            else:
                del self._resolving[name]

    def store(self, name: str, schema: Schema | None) -> Schema | None:
        self._schemas[name] = schema
        return schema

    def forget(self, name: str) -> None:
        self._schemas.pop(name, None)

    def get(self, name: str) -> Schema | None:
        """Return the cached value, or None when the name is not resolved."""
        return self._schemas.get(name)

    def names(self) -> list[str]:
        return list(self._schemas)

    def as_dict(self) -> dict[str, Schema | None]:
        return dict(self._schemas)
