# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: wired framework
"""
Schema trees owned by a host component.

A `Schema` is the root container of a tree of `SchemaComponent` nodes. The
host caches schemas by name and uses them to address components by key,
relay state changes and contribute validation rules.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from wired.support import data_get
from wired.ui.schema.components import SchemaComponent
from wired.validation.validator import Rule


class Schema:
    """Root container of a schema tree."""

    def __init__(self, host: Any = None) -> None:
        self._host = host
        self._key: str | None = None
        self._state_path: str | None = None
        self._components: list[SchemaComponent] = []

    @classmethod
    def make(cls, host: Any = None) -> Schema:
        """Create an empty schema bound to ``host``."""
        return cls(host)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key={self._key!r})"

    def key(self, key: str | None) -> Schema:
        self._key = key
        return self

    def get_key(self) -> str | None:
        return self._key

    def state_path(self, path: str | None) -> Schema:
        """Bind component state under ``path``, e.g. ``data`` for ``data.email``."""
        self._state_path = path
        return self

    def get_state_path(self) -> str | None:
        return self._state_path

    def get_host(self) -> Any:
        return self._host

    def get_state(self) -> Any:
        return data_get(self._host, self._state_path)

    def components(self, components: list[SchemaComponent]) -> Schema:
        self._components = list(components)
        for component in self._components:
            component.attach(self)
        return self

    def get_components(self) -> list[SchemaComponent]:
        return list(self._components)

    def iter_components(self) -> Iterator[SchemaComponent]:
        """Walk every node depth-first, parents before children."""
        for component in self._components:
            yield component
            yield from component.iter_descendants()

    def get_component(
        self, key: str, is_absolute_key: bool = False
    ) -> SchemaComponent | None:
        """Find a node by key.

        Args:
            key: Node key; relative keys are prefixed with this schema's key
            is_absolute_key: Whether ``key`` already starts with the schema key

        Returns:
            The matching node or None
        """
        if not is_absolute_key and self._key:
            key = f"{self._key}.{key}"

        for component in self.iter_components():
            if component.get_key() == key:
                return component
        return None

    def call_after_state_updated(self, path: str) -> bool:
        """Notify nodes bound to ``path`` or to one of its ancestors.

        Returns:
            Whether any node was bound to the path
        """
        handled = False
        for component in self.iter_components():
            component_path = component.get_state_path()
            if path == component_path or path.startswith(f"{component_path}."):
                component.call_after_state_updated()
                handled = True
        return handled

    def mutate_state_for_validation(self, attributes: dict[str, Any]) -> dict[str, Any]:
        for component in self.iter_components():
            attributes = component.mutate_state_for_validation(attributes)
        return attributes

    def get_validation_rules(self) -> dict[str, list[Rule]]:
        rules: dict[str, list[Rule]] = {}
        for component in self.iter_components():
            component_rules = component.get_validation_rules()
            if component_rules:
                rules[component.get_state_path()] = component_rules
        return rules

    def get_validation_attributes(self) -> dict[str, str]:
        return {
            component.get_state_path(): component.get_label()
            for component in self.iter_components()
            if component.get_validation_rules()
        }


class Form(Schema):
    """Schema whose nodes accept input."""


class Infolist(Schema):
    """Read-only schema; it never contributes validation."""

    def mutate_state_for_validation(self, attributes: dict[str, Any]) -> dict[str, Any]:
        return attributes

    def get_validation_rules(self) -> dict[str, list[Rule]]:
        return {}

    def get_validation_attributes(self) -> dict[str, str]:
        return {}
