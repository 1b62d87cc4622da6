# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: wired framework
"""
Addressable nodes of a schema tree.

A node is identified by its absolute key (``<schema key>.<name>[.<child>...]``)
and bound to component state through its state path. Rendering and the field
type catalogue live outside this package.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any

from wired.support import data_get, data_set
from wired.validation.validator import Rule, normalize_rules

if TYPE_CHECKING:
    from wired.ui.schema.container import Schema

AfterStateUpdated = Callable[["SchemaComponent", Any, Any], None]

_MISSING = object()


class SchemaComponent:
    """A named node in a schema tree, optionally holding child nodes."""

    def __init__(self, name: str) -> None:
        self._name = name
        self._label: str | None = None
        self._container: Schema | None = None
        self._parent: SchemaComponent | None = None
        self._children: list[SchemaComponent] = []
        self._after_state_updated: list[AfterStateUpdated] = []

    @classmethod
    def make(cls, name: str) -> SchemaComponent:
        return cls(name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._name!r})"

    def schema(self, components: list[SchemaComponent]) -> SchemaComponent:
        """Nest ``components`` under this node."""
        self._children = list(components)
        for child in self._children:
            child._parent = self
            if self._container is not None:
                child.attach(self._container)
        return self

    def attach(self, container: Schema) -> None:
        self._container = container
        for child in self._children:
            child.attach(container)

    def label(self, label: str | None) -> SchemaComponent:
        self._label = label
        return self

    def after_state_updated(self, callback: AfterStateUpdated) -> SchemaComponent:
        """Register ``callback(component, state, old_state)``."""
        self._after_state_updated.append(callback)
        return self

    def get_name(self) -> str:
        return self._name

    def get_label(self) -> str:
        return self._label or self._name.replace("_", " ").capitalize()

    def get_container(self) -> Schema | None:
        return self._container

    def get_child_components(self) -> list[SchemaComponent]:
        return list(self._children)

    def iter_descendants(self) -> Iterator[SchemaComponent]:
        for child in self._children:
            yield child
            yield from child.iter_descendants()

    def get_key(self) -> str:
        """Absolute key, prefixed with the schema key when one is set."""
        if self._parent is not None:
            prefix = self._parent.get_key()
        elif self._container is not None:
            prefix = self._container.get_key()
        else:
            prefix = None
        return f"{prefix}.{self._name}" if prefix else self._name

    def get_state_path(self) -> str:
        if self._parent is not None:
            prefix = self._parent.get_state_path()
        elif self._container is not None:
            prefix = self._container.get_state_path()
        else:
            prefix = None
        return f"{prefix}.{self._name}" if prefix else self._name

    def get_host(self) -> Any:
        return self._container.get_host() if self._container is not None else None

    def get_state(self) -> Any:
        return data_get(self.get_host(), self.get_state_path())

    def get_old_state(self) -> Any:
        host = self.get_host()
        getter = getattr(host, "get_old_schema_state", None)
        if getter is None:
            return None
        return getter(self.get_state_path())

    def call_after_state_updated(self) -> None:
        if not self._after_state_updated:
            return

        state = self.get_state()
        old_state = self.get_old_state()
        for callback in self._after_state_updated:
            callback(self, state, old_state)

    def get_validation_rules(self) -> list[Rule]:
        return []

    def mutate_state_for_validation(self, attributes: dict[str, Any]) -> dict[str, Any]:
        return attributes


class Field(SchemaComponent):
    """A node that holds state and contributes validation rules."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self._rules: list[Rule] = []
        self._mutate_state_for_validation: Callable[[Any], Any] | None = None

    def rules(self, rules: Rule | list[Rule]) -> Field:
        self._rules.extend(normalize_rules(rules))
        return self

    def required(self, condition: bool = True) -> Field:
        if condition and "required" not in self._rules:
            self._rules.insert(0, "required")
        elif not condition and "required" in self._rules:
            self._rules.remove("required")
        return self

    def is_required(self) -> bool:
        return "required" in self._rules

    def mutate_state_for_validation_using(self, callback: Callable[[Any], Any]) -> Field:
        """Transform this field's value before rules run, e.g. trim whitespace."""
        self._mutate_state_for_validation = callback
        return self

    def get_validation_rules(self) -> list[Rule]:
        return list(self._rules)

    def mutate_state_for_validation(self, attributes: dict[str, Any]) -> dict[str, Any]:
        if self._mutate_state_for_validation is None:
            return attributes

        path = self.get_state_path()
        value = data_get(attributes, path, _MISSING)
        if value is _MISSING:
            return attributes

        data_set(attributes, path, self._mutate_state_for_validation(value))
        return attributes
