# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: wired framework
"""
Base class for stateful, server-rendered components.

A component's public attributes are its state. One instance serves one
interaction at a time: the client sends property updates and method calls,
the component mutates its state, dispatches events and is re-rendered unless
a renderless call asked to skip the render.
"""

from __future__ import annotations

import copy
import uuid
from collections.abc import Mapping
from typing import Any, ClassVar

from wired.events import DispatchedEvent, EventDispatcher
from wired.logging import get_logger
from wired.support import data_get, data_set
from wired.validation.validator import Validator

logger = get_logger(__name__)


class LiveComponent:
    """Stateful component with an update pipeline and wrapped validation.

    Subclasses declare validation through the ``validation_rules``,
    ``validation_messages`` and ``validation_attributes`` class attributes,
    and react to state changes by overriding `updating` and `updated`.
    """

    validation_rules: ClassVar[dict[str, Any]] = {}
    validation_messages: ClassVar[dict[str, str]] = {}
    validation_attributes: ClassVar[dict[str, str]] = {}

    def __init__(
        self,
        component_id: str | None = None,
        events: EventDispatcher | None = None,
    ) -> None:
        self._id = component_id or uuid.uuid4().hex
        self._events = events
        self._skip_render = False
        self._dispatched_events: list[DispatchedEvent] = []

    def get_id(self) -> str:
        return self._id

    # Rendering

    def skip_render(self) -> None:
        """Do not re-render after the current interaction."""
        self._skip_render = True

    def should_skip_render(self) -> bool:
        return self._skip_render

    def reset_render_state(self) -> None:
        self._skip_render = False

    # Events

    def dispatch(self, name: str, **params: Any) -> DispatchedEvent:
        """Emit a browser event and hand it to the event dispatcher, if any."""
        event = DispatchedEvent(name=name, component_id=self._id, params=params)
        self._dispatched_events.append(event)

        if self._events is not None:
            self._events.dispatch(event)

        return event

    @property
    def dispatched_events(self) -> list[DispatchedEvent]:
        return list(self._dispatched_events)

    # State

    def update(self, path: str, value: Any) -> None:
        """Apply a client-side update to the property at a dotted ``path``."""
        self.updating(path, value)
        data_set(self, path, value)
        logger.debug("Updated component state", component_id=self._id, path=path)
        self.updated(path, value)

    def updating(self, path: str, value: Any) -> None:
        """Called before the property at ``path`` changes."""

    def updated(self, path: str, value: Any) -> None:
        """Called after the property at ``path`` changed."""

    # Validation

    def get_rules(self) -> dict[str, Any]:
        return dict(self.validation_rules)

    def get_messages(self) -> dict[str, str]:
        return dict(self.validation_messages)

    def get_validation_attributes(self) -> dict[str, str]:
        return dict(self.validation_attributes)

    def prepare_for_validation(self, attributes: dict[str, Any]) -> dict[str, Any]:
        """Transform state before rules run."""
        return attributes

    def get_data_for_validation(self, rules: Mapping[str, Any]) -> dict[str, Any]:
        """Copy the top-level properties that ``rules`` refer to."""
        data: dict[str, Any] = {}
        for key in rules:
            root = key.split(".", 1)[0]
            if root not in data:
                data[root] = copy.deepcopy(data_get(self, root))
        return data

    def _make_validator(
        self,
        data: Mapping[str, Any],
        rules: Mapping[str, Any],
        messages: Mapping[str, str] | None,
        attributes: Mapping[str, str] | None,
    ) -> Validator:
        return Validator(
            data,
            rules,
            {**self.get_messages(), **(messages or {})},
            {**self.get_validation_attributes(), **(attributes or {})},
        )

    def validate(
        self,
        rules: Mapping[str, Any] | None = None,
        messages: Mapping[str, str] | None = None,
        attributes: Mapping[str, str] | None = None,
    ) -> dict[str, Any]:
        """Validate the component state.

        Args:
            rules: Rules per state path; defaults to `get_rules`
            messages: Extra messages, keyed ``"<path>.<rule>"`` or ``"<rule>"``
            attributes: Extra attribute labels per state path

        Returns:
            The validated state

        Raises:
            ValidationError: If any rule fails
        """
        rules = dict(rules) if rules is not None else self.get_rules()
        if not rules:
            return {}

        data = self.prepare_for_validation(self.get_data_for_validation(rules))

        return self._make_validator(data, rules, messages, attributes).validate()

    def validate_only(
        self,
        field: str,
        rules: Mapping[str, Any] | None = None,
        messages: Mapping[str, str] | None = None,
        attributes: Mapping[str, str] | None = None,
        data_overrides: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Validate a single state path against its rules.

        Raises:
            ValidationError: If a rule for ``field`` fails
        """
        rules = dict(rules) if rules is not None else self.get_rules()
        field_rules = {key: value for key, value in rules.items() if key == field}
        if not field_rules:
            return {}

        data = self.get_data_for_validation(field_rules)
        for path, value in (data_overrides or {}).items():
            data_set(data, path, value)

        data = self.prepare_for_validation(data)

        return self._make_validator(data, field_rules, messages, attributes).validate()
