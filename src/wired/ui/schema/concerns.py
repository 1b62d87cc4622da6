# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: wired framework
"""
Schema support for live components.

`InteractsWithSchemas` is mixed into a `LiveComponent` subclass ahead of the
base class:

    class EditContact(InteractsWithSchemas, LiveComponent):
        def contact_schema(self, schema: Form) -> Form:
            return schema.state_path("data").components([...])

It lazily builds and caches the component's schemas, addresses schema
components by key, routes validation through the cached schemas and relays
state updates to them.
"""

from __future__ import annotations

import copy
from collections.abc import Callable, Mapping
from typing import Any, ClassVar

from wired.config import SchemaSettings, get_schema_settings
from wired.files import TemporaryUploadedFile
from wired.logging import get_logger
from wired.support import data_get
from wired.ui.schema.attributes import find_method, is_exposed, is_renderless
from wired.ui.schema.cache import SchemaCache
from wired.ui.schema.components import SchemaComponent
from wired.ui.schema.container import Schema
from wired.ui.schema.errors import SchemaNotFoundError, SchemaResolutionError
from wired.ui.schema.resolver import (
    MountedActionSchemaResolver,
    SchemaResolver,
    SchemaResolverStrategy,
)
from wired.ui.schema.translatable import TranslatableContentDriver
from wired.validation.errors import ValidationError

logger = get_logger(__name__)

_MISSING: Any = object()


class InteractsWithSchemas:
    """Mixin giving a live component named, lazily built schemas."""

    schema_settings: ClassVar[SchemaSettings | None] = None
    schema_resolver_strategies: ClassVar[tuple[SchemaResolverStrategy, ...]] = (
        MountedActionSchemaResolver(),
    )

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        self._schemas = SchemaCache()
        self._old_schema_state: dict[str, Any] = {}
        self.discovered_schema_names: list[str] = []
        self.component_file_attachments: dict[str, Any] = {}
        self._schema_resolver = SchemaResolver(
            method_suffix=self.get_schema_settings().schema_method_suffix,
            strategies=self.schema_resolver_strategies,
        )
        super().__init__(*args, **kwargs)

    def get_schema_settings(self) -> SchemaSettings:
        return self.schema_settings or get_schema_settings()

    def is_caching_schemas(self) -> bool:
        """Whether a schema is being resolved right now."""
        return self._schemas.is_resolving()

    # Cache

    def cache_schema(
        self,
        name: str,
        schema: Schema | Callable[[], Schema | None] | None = _MISSING,
    ) -> Schema | None:
        """Store ``schema`` under ``name``, or resolve it by convention.

        Passing ``None`` explicitly removes the cached schema. Omitting
        ``schema`` resolves the name through the component's schema methods.

        Raises:
            SchemaResolutionError: If ``name`` is resolved by convention while
                it is already being resolved by convention.
        """
        by_convention = schema is _MISSING
        if by_convention and self._schemas.is_resolving(name):
            raise SchemaResolutionError(
                f"Schema [{name}] depends on itself.", schema_name=name
            )

        with self._schemas.resolving(name):
            if callable(schema) and not isinstance(schema, Schema):
                schema = schema()

            if schema is None:
                self._schemas.forget(name)
                return None

            if not by_convention:
                return self._schemas.store(name, schema.key(name))

            return self._schema_resolver.resolve(self, self._schemas, name)

    def discover_schema(self, name: str) -> None:
        """Queue ``name`` to be resolved on the next full cache read."""
        if name not in self.discovered_schema_names:
            self.discovered_schema_names.append(name)

    def get_cached_schemas(self) -> dict[str, Schema | None]:
        """Resolve discovered names, then return every cached schema in order."""
        for name in self.discovered_schema_names:
            if name in self._schemas or self._schemas.is_resolving(name):
                continue

            self.cache_schema(name)

        self.discovered_schema_names = []

        return self._schemas.as_dict()

    def has_cached_schema(self, name: str) -> bool:
        return name in self.get_cached_schemas()

    def get_schema(self, name: str) -> Schema | None:
        if self.has_cached_schema(name):
            return self._schemas.get(name)

        return self.cache_schema(name)

    def peek_schema(self, name: str) -> Schema | None:
        """Read the cache without resolving anything."""
        return self._schemas.get(name)

    def _iter_cached_schemas(self) -> list[Schema]:
        return [
            schema for schema in self.get_cached_schemas().values() if schema is not None
        ]

    # Components

    def get_schema_component(self, key: str) -> SchemaComponent | None:
        """Find a schema component by its absolute key, e.g. ``contact.email``.

        Raises:
            SchemaNotFoundError: If the schema named by the key's first
                segment does not exist.
        """
        if "." not in key:
            return None

        schema_name = key.split(".", 1)[0]

        schema = self.get_schema(schema_name)

        if schema is None:
            raise SchemaNotFoundError(schema_name, component_key=key)

        return schema.get_component(key, is_absolute_key=True)

    def call_schema_component_method(
        self,
        component_key: str,
        method: str,
        arguments: Mapping[str, Any] | list[Any] | tuple[Any, ...] | None = None,
    ) -> Any:
        """Call an `exposed` method of a schema component on behalf of the client.

        Unknown components, unknown methods and methods that are not exposed
        are refused by returning None.
        """
        component = self.get_schema_component(component_key)

        if component is None:
            return None

        func = find_method(component, method)

        if func is None or not is_exposed(func):
            logger.debug(
                "Refused schema component method",
                component_key=component_key,
                method=method,
            )
            return None

        if is_renderless(func):
            self.skip_render()

        bound = getattr(component, method)

        if arguments is None:
            return bound()
        if isinstance(arguments, Mapping):
            return bound(**arguments)
        return bound(*arguments)

    def get_schema_component_file_attachment(
        self, component_key: str
    ) -> TemporaryUploadedFile | None:
        return data_get(self.component_file_attachments, component_key)

    # Translations

    def get_translatable_content_driver(self) -> type[TranslatableContentDriver] | None:
        return None

    def make_translatable_content_driver(self) -> TranslatableContentDriver | None:
        driver = self.get_translatable_content_driver()

        if driver is None:
            return None

        return driver(
            active_locale=self.get_active_schema_locale()
            or self.get_schema_settings().default_locale
        )

    def get_active_schema_locale(self) -> str | None:
        return None

    # State updates

    def get_old_schema_state(self, state_path: str) -> Any:
        return data_get(self._old_schema_state, state_path)

    def updating(self, path: str, value: Any) -> None:
        root = path.split(".", 1)[0]
        current = data_get(self, root)

        try:
            self._old_schema_state[root] = copy.deepcopy(current)
        except (TypeError, copy.Error):
            self._old_schema_state[root] = current

        super().updating(path, value)

    def updated(self, path: str, value: Any) -> None:
        for schema in self._iter_cached_schemas():
            schema.call_after_state_updated(path)

        super().updated(path, value)

    # Validation

    def validate(
        self,
        rules: Mapping[str, Any] | None = None,
        messages: Mapping[str, str] | None = None,
        attributes: Mapping[str, str] | None = None,
    ) -> dict[str, Any]:
        try:
            return super().validate(rules, messages, attributes)
        except ValidationError as exception:
            self._report_validation_error(exception)
            raise

    def validate_only(
        self,
        field: str,
        rules: Mapping[str, Any] | None = None,
        messages: Mapping[str, str] | None = None,
        attributes: Mapping[str, str] | None = None,
        data_overrides: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        try:
            return super().validate_only(
                field, rules, messages, attributes, data_overrides
            )
        except ValidationError as exception:
            self._report_validation_error(exception)
            raise

    def _report_validation_error(self, exception: ValidationError) -> None:
        self.on_validation_error(exception)

        self.dispatch(
            self.get_schema_settings().validation_error_event,
            component_id=self.get_id(),
        )

        logger.info(
            "Validation failed",
            component_id=self.get_id(),
            fields=list(exception.errors),
        )

    def on_validation_error(self, exception: ValidationError) -> None:
        """Hook for subclasses; runs before the failure is re-raised."""

    def prepare_for_validation(self, attributes: dict[str, Any]) -> dict[str, Any]:
        attributes = super().prepare_for_validation(attributes)

        for schema in self._iter_cached_schemas():
            attributes = schema.mutate_state_for_validation(attributes)

        return attributes

    def get_rules(self) -> dict[str, Any]:
        rules = super().get_rules()

        for schema in self._iter_cached_schemas():
            rules = {**rules, **schema.get_validation_rules()}

        return rules

    def get_validation_attributes(self) -> dict[str, str]:
        attributes = super().get_validation_attributes()

        for schema in self._iter_cached_schemas():
            attributes = {**attributes, **schema.get_validation_attributes()}

        return attributes
