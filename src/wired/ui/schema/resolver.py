# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: wired framework
"""
Convention-based schema discovery.

A component declares a schema called ``contact`` by defining either a method
named ``contact`` or one named ``contact_schema``. The method's signature
decides how the schema is built:

    def contact_schema(self, schema: Form) -> Form: ...   # receives a new Form
    def contact_schema(self) -> Schema: ...               # builds its own

Signature analysis runs once per (component class, method) and is memoised as
a `SchemaPlan`. Names that no method claims can be handed to a
`SchemaResolverStrategy`, e.g. schemas of actions mounted on the component.
"""

from __future__ import annotations

import functools
import inspect
import types
import typing
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol, Union

from wired.logging import get_logger
from wired.ui.schema.attributes import find_method
from wired.ui.schema.container import Form, Infolist, Schema
from wired.ui.schema.errors import SchemaResolutionError

if TYPE_CHECKING:
    from wired.ui.schema.cache import SchemaCache
    from wired.ui.schema.concerns import InteractsWithSchemas

logger = get_logger(__name__)

_UNRESOLVED = object()


class SchemaResolverStrategy(Protocol):
    """Resolves schema names that no component method claims."""

    def supports(self, host: InteractsWithSchemas, name: str) -> bool: ...

    def resolve(self, host: InteractsWithSchemas, name: str) -> Schema | None: ...


class MountedActionSchemaResolver:
    """Resolve ``mounted_action*`` schemas by caching the mounted actions.

    Applies to components that define ``cache_mounted_actions(actions)`` and a
    ``mounted_actions`` attribute. Caching the actions is expected to cache
    their schemas on the component under the prefixed names.
    """

    def __init__(self, prefix: str | None = None) -> None:
        self.prefix = prefix

    def _prefix(self, host: InteractsWithSchemas) -> str:
        return self.prefix or host.get_schema_settings().mounted_action_prefix

    def supports(self, host: InteractsWithSchemas, name: str) -> bool:
        return (
            name.startswith(self._prefix(host))
            and callable(getattr(host, "cache_mounted_actions", None))
            and hasattr(host, "mounted_actions")
        )

    def resolve(self, host: InteractsWithSchemas, name: str) -> Schema | None:
        host.cache_mounted_actions(host.mounted_actions)
        return host.peek_schema(name)


def _unwrap_optional(annotation: Any) -> Any:
    if typing.get_origin(annotation) in (Union, types.UnionType):
        args = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


def _resolve_annotation(func: Callable[..., Any], name: str) -> Any:
    """Evaluate one annotation of ``func``; unresolvable ones yield _UNRESOLVED."""
    annotations = inspect.get_annotations(func)
    if name not in annotations:
        return _UNRESOLVED

    annotation = annotations[name]
    if isinstance(annotation, str):
        try:
            annotation = eval(annotation, func.__globals__, None)
        except (NameError, AttributeError, SyntaxError, TypeError):
            return _UNRESOLVED
    return _unwrap_optional(annotation)


def _schema_class(annotation: Any, *, concrete: bool) -> type[Schema] | None:
    if not isinstance(annotation, type) or not issubclass(annotation, Schema):
        return None
    if concrete and inspect.isabstract(annotation):
        return None
    return annotation


@dataclass(frozen=True)
class SchemaPlan:
    """How to build a schema from one component method.

    ``schema_type`` is the class to instantiate and pass in, or None when the
    method takes no schema and returns one itself.
    """

    method_name: str
    schema_type: type[Schema] | None

    def build(self, host: Any) -> Any:
        method = getattr(host, self.method_name)
        if self.schema_type is None:
            return method()
        return method(make_schema(host, self.schema_type))


@functools.cache
def plan_for(host_class: type, method_name: str) -> SchemaPlan | None:
    """Analyse ``host_class.method_name``; None when it cannot build a schema."""
    attribute = inspect.getattr_static(host_class, method_name, None)
    func = find_method(host_class, method_name)
    if func is None:
        return None

    parameters = list(inspect.signature(func).parameters.values())
    if not isinstance(attribute, staticmethod):
        parameters = parameters[1:]

    if not parameters:
        returns = _schema_class(
            _resolve_annotation(func, "return"), concrete=False
        )
        if returns is None:
            return None
        return SchemaPlan(method_name, None)

    first = parameters[0]
    if first.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD):
        return None

    schema_type = _schema_class(_resolve_annotation(func, first.name), concrete=True)
    if schema_type is None:
        return None
    return SchemaPlan(method_name, schema_type)


def make_schema(host: Any, schema_type: type[Schema]) -> Schema:
    """Instantiate ``schema_type`` for ``host``, preferring the host's factories."""
    if issubclass(schema_type, Form):
        make_form = getattr(host, "make_form", None)
        if callable(make_form):
            return make_form()

    if issubclass(schema_type, Infolist):
        make_infolist = getattr(host, "make_infolist", None)
        if callable(make_infolist):
            return make_infolist()

    return schema_type.make(host)


class SchemaResolver:
    """Find and build the schema a component declares under a name."""

    def __init__(
        self,
        method_suffix: str = "_schema",
        strategies: Sequence[SchemaResolverStrategy] = (),
    ) -> None:
        self.method_suffix = method_suffix
        self.strategies = list(strategies)

    def find_method_name(self, host_class: type, name: str) -> str | None:
        for candidate in (name, f"{name}{self.method_suffix}"):
            if find_method(host_class, candidate) is not None:
                return candidate
        return None

    def resolve(
        self, host: InteractsWithSchemas, cache: SchemaCache, name: str
    ) -> Schema | None:
        """Resolve ``name`` by convention and store the outcome in ``cache``.

        Raises:
            SchemaResolutionError: If a schema method returns something other
                than a schema.
        """
        method_name = self.find_method_name(type(host), name)

        if method_name is None:
            for strategy in self.strategies:
                if strategy.supports(host, name):
                    logger.debug(
                        "Delegating schema to strategy",
                        schema=name,
                        strategy=type(strategy).__name__,
                    )
                    return strategy.resolve(host, name)

            logger.debug("No schema method found", schema=name)
            cache.forget(name)
            return None

        plan = plan_for(type(host), method_name)
        if plan is None:
            logger.debug(
                "Schema method signature does not describe a schema",
                schema=name,
                method=method_name,
            )
            cache.forget(name)
            return None

        try:
            schema = plan.build(host)
        except Exception:
            cache.forget(name)
            raise

        if not isinstance(schema, Schema):
            cache.forget(name)
            raise SchemaResolutionError(
                f"Method [{method_name}] must return a schema, "
                f"got {type(schema).__name__}.",
                schema_name=name,
                method=method_name,
            )

        logger.debug(
            "Resolved schema",
            schema=name,
            method=method_name,
            schema_type=type(schema).__name__,
        )
        return cache.store(name, schema.key(name))
