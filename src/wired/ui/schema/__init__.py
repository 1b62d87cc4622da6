# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: wired framework
"""
Schema support for live components.

This package provides schema trees, their lazy per-component cache and the
mixin that connects them to a component's state and validation.
"""

from .attributes import exposed, is_exposed, is_renderless, renderless
from .cache import SchemaCache, SchemaState
from .components import Field, SchemaComponent
from .concerns import InteractsWithSchemas
from .container import Form, Infolist, Schema
from .errors import (
    SCHEMA,
    SCHEMA_NOT_FOUND,
    SCHEMA_RESOLUTION_ERROR,
    SchemaError,
    SchemaNotFoundError,
    SchemaResolutionError,
)
from .resolver import (
    MountedActionSchemaResolver,
    SchemaPlan,
    SchemaResolver,
    SchemaResolverStrategy,
    make_schema,
    plan_for,
)
from .translatable import TranslatableContentDriver

__all__ = [
    # Schema trees
    "Schema",
    "Form",
    "Infolist",
    "SchemaComponent",
    "Field",
    # Caching and resolution
    "InteractsWithSchemas",
    "SchemaCache",
    "SchemaState",
    "SchemaPlan",
    "SchemaResolver",
    "SchemaResolverStrategy",
    "MountedActionSchemaResolver",
    "make_schema",
    "plan_for",
    # Method markers
    "exposed",
    "renderless",
    "is_exposed",
    "is_renderless",
    # Translations
    "TranslatableContentDriver",
    # Errors
    "SCHEMA",
    "SCHEMA_NOT_FOUND",
    "SCHEMA_RESOLUTION_ERROR",
    "SchemaError",
    "SchemaNotFoundError",
    "SchemaResolutionError",
]
