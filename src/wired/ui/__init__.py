# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: wired framework
"""
UI building blocks for wired components.
"""

from wired.ui.schema import (
    Field,
    Form,
    Infolist,
    InteractsWithSchemas,
    Schema,
    SchemaComponent,
    exposed,
    renderless,
)

__all__ = [
    "Field",
    "Form",
    "Infolist",
    "InteractsWithSchemas",
    "Schema",
    "SchemaComponent",
    "exposed",
    "renderless",
]
