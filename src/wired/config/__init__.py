# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: wired framework
"""Configuration for the wired framework."""

from wired.config.settings import SchemaSettings, get_schema_settings

__all__ = [
    "SchemaSettings",
    "get_schema_settings",
]
