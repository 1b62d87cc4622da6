# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: wired framework
"""
Settings that drive schema discovery and validation routing.

Values are read from environment variables prefixed with ``WIRED_SCHEMA_``.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SchemaSettings(BaseSettings):
    """Conventions used by components that interact with schemas."""

    model_config = SettingsConfigDict(
        env_prefix="WIRED_SCHEMA_",
        extra="ignore",
        case_sensitive=False,
        frozen=True,
    )

    schema_method_suffix: str = Field(
        default="_schema",
        description="Suffix of host methods that build a schema, e.g. contact_schema",
    )
    mounted_action_prefix: str = Field(
        default="mounted_action",
        description="Schema name prefix handled by the mounted action resolver",
    )
    validation_error_event: str = Field(
        default="form-validation-error",
        description="Event dispatched when validation fails",
    )
    default_locale: str = Field(
        default="en", description="Locale used when a component has no active locale"
    )

    @field_validator("schema_method_suffix", "mounted_action_prefix")
    @classmethod
    def validate_identifier_fragment(cls, v: str) -> str:
        if not v or not v.replace("_", "a").isalnum():
            raise ValueError(f"Expected an identifier fragment, got {v!r}")
        return v


@lru_cache(maxsize=1)
def get_schema_settings() -> SchemaSettings:
    """Return the process-wide schema settings."""
    return SchemaSettings()
