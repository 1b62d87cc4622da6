# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: wired framework
"""
Environment-driven settings for wired loggers.

Every field can be set through a ``WIRED_LOGGING_<FIELD>`` variable, e.g.
``WIRED_LOGGING_LEVEL=debug`` or ``WIRED_LOGGING_JSON_FORMAT=true``.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from wired.logging.level import LogLevel


class LoggingSettings(BaseSettings):
    """Handlers and output format for wired loggers.

    wired is a library, so by default it installs no handlers of its own and
    lets records propagate to the application's root configuration.
    """

    model_config = SettingsConfigDict(
        env_prefix="WIRED_LOGGING_",
        extra="ignore",
        case_sensitive=False,
    )

    level: str = Field(default=LogLevel.INFO.value)
    json_format: bool = False
    include_timestamp: bool = True
    include_level: bool = True
    console_enabled: bool = Field(
        default=False, description="Attach a stdout handler to each wired logger"
    )
    propagate: bool = True
    file_enabled: bool = False
    file_path: str | None = None

    @field_validator("level", mode="before")
    @classmethod
    def validate_level(cls, v: Any) -> str:
        if not isinstance(v, str | LogLevel):
            raise ValueError(f"Log level must be a string, got {type(v).__name__}")
        return LogLevel.parse(v).value

    @classmethod
    def load(cls) -> LoggingSettings:
        return cls()
