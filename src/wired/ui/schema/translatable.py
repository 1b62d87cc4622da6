# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: wired framework
"""Drivers that let schemas edit content in several locales."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class TranslatableContentDriver(ABC):
    """Reads and writes translated attributes for one active locale."""

    def __init__(self, active_locale: str) -> None:
        self.active_locale = active_locale

    @abstractmethod
    def is_attribute_translatable(self, model: type[Any], attribute: str) -> bool:
        """Return whether ``attribute`` of ``model`` holds per-locale values."""

    def get_attribute(self, record: Any, attribute: str) -> Any:
        value = getattr(record, attribute, None)
        if self.is_attribute_translatable(type(record), attribute) and isinstance(
            value, dict
        ):
            return value.get(self.active_locale)
        return value
