# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: wired framework
"""Process-wide registry of error categories and codes."""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wired.errors.base import ErrorCategory, ErrorCode


class ErrorRegistry:
    """Singleton holding every `ErrorCategory` and `ErrorCode` created in wired.

    Codes are stored under both ``CATEGORY.CODE`` and the bare code, so lookups
    by bare code find codes registered by any subsystem.
    """

    _instance: ErrorRegistry | None = None
    _lock = threading.RLock()

    _categories: dict[str, ErrorCategory]
    _codes: dict[str, ErrorCode]

    def __new__(cls) -> ErrorRegistry:
        with cls._lock:
            if cls._instance is None:
                instance = super().__new__(cls)
                instance._categories = {}
                instance._codes = {}
                cls._instance = instance
            return cls._instance

    def get_category(
        self, name: str, parent: ErrorCategory | None = None
    ) -> ErrorCategory:
        """Return the category called ``name``, registering it on first use."""
        from wired.errors.base import ErrorCategory

        with self._lock:
            if name not in self._categories:
                self._categories[name] = ErrorCategory(name, parent)
            return self._categories[name]

    def get_code(self, code: str, category_name: str = "INTERNAL") -> ErrorCode:
        """Return ``code`` within ``category_name``, registering it on first use."""
        from wired.errors.base import ErrorCode

        key = f"{category_name}.{code}"
        with self._lock:
            if key not in self._codes:
                error_code = ErrorCode(code, self.get_category(category_name))
                self._codes[key] = error_code
                self._codes[code] = error_code
            return self._codes[key]

    def lookup_code(self, code: str) -> ErrorCode | None:
        """Find a registered code without creating it."""
        error_code = self._codes.get(code)
        if error_code is None:
            logging.getLogger(__name__).warning(
                "Error code '%s' not found in registry", code
            )
        return error_code

    def lookup_category(self, name: str) -> ErrorCategory | None:
        return self._categories.get(name)

    def get_all_categories(self) -> list[ErrorCategory]:
        return list(self._categories.values())

    def get_all_codes(self) -> list[ErrorCode]:
        return list(dict.fromkeys(self._codes.values()))


registry = ErrorRegistry()
