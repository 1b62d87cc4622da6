# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
#
# SPDX-License-Identifier: MIT

"""
Reference validator used by `LiveComponent`.

Rules per state path are either rule strings (``"required|max:255"`` or a list
of such names) or callables ``(attribute, value) -> str | None`` that return an
error message on failure. Type rules (``numeric``, ``integer``, ``boolean``,
``email``) pass when pydantic can coerce the value to the matching type.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from pydantic import EmailStr, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from wired.support import data_get, data_set
from wired.validation.errors import UnknownRuleError, ValidationError

Rule = str | Callable[[str, Any], str | None]

_ADAPTERS: dict[str, TypeAdapter[Any]] = {
    "numeric": TypeAdapter(float),
    "integer": TypeAdapter(int),
    "boolean": TypeAdapter(bool),
    "email": TypeAdapter(EmailStr),
}

DEFAULT_MESSAGES: dict[str, str] = {
    "required": "The :attribute field is required.",
    "string": "The :attribute field must be a string.",
    "numeric": "The :attribute field must be a number.",
    "integer": "The :attribute field must be an integer.",
    "boolean": "The :attribute field must be true or false.",
    "email": "The :attribute field must be a valid email address.",
    "min": "The :attribute field must be at least :param.",
    "max": "The :attribute field must not be greater than :param.",
    "in": "The selected :attribute is invalid.",
}


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    if isinstance(value, list | tuple | dict | set):
        return len(value) == 0
    return False


def _conforms(rule: str, value: Any) -> bool:
    """Whether pydantic can coerce ``value`` to the type behind ``rule``."""
    if isinstance(value, bool) and rule in ("numeric", "integer"):
        return False
    try:
        _ADAPTERS[rule].validate_python(value)
    except PydanticValidationError:
        return False
    return True


def _size(value: Any) -> float:
    """Numbers and numeric strings measure by value, everything else by length."""
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, int | float | str) and _conforms("numeric", value):
        return float(_ADAPTERS["numeric"].validate_python(value))
    return float(len(value))


def _check(rule: str, param: str | None, value: Any) -> bool:
    match rule:
        case "required":
            return not _is_empty(value)
        case "nullable":
            return True
        case "string":
            return isinstance(value, str)
        case "numeric" | "integer" | "boolean" | "email":
            return _conforms(rule, value)
        case "min":
            return _size(value) >= float(param or 0)
        case "max":
            return _size(value) <= float(param or 0)
        case "in":
            return str(value) in (param or "").split(",")
    raise UnknownRuleError(rule)


def normalize_rules(rules: Rule | list[Rule] | tuple[Rule, ...]) -> list[Rule]:
    """Split ``"a|b"`` rule strings and wrap single rules in a list."""
    if isinstance(rules, str):
        return [part for part in rules.split("|") if part]
    if callable(rules):
        return [rules]

    normalized: list[Rule] = []
    for rule in rules:
        normalized.extend(normalize_rules(rule))
    return normalized


class Validator:
    """Evaluate a rule set against component state."""

    def __init__(
        self,
        data: Mapping[str, Any],
        rules: Mapping[str, Any],
        messages: Mapping[str, str] | None = None,
        attributes: Mapping[str, str] | None = None,
    ) -> None:
        self.data = data
        self.rules = {key: normalize_rules(value) for key, value in rules.items()}
        self.messages = dict(messages or {})
        self.attributes = dict(attributes or {})

    def attribute_label(self, key: str) -> str:
        return self.attributes.get(key, key.replace("_", " "))

    def _message(self, key: str, rule: str, param: str | None) -> str:
        template = (
            self.messages.get(f"{key}.{rule}")
            or self.messages.get(rule)
            or DEFAULT_MESSAGES.get(rule, "The :attribute field is invalid.")
        )
        return template.replace(":attribute", self.attribute_label(key)).replace(
            ":param", param or ""
        )

    def errors(self) -> dict[str, list[str]]:
        """Evaluate every rule and collect messages per state path."""
        errors: dict[str, list[str]] = {}

        for key, rules in self.rules.items():
            value = data_get(self.data, key)
            names = {rule for rule in rules if isinstance(rule, str)}

            if _is_empty(value) and "required" not in names:
                continue

            for rule in rules:
                if callable(rule):
                    message = rule(self.attribute_label(key), value)
                    if message:
                        errors.setdefault(key, []).append(message)
                    continue

                name, _, param = rule.partition(":")
                if not _check(name, param or None, value):
                    errors.setdefault(key, []).append(
                        self._message(key, name, param or None)
                    )
                    if name == "required":
                        break

        return errors

    def validate(self) -> dict[str, Any]:
        """Return the validated subset of the data or raise `ValidationError`."""
        errors = self.errors()
        if errors:
            raise ValidationError(errors)

        validated: dict[str, Any] = {}
        for key in self.rules:
            data_set(validated, key, data_get(self.data, key))
        return validated
