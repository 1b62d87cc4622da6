"""Tests for the wired error handling system.

Covers the error registry, categories, codes and the `WiredError` base class.
"""

from __future__ import annotations

import pytest

from wired.errors import (
    INTERNAL,
    ErrorCategory,
    ErrorCode,
    ErrorRegistry,
    ErrorSeverity,
    WiredError,
    registry,
)
from wired.ui.schema import (
    SCHEMA,
    SCHEMA_NOT_FOUND,
    SCHEMA_RESOLUTION_ERROR,
    SchemaError,
    SchemaNotFoundError,
    SchemaResolutionError,
)

EXAMPLES = ErrorCategory.get_or_create("EXAMPLES")
EXAMPLE_FAILED = ErrorCode.get_or_create("EXAMPLE_FAILED", EXAMPLES)


class ExampleError(WiredError):
    def __init__(self, message: str, **kwargs) -> None:
        super().__init__(message, code=EXAMPLE_FAILED, **kwargs)


class TestErrorRegistry:
    """Tests for the process-wide registry."""

    def test_registry_is_a_singleton(self) -> None:
        assert ErrorRegistry() is registry

    def test_get_or_create_returns_registered_instances(self) -> None:
        assert ErrorCategory.get_or_create("EXAMPLES") is EXAMPLES
        assert ErrorCode.get_or_create("EXAMPLE_FAILED", EXAMPLES) is EXAMPLE_FAILED

    def test_lookup_code(self) -> None:
        assert ErrorCode.get_by_code("SCHEMA_NOT_FOUND") is SCHEMA_NOT_FOUND
        assert ErrorCode.get_by_code("NOPE", raise_if_missing=False) is None

        with pytest.raises(ValueError):
            ErrorCode.get_by_code("NOPE")

    def test_codes_without_category_are_internal(self) -> None:
        assert ErrorCode("ADHOC").category == INTERNAL

    def test_subcategories(self) -> None:
        child = ErrorCategory("EXAMPLES_CHILD", parent=EXAMPLES)

        assert child.is_subcategory_of(EXAMPLES)
        assert not EXAMPLES.is_subcategory_of(child)


class TestWiredError:
    """Tests for the `WiredError` base class."""

    def test_base_class_cannot_be_instantiated(self) -> None:
        with pytest.raises(TypeError):
            WiredError("nope", code=EXAMPLE_FAILED)

    def test_code_must_be_an_error_code(self) -> None:
        class LooseError(WiredError):
            pass

        with pytest.raises(TypeError):
            LooseError("nope", code="EXAMPLE_FAILED")

    def test_keyword_arguments_become_context(self) -> None:
        error = ExampleError("failed", context={"a": 1}, b=2)

        assert error.context == {"a": 1, "b": 2}
        assert error.severity is ErrorSeverity.ERROR
        assert str(error) == "EXAMPLE_FAILED: failed"

    def test_add_context_chains(self) -> None:
        error = ExampleError("failed").add_context("a", 1).add_context("b", 2)

        assert error.context == {"a": 1, "b": 2}

    def test_to_dict(self) -> None:
        data = ExampleError("failed", severity=ErrorSeverity.CRITICAL, x=1).to_dict()

        assert data["code"] == "EXAMPLE_FAILED"
        assert data["message"] == "failed"
        assert data["category"] == "EXAMPLES"
        assert data["severity"] == "CRITICAL"
        assert data["context"] == {"x": 1}
        assert "timestamp" in data


class TestSchemaErrors:
    def test_not_found_error(self) -> None:
        error = SchemaNotFoundError("billing")

        assert isinstance(error, SchemaError)
        assert error.code == SCHEMA_NOT_FOUND
        assert error.category == SCHEMA
        assert error.schema_name == "billing"
        assert error.context["schema_name"] == "billing"
        assert str(error) == "SCHEMA_NOT_FOUND: Schema [billing] not found."

    def test_resolution_error(self) -> None:
        error = SchemaResolutionError("Loop.", schema_name="loop", method="loop_schema")

        assert error.code == SCHEMA_RESOLUTION_ERROR
        assert error.context == {"schema_name": "loop", "method": "loop_schema"}
