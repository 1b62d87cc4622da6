"""Tests for the per-component schema cache."""

from __future__ import annotations

import pytest

from wired.ui.schema import Form, SchemaCache, SchemaState


class TestSchemaCache:
    """Tests for `SchemaCache` bookkeeping."""

    def test_new_names_are_unresolved(self) -> None:
        cache = SchemaCache()

        assert cache.state("contact") is SchemaState.UNRESOLVED
        assert "contact" not in cache
        assert len(cache) == 0

    def test_stored_names_are_resolved(self) -> None:
        """Storing a schema, or None, marks the name resolved."""
        cache = SchemaCache()
        form = Form.make()

        assert cache.store("contact", form) is form
        cache.store("empty", None)

        assert cache.state("contact") is SchemaState.RESOLVED
        assert cache.state("empty") is SchemaState.RESOLVED
        assert cache.get("contact") is form
        assert cache.get("empty") is None
        assert cache.names() == ["contact", "empty"]

    def test_forget_returns_name_to_unresolved(self) -> None:
        cache = SchemaCache()
        cache.store("contact", Form.make())

        cache.forget("contact")
        cache.forget("never-stored")

        assert cache.state("contact") is SchemaState.UNRESOLVED
        assert cache.get("contact") is None

    def test_resolving_block_marks_name(self) -> None:
        """A name is resolving only inside its `resolving` block."""
        cache = SchemaCache()

        with cache.resolving("contact"):
            assert cache.state("contact") is SchemaState.RESOLVING
            assert cache.is_resolving("contact")
            assert cache.is_resolving()
            assert not cache.is_resolving("other")

        assert not cache.is_resolving()
        assert cache.state("contact") is SchemaState.UNRESOLVED

    def test_nested_resolving_blocks_are_counted(self) -> None:
        cache = SchemaCache()

        with cache.resolving("contact"):
            with cache.resolving("contact"):
                pass
            assert cache.is_resolving("contact")

        assert not cache.is_resolving("contact")

    def test_resolving_flag_is_cleared_on_error(self) -> None:
        cache = SchemaCache()

        with pytest.raises(RuntimeError):
            with cache.resolving("contact"):
                raise RuntimeError("boom")

        assert not cache.is_resolving()

    def test_as_dict_is_an_ordered_copy(self) -> None:
        cache = SchemaCache()
        cache.store("b", None)
        cache.store("a", Form.make())

        snapshot = cache.as_dict()
        snapshot.clear()

        assert list(cache.as_dict()) == ["b", "a"]
