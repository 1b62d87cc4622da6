"""Tests for relaying component state updates to cached schemas."""

from __future__ import annotations

import threading
from typing import Any

from wired import LiveComponent
from wired.ui.schema import Field, Form, InteractsWithSchemas, SchemaComponent


def slugify(value: str) -> str:
    return "-".join(value.lower().split())


class ProfilePage(InteractsWithSchemas, LiveComponent):
    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.data: dict[str, Any] = {
            "name": "Ada Lovelace",
            "slug": "ada-lovelace",
            "address": {"city": "London"},
        }
        self.settings: dict[str, Any] = {"theme": "light"}
        self.seen: list[tuple[str, Any, Any]] = []

    def form_schema(self, schema: Form) -> Form:
        return schema.state_path("data").components(
            [
                Field.make("name").after_state_updated(self.sync_slug),
                Field.make("slug"),
                SchemaComponent.make("address").after_state_updated(self.record),
            ]
        )

    def preferences_schema(self, schema: Form) -> Form:
        return schema.state_path("settings").components(
            [Field.make("theme").after_state_updated(self.record)]
        )

    def sync_slug(self, component: SchemaComponent, state: Any, old: Any) -> None:
        self.seen.append((component.get_key(), state, old))
        self.data["slug"] = slugify(state)

    def record(self, component: SchemaComponent, state: Any, old: Any) -> None:
        self.seen.append((component.get_key(), state, old))


class TestStateRelay:
    """Updates reach the components bound to the changed path."""

    def test_bound_component_reacts_with_new_and_old_state(self) -> None:
        page = ProfilePage()
        page.get_schema("form")

        page.update("data.name", "Grace Hopper")

        assert page.data["slug"] == "grace-hopper"
        assert page.seen == [("form.name", "Grace Hopper", "Ada Lovelace")]

    def test_nested_update_reaches_ancestor_component(self) -> None:
        page = ProfilePage()
        page.get_schema("form")

        page.update("data.address.city", "Paris")

        assert page.seen == [
            ("form.address", {"city": "Paris"}, {"city": "London"}),
        ]

    def test_unbound_path_notifies_nobody(self) -> None:
        page = ProfilePage()
        page.get_schema("form")

        page.update("data.slug", "custom")

        assert page.seen == []
        assert page.data["slug"] == "custom"

    def test_every_cached_schema_is_notified(self) -> None:
        page = ProfilePage()
        page.get_schema("form")
        page.get_schema("preferences")

        page.update("settings.theme", "dark")

        assert page.seen == [("preferences.theme", "dark", "light")]

    def test_uncached_schemas_are_not_resolved_by_updates(self) -> None:
        page = ProfilePage()

        page.update("data.name", "Grace Hopper")

        assert page.seen == []
        assert page.has_cached_schema("form") is False

    def test_discovered_schemas_are_resolved_before_notifying(self) -> None:
        page = ProfilePage()
        page.discover_schema("form")

        page.update("data.name", "Grace Hopper")

        assert page.data["slug"] == "grace-hopper"
        assert page.discovered_schema_names == []


class TestOldState:
    """Snapshots taken before an update is applied."""

    def test_snapshot_is_taken_under_the_root_segment(self) -> None:
        page = ProfilePage()

        page.update("data.name", "Grace Hopper")

        assert page.get_old_schema_state("data.name") == "Ada Lovelace"
        assert page.get_old_schema_state("settings") is None

    def test_snapshot_is_a_copy(self) -> None:
        page = ProfilePage()

        page.update("data.address.city", "Paris")
        page.data["address"]["city"] = "Rome"

        assert page.get_old_schema_state("data.address.city") == "London"

    def test_uncopyable_state_is_kept_as_is(self) -> None:
        page = ProfilePage()
        lock = threading.Lock()
        page.update("lock", lock)

        page.update("lock", threading.Lock())

        assert page.get_old_schema_state("lock") is lock

    def test_component_reads_old_state_through_the_host(self) -> None:
        page = ProfilePage()
        schema = page.get_schema("form")
        page.update("data.name", "Grace Hopper")

        component = schema.get_component("name")

        assert component.get_state() == "Grace Hopper"
        assert component.get_old_state() == "Ada Lovelace"
