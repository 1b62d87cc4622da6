"""Tests for schema settings and their effect on components."""

from __future__ import annotations

import pytest
from pydantic import ValidationError as SettingsValidationError

from wired import LiveComponent, ValidationError
from wired.config import SchemaSettings, get_schema_settings
from wired.events import DispatchedEvent, EventDispatcher
from wired.ui.schema import Form, InteractsWithSchemas


class ContactPage(InteractsWithSchemas, LiveComponent):
    def contact_form(self, schema: Form) -> Form:
        return schema

    def contact_schema(self, schema: Form) -> Form:
        return schema


class StrictPage(InteractsWithSchemas, LiveComponent):
    schema_settings = SchemaSettings(validation_error_event="invalid")
    validation_rules = {"name": "required"}

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.name = ""


class TestSchemaSettings:
    def test_defaults(self) -> None:
        settings = SchemaSettings()

        assert settings.schema_method_suffix == "_schema"
        assert settings.mounted_action_prefix == "mounted_action"
        assert settings.validation_error_event == "form-validation-error"
        assert settings.default_locale == "en"

    def test_settings_are_cached(self) -> None:
        assert get_schema_settings() is get_schema_settings()

    def test_settings_are_frozen(self) -> None:
        with pytest.raises(SettingsValidationError):
            get_schema_settings().default_locale = "de"

    def test_environment_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WIRED_SCHEMA_DEFAULT_LOCALE", "nl")

        assert get_schema_settings().default_locale == "nl"

    def test_suffix_must_be_an_identifier_fragment(self) -> None:
        with pytest.raises(SettingsValidationError):
            SchemaSettings(schema_method_suffix="-schema")


class TestSettingsOnComponents:
    """Components pick their conventions up from settings."""

    def test_method_suffix_comes_from_environment(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("WIRED_SCHEMA_SCHEMA_METHOD_SUFFIX", "_form")
        page = ContactPage()

        schema = page.get_schema("contact")

        assert isinstance(schema, Form)
        assert page._schema_resolver.find_method_name(ContactPage, "contact") == "contact_form"

    def test_class_settings_override_process_settings(
        self, events: EventDispatcher
    ) -> None:
        received: list[DispatchedEvent] = []
        events.subscribe("invalid", received.append)
        page = StrictPage(events=events)

        with pytest.raises(ValidationError):
            page.validate()

        assert [event.name for event in received] == ["invalid"]
