"""Top-level pytest configuration for the wired framework."""

from __future__ import annotations

import pytest

# Import modules for their side effects so the error registry is populated
import wired.errors.base
import wired.events.errors
import wired.ui.schema.errors
import wired.validation.errors
from wired.config import get_schema_settings
from wired.events import DispatchedEvent, EventDispatcher


@pytest.fixture(autouse=True)
def fresh_schema_settings():
    """Drop cached settings so environment overrides apply per test."""
    get_schema_settings.cache_clear()
    yield
    get_schema_settings.cache_clear()


@pytest.fixture
def events() -> EventDispatcher:
    return EventDispatcher()


@pytest.fixture
def received(events: EventDispatcher) -> list[DispatchedEvent]:
    """Collect every form-validation-error event delivered by ``events``."""
    collected: list[DispatchedEvent] = []
    events.subscribe("form-validation-error", collected.append)
    return collected
