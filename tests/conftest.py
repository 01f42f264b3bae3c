"""Shared fixtures: isolated registries and settings per test."""

import os

import pytest

from attribute_field.config import RenderSettings, reset_settings
from attribute_templates import TemplateRegistry, reset_registry


@pytest.fixture(autouse=True)
def _reset_shared_state(monkeypatch):
    """Each test starts with a fresh shared registry and no cached settings."""
    for key in list(os.environ):
        if key.startswith("ATTRFIELD_"):
            monkeypatch.delenv(key)
    reset_registry()
    reset_settings()
    yield
    reset_registry()
    reset_settings()


@pytest.fixture
def registry():
    """A registry with the default resolver installed."""
    return TemplateRegistry()


@pytest.fixture
def settings():
    return RenderSettings(timezone="Europe/Amsterdam")
