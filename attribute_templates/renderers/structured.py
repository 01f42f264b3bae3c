"""Structured value renderers: arrays and objects, flattened to one line."""

from attribute_field.config import RenderSettings
from attribute_templates.renderers.catalog import value_renderer
from core import Attribute, ValueType


@value_renderer(ValueType.ARRAY, description="Comma-separated items (e.g., 'a, b, c')")
def render_array(attribute: Attribute, settings: RenderSettings) -> str | None:
    if attribute.value is None:
        return None
    return ", ".join(str(item) for item in attribute.value)


@value_renderer(ValueType.OBJECT, description="Key/value pairs (e.g., 'lat: 51.5, lng: 0.1')")
def render_object(attribute: Attribute, settings: RenderSettings) -> str | None:
    if attribute.value is None:
        return None
    return ", ".join(f"{key}: {value}" for key, value in attribute.value.items())
