"""Attribute field - displays one attribute through the template registry."""

from attribute_field.config import RenderSettings, get_settings, load_settings
from attribute_field.models import AttributePayload, parse_attribute
from attribute_field.view import EMPTY, AttributeView

__all__ = [
    "EMPTY",
    "AttributePayload",
    "AttributeView",
    "RenderSettings",
    "get_settings",
    "load_settings",
    "parse_attribute",
]
