"""Colour value renderers: everything is shown as '#RRGGBB'."""

import re

from attribute_field.config import RenderSettings
from attribute_templates.renderers.catalog import value_renderer
from core import Attribute, ValueType

_HEX_PATTERN = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


@value_renderer(ValueType.COLOUR_HEX, description="Normalised hex colour (e.g., '#FF8800')")
def render_colour_hex(attribute: Attribute, settings: RenderSettings) -> str | None:
    if attribute.value is None or attribute.value == "":
        return None
    match = None
    if isinstance(attribute.value, str):
        match = _HEX_PATTERN.match(attribute.value.strip())
    if not match:
        raise ValueError(f"Invalid hex colour: {attribute.value!r}")
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    return f"#{digits.upper()}"


@value_renderer(ValueType.COLOUR_RGB, description="RGB triple as hex colour (e.g., '#FF8800')")
def render_colour_rgb(attribute: Attribute, settings: RenderSettings) -> str | None:
    if attribute.value is None:
        return None
    channels = list(attribute.value)
    if len(channels) != 3 or any(not 0 <= int(c) <= 255 for c in channels):
        raise ValueError(f"Invalid RGB colour: {attribute.value!r}")
    return "#" + "".join(f"{int(c):02X}" for c in channels)
