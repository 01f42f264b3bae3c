"""Scalar value renderers: booleans, numbers, strings.

An attribute without a value renders to nothing.
"""

from attribute_field.config import RenderSettings
from attribute_templates.renderers.catalog import value_renderer
from core import Attribute, ValueType

PASSWORD_MASK = "••••••"

_TRUE_STRINGS = {"true", "1", "yes", "on"}
_FALSE_STRINGS = {"false", "0", "no", "off", ""}


def _format_number(value: float, settings: RenderSettings) -> str:
    return f"{float(value):.{settings.decimal_places}f}"


@value_renderer(ValueType.BOOLEAN, description="On/Off label (e.g., 'On')")
def render_boolean(attribute: Attribute, settings: RenderSettings) -> str | None:
    if attribute.value is None:
        return None
    value = attribute.value
    if isinstance(value, str):
        # Unparsed payload text; anything but a known literal is a fault
        lowered = value.strip().lower()
        if lowered not in _TRUE_STRINGS | _FALSE_STRINGS:
            raise ValueError(f"Invalid boolean: {value!r}")
        value = lowered in _TRUE_STRINGS
    return settings.true_label if value else settings.false_label


@value_renderer(ValueType.INTEGER, description="Whole number (e.g., '42')")
def render_integer(attribute: Attribute, settings: RenderSettings) -> str | None:
    if attribute.value is None:
        return None
    return str(int(attribute.value))


@value_renderer(ValueType.NUMBER, description="Fixed-precision number (e.g., '3.14')")
def render_number(attribute: Attribute, settings: RenderSettings) -> str | None:
    if attribute.value is None:
        return None
    return _format_number(attribute.value, settings)


@value_renderer(ValueType.PERCENTAGE, description="Rounded percentage (e.g., '75%')")
def render_percentage(attribute: Attribute, settings: RenderSettings) -> str | None:
    if attribute.value is None:
        return None
    return f"{round(float(attribute.value))}%"


@value_renderer(ValueType.TEMPERATURE, description="Temperature in Celsius (e.g., '21.50 °C')")
def render_temperature(attribute: Attribute, settings: RenderSettings) -> str | None:
    if attribute.value is None:
        return None
    return f"{_format_number(attribute.value, settings)} °C"


@value_renderer(ValueType.STRING, description="Text as-is")
def render_string(attribute: Attribute, settings: RenderSettings) -> str | None:
    if attribute.value is None:
        return None
    return str(attribute.value)


@value_renderer(ValueType.PASSWORD, description="Masked secret")
def render_password(attribute: Attribute, settings: RenderSettings) -> str | None:
    # Never echo the secret, not even its length
    if not attribute.value:
        return None
    return PASSWORD_MASK
