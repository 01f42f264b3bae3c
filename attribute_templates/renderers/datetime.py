"""DateTime value renderers.

Timestamps are converted to the configured display timezone before
formatting.
"""

from datetime import UTC
from datetime import datetime as dt

from attribute_field.config import RenderSettings, get_user_timezone
from attribute_templates.renderers.catalog import value_renderer
from core import Attribute, ValueType


def _format_local(value: dt, settings: RenderSettings) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(get_user_timezone(settings)).strftime(settings.datetime_format)


@value_renderer(ValueType.TIMESTAMP, description="Epoch milliseconds as local date/time")
def render_timestamp(attribute: Attribute, settings: RenderSettings) -> str | None:
    if attribute.value is None:
        return None
    return _format_local(dt.fromtimestamp(int(attribute.value) / 1000, tz=UTC), settings)


@value_renderer(ValueType.TIMESTAMP_ISO8601, description="ISO 8601 string as local date/time")
def render_timestamp_iso(attribute: Attribute, settings: RenderSettings) -> str | None:
    if not attribute.value:
        return None
    # Naive strings are taken to be UTC
    return _format_local(dt.fromisoformat(attribute.value), settings)
