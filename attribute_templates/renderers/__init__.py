"""Value renderers for the well-known type tags.

Each module in this package catalogues renderers using the
@value_renderer decorator. Renderers are grouped by value kind:

- scalars: boolean, integer, number, percentage, temperature, string, password
- structured: array, object
- datetime: timestamp, timestampISO8601
- colour: colourHex, colourRGB

Importing this package catalogues them; install_value_renderers() puts
them on a dispatch table. The default resolver does not use them.
"""

from attribute_templates.renderers.catalog import (
    ValueRendererDefinition,
    catalogued_tags,
    get_value_renderer,
    install_value_renderers,
    value_renderer,
)

# Import all renderer modules to trigger cataloguing (noqa: F401 for side-effect imports)
from attribute_templates.renderers import (  # noqa: F401
    colour,
    datetime,
    scalars,
    structured,
)

__all__ = [
    "ValueRendererDefinition",
    "catalogued_tags",
    "get_value_renderer",
    "install_value_renderers",
    "value_renderer",
]
