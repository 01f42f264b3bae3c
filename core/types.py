"""Core data types for attribute rendering.

Attributes are frozen dataclasses with attribute access. The rendering
layer never mutates an attribute it is handed; use Attribute.with_value()
to derive an updated copy.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, replace
from datetime import datetime
from types import MappingProxyType
from typing import Any

# Open discriminator identifying a value's kind ("boolean", "number", ...).
TypeTag = str

# Opaque display fragment produced by a resolver; only tested for truthiness.
Renderable = Any


class ValueType:
    """Well-known type tags.

    The set is open: hosts may attach any tag to an attribute, these are
    just the names the bundled value renderers understand.
    """

    BOOLEAN: TypeTag = "boolean"
    INTEGER: TypeTag = "integer"
    NUMBER: TypeTag = "number"
    STRING: TypeTag = "string"
    ARRAY: TypeTag = "array"
    OBJECT: TypeTag = "object"
    TIMESTAMP: TypeTag = "timestamp"  # epoch millis
    TIMESTAMP_ISO8601: TypeTag = "timestampISO8601"
    COLOUR_HEX: TypeTag = "colourHex"
    COLOUR_RGB: TypeTag = "colourRGB"
    PERCENTAGE: TypeTag = "percentage"
    TEMPERATURE: TypeTag = "temperature"
    PASSWORD: TypeTag = "password"

    @classmethod
    def all(cls) -> list[TypeTag]:
        """All well-known tags, in declaration order."""
        return [
            value
            for name, value in vars(cls).items()
            if name.isupper() and isinstance(value, str)
        ]


@dataclass(frozen=True)
class Attribute:
    """A typed, optionally named value to be displayed."""

    type: TypeTag
    value: Any = None
    name: str | None = None
    timestamp: datetime | None = None  # when the value was last set
    meta: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        # Own a read-only copy; callers keep their dict
        object.__setattr__(self, "meta", MappingProxyType(dict(self.meta)))

    def with_value(self, value: Any, timestamp: datetime | None = None) -> "Attribute":
        """Return a copy carrying a new value (and optionally a new timestamp)."""
        return replace(self, value=value, timestamp=timestamp or self.timestamp)

    def get_meta(self, key: str, default: Any = None) -> Any:
        """Look up a meta item by key."""
        return self.meta.get(key, default)

    @property
    def label(self) -> str:
        """Display label: the 'label' meta item, falling back to the name."""
        return self.get_meta("label") or self.name or ""


# A resolver maps an attribute to a renderable fragment, or None for no output.
Resolver = Callable[[Attribute], Renderable]
