"""Pydantic models for attribute payloads from the data layer.

Incoming attributes arrive as JSON-like mappings. AttributePayload validates
them and converts to the frozen core.Attribute the view consumes.
"""

from datetime import UTC, datetime
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from core import Attribute


class AttributePayload(BaseModel):
    """An attribute as delivered by the data layer."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    type: str = Field(..., min_length=1, description="Type tag (e.g. 'boolean')")
    value: Any = None
    name: str | None = None
    timestamp: datetime | None = Field(
        default=None,
        validation_alias=AliasChoices("timestamp", "valueTimestamp"),
        description="When the value was set; epoch millis or ISO 8601",
    )
    meta: dict[str, Any] = Field(default_factory=dict)

    @field_validator("timestamp", mode="before")
    @classmethod
    def _epoch_millis(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return datetime.fromtimestamp(value / 1000, tz=UTC)
        return value

    @field_validator("meta", mode="before")
    @classmethod
    def _meta_or_empty(cls, value: Any) -> Any:
        return {} if value is None else value

    def to_attribute(self) -> Attribute:
        return Attribute(
            type=self.type,
            value=self.value,
            name=self.name,
            timestamp=self.timestamp,
            meta=dict(self.meta),
        )


def parse_attribute(data: dict[str, Any] | None) -> Attribute | None:
    """Validate a payload mapping into an Attribute.

    Raises:
        pydantic.ValidationError: if the payload is malformed
    """
    if data is None:
        return None
    return AttributePayload.model_validate(data).to_attribute()
