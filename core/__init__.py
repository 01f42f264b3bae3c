"""Core types for attribute rendering.

All data structures are dataclasses with attribute access.
"""

from core.types import (
    Attribute,
    Renderable,
    Resolver,
    TypeTag,
    ValueType,
)

__all__ = [
    "Attribute",
    "Renderable",
    "Resolver",
    "TypeTag",
    "ValueType",
]
