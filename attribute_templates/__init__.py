"""Attribute template resolution.

Provides the pluggable seam that turns an Attribute into display output.

Usage:
    from attribute_templates import TemplateRegistry
    from core import Attribute

    registry = TemplateRegistry()
    registry.set_resolver(lambda attr: "YES/NO" if attr.type == "boolean" else attr.value)
    registry.resolve(Attribute(type="number", value=42))  # 42

The default resolver is a dispatch table with a single fallback that returns
the attribute's value. Tag-specific renderers for the well-known value types
live in attribute_templates.renderers and are installed on request.
"""

from attribute_templates.errors import (
    IncompleteDispatchError,
    ResolverNotExtensibleError,
    TemplateError,
)
from attribute_templates.registry import (
    DispatchTable,
    Renderer,
    RendererDefinition,
    TemplateRegistry,
    default_resolver,
    get_registry,
    render_value,
    reset_registry,
    resolve,
    set_resolver,
)

__all__ = [
    # Main API
    "TemplateRegistry",
    "get_registry",
    "resolve",
    "set_resolver",
    "reset_registry",
    # Dispatch
    "DispatchTable",
    "Renderer",
    "RendererDefinition",
    "default_resolver",
    "render_value",
    # Errors
    "IncompleteDispatchError",
    "ResolverNotExtensibleError",
    "TemplateError",
]
