"""Template registry and type-tag dispatch table.

The registry holds exactly one resolver: a callable mapping an Attribute to
a renderable fragment. Installing a resolver discards the previous one;
there is no chaining. The default resolver is a DispatchTable with only a
fallback entry, which returns the attribute's value unchanged whatever its
type tag. Hosts customise rendering either by registering tag-specific
renderers on that table or by installing a replacement resolver.
"""

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from attribute_templates.errors import IncompleteDispatchError, ResolverNotExtensibleError
from core import Attribute, Renderable, Resolver, TypeTag

logger = logging.getLogger(__name__)

# Type alias for tag-specific renderer functions
Renderer = Callable[[Attribute], Renderable]


def render_value(attribute: Attribute) -> Renderable:
    """Fallback renderer: the attribute's value, unchanged."""
    return attribute.value


@dataclass(frozen=True)
class RendererDefinition:
    """A renderer registered for one type tag."""

    type_tag: TypeTag
    renderer: Renderer
    description: str = ""


class DispatchTable:
    """Mapping from type tag to renderer, with an explicit fallback.

    A DispatchTable is itself a resolver: calling it with an attribute looks
    up the renderer for attribute.type and falls back to `fallback` for
    unknown tags. A fallback of None means unknown tags produce no output.
    """

    def __init__(self, fallback: Renderer | None = render_value):
        self.fallback = fallback
        self._renderers: dict[TypeTag, RendererDefinition] = {}

    def __call__(self, attribute: Attribute) -> Renderable:
        definition = self._renderers.get(attribute.type)
        if definition is not None:
            return definition.renderer(attribute)
        if self.fallback is None:
            return None
        return self.fallback(attribute)

    def __contains__(self, type_tag: object) -> bool:
        return type_tag in self._renderers

    def __len__(self) -> int:
        return len(self._renderers)

    def __repr__(self) -> str:
        return f"DispatchTable(tags={self.type_tags()!r})"

    def register(self, type_tag: TypeTag, renderer: Renderer, description: str = "") -> None:
        """Register (or replace) the renderer for a type tag."""
        if type_tag in self._renderers:
            logger.warning("[TEMPLATES] Renderer for '%s' already registered, overwriting", type_tag)

        self._renderers[type_tag] = RendererDefinition(
            type_tag=type_tag,
            renderer=renderer,
            description=description,
        )
        logger.debug("[TEMPLATES] Registered renderer: %s", type_tag)

    def unregister(self, type_tag: TypeTag) -> bool:
        """Remove the renderer for a type tag."""
        if type_tag in self._renderers:
            del self._renderers[type_tag]
            return True
        return False

    def get(self, type_tag: TypeTag) -> RendererDefinition | None:
        """Get the renderer definition for a type tag."""
        return self._renderers.get(type_tag)

    def type_tags(self) -> list[TypeTag]:
        """Get all type tags with a dedicated renderer."""
        return sorted(self._renderers)

    def require(self, type_tags: Iterable[TypeTag]) -> None:
        """Check that every tag of a closed tag set has a dedicated renderer.

        Raises:
            IncompleteDispatchError: listing the tags left to the fallback
        """
        missing = [tag for tag in set(type_tags) if tag not in self._renderers]
        if missing:
            raise IncompleteDispatchError(missing)

    def copy(self) -> "DispatchTable":
        """Shallow copy sharing renderers but not registrations."""
        table = DispatchTable(fallback=self.fallback)
        table._renderers = dict(self._renderers)
        return table

    def extend(self, other: "DispatchTable") -> "DispatchTable":
        """Return a new table with `other`'s renderers layered over this one's.

        The fallback is kept from this table. Neither source is modified.
        """
        table = self.copy()
        table._renderers.update(other._renderers)
        return table

    def to_summary(self) -> dict[str, Any]:
        """Describe the table for diagnostics."""
        return {
            "total_renderers": len(self._renderers),
            "has_fallback": self.fallback is not None,
            "renderers": [
                {"type": d.type_tag, "description": d.description}
                for d in sorted(self._renderers.values(), key=lambda d: d.type_tag)
            ],
        }


def default_resolver() -> DispatchTable:
    """Build the default resolver: a fallback-only dispatch table."""
    return DispatchTable(fallback=render_value)


class TemplateRegistry:
    """Holder of the single active resolver.

    Construct one at application wiring time and hand it to every view that
    needs it; get_registry() provides a shared instance for hosts that do
    not wire explicitly.

    Usage:
        registry = TemplateRegistry()

        @registry.renderer("boolean", description="Yes/No label")
        def render_boolean(attribute):
            return "Yes" if attribute.value else "No"

        registry.resolve(Attribute(type="boolean", value=True))  # "Yes"
    """

    def __init__(self, resolver: Resolver | None = None):
        self._resolver: Resolver | None = resolver if resolver is not None else default_resolver()

    @property
    def resolver(self) -> Resolver | None:
        """The installed resolver."""
        return self._resolver

    @property
    def dispatch_table(self) -> DispatchTable | None:
        """The installed resolver if it is a dispatch table, else None."""
        if isinstance(self._resolver, DispatchTable):
            return self._resolver
        return None

    def set_resolver(self, resolver: Resolver | None) -> None:
        """Replace the installed resolver. Passing None uninstalls it."""
        if resolver is not None and not callable(resolver):
            raise TypeError(f"Resolver must be callable, got {type(resolver).__name__}")

        self._resolver = resolver
        logger.info(
            "[TEMPLATES] Resolver replaced: %s",
            getattr(resolver, "__qualname__", repr(resolver)),
        )

    def resolve(self, attribute: Attribute | None) -> Renderable | None:
        """Resolve an attribute to a renderable fragment.

        Returns None when there is no attribute, no resolver, or the
        resolver's output is falsy. Resolver exceptions propagate.
        """
        if attribute is None or self._resolver is None:
            return None

        rendered = self._resolver(attribute)
        if rendered:
            return rendered

        logger.debug("[TEMPLATES] No output for attribute %s (type=%s)", attribute.name, attribute.type)
        return None

    def renderer(self, type_tag: TypeTag, description: str = "") -> Callable[[Renderer], Renderer]:
        """Decorator registering a renderer on the installed dispatch table.

        Raises:
            ResolverNotExtensibleError: the installed resolver is not a DispatchTable
                when the function is decorated
        """

        def decorator(func: Renderer) -> Renderer:
            # Table installed at decoration time, not at factory time
            table = self.dispatch_table
            if table is None:
                raise ResolverNotExtensibleError(
                    "Installed resolver is not a DispatchTable; use set_resolver() to replace it"
                )
            table.register(type_tag, func, description)
            return func

        return decorator


# Global registry instance
_registry: TemplateRegistry | None = None


def get_registry() -> TemplateRegistry:
    """Get the shared registry, creating it with the default resolver."""
    global _registry
    if _registry is None:
        _registry = TemplateRegistry()
    return _registry


def reset_registry() -> None:
    """Drop the shared registry (for testing)."""
    global _registry
    _registry = None


def set_resolver(resolver: Resolver | None) -> None:
    """Replace the resolver of the shared registry."""
    get_registry().set_resolver(resolver)


def resolve(attribute: Attribute | None) -> Renderable | None:
    """Resolve an attribute using the shared registry."""
    return get_registry().resolve(attribute)
