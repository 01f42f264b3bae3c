"""Value renderer catalogue and registration decorator.

Value renderers are registered with @value_renderer, which records them in
a module-level catalogue. Nothing here is installed into a resolver until
install_value_renderers() is called; the default resolver stays a plain
fallback.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from functools import partial

from attribute_field.config import RenderSettings, get_settings
from attribute_templates.errors import ResolverNotExtensibleError
from attribute_templates.registry import DispatchTable, TemplateRegistry
from core import Attribute, Renderable, TypeTag

logger = logging.getLogger(__name__)

# Type alias for value renderer functions
ValueRenderer = Callable[[Attribute, RenderSettings], Renderable]


@dataclass(frozen=True)
class ValueRendererDefinition:
    """A catalogued value renderer."""

    type_tag: TypeTag
    func: ValueRenderer
    description: str = ""


_catalog: dict[TypeTag, ValueRendererDefinition] = {}


def value_renderer(type_tag: TypeTag, description: str = "") -> Callable[[ValueRenderer], ValueRenderer]:
    """Decorator to catalogue a value renderer.

    Usage:
        @value_renderer(ValueType.BOOLEAN, description="On/Off label")
        def render_boolean(attribute: Attribute, settings: RenderSettings) -> str | None:
            ...
    """

    def decorator(func: ValueRenderer) -> ValueRenderer:
        _catalog[type_tag] = ValueRendererDefinition(
            type_tag=type_tag,
            func=func,
            description=description,
        )
        return func

    return decorator


def catalogued_tags() -> list[TypeTag]:
    """Get all type tags with a catalogued value renderer."""
    return sorted(_catalog)


def get_value_renderer(type_tag: TypeTag) -> ValueRendererDefinition | None:
    """Get a catalogued value renderer by type tag."""
    return _catalog.get(type_tag)


def install_value_renderers(
    target: DispatchTable | TemplateRegistry,
    settings: RenderSettings | None = None,
    only: list[TypeTag] | None = None,
) -> DispatchTable:
    """Register catalogued value renderers on a dispatch table.

    Args:
        target: Dispatch table, or a registry whose installed resolver is one
        settings: Display settings bound into each renderer (default: process settings)
        only: Restrict installation to these type tags

    Returns:
        The dispatch table the renderers were registered on

    Raises:
        ResolverNotExtensibleError: target is a registry without a dispatch table
    """
    if isinstance(target, TemplateRegistry):
        table = target.dispatch_table
        if table is None:
            raise ResolverNotExtensibleError(
                "Installed resolver is not a DispatchTable; cannot install value renderers"
            )
    else:
        table = target

    if settings is None:
        settings = get_settings()

    installed = 0
    for tag in catalogued_tags() if only is None else only:
        definition = _catalog.get(tag)
        if definition is None:
            logger.warning("[TEMPLATES] No value renderer catalogued for '%s', skipping", tag)
            continue
        table.register(tag, partial(definition.func, settings=settings), definition.description)
        installed += 1

    logger.info("[TEMPLATES] Installed %d value renderers", installed)
    return table
