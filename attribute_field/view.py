"""Attribute view: the display element for a single attribute.

The view owns one optional attribute and, on every render pass, asks its
template registry to resolve it. Re-render scheduling belongs to the host
UI framework; the view only notifies it through `on_invalidate` whenever
the attribute is assigned.
"""

import logging
from collections.abc import Callable

from attribute_templates.registry import TemplateRegistry, get_registry
from core import Attribute, Renderable

logger = logging.getLogger(__name__)

# Visible output when nothing resolves
EMPTY = ""


class AttributeView:
    """Renders one attribute through a TemplateRegistry.

    Args:
        attribute: Initial attribute (None shows nothing)
        registry: Registry to resolve with; None uses the shared registry,
            looked up on each render
        on_invalidate: Host hook called with the view after each assignment
    """

    def __init__(
        self,
        attribute: Attribute | None = None,
        *,
        registry: TemplateRegistry | None = None,
        on_invalidate: Callable[["AttributeView"], None] | None = None,
    ):
        self._attribute = attribute
        self._registry = registry
        self.on_invalidate = on_invalidate

    def __repr__(self) -> str:
        return f"AttributeView(attribute={self._attribute!r})"

    @property
    def attribute(self) -> Attribute | None:
        return self._attribute

    @attribute.setter
    def attribute(self, attribute: Attribute | None) -> None:
        self._attribute = attribute
        self.request_update()

    @property
    def registry(self) -> TemplateRegistry:
        """The injected registry, or the shared one."""
        return self._registry if self._registry is not None else get_registry()

    def request_update(self) -> None:
        """Ask the host to schedule a re-render."""
        if self.on_invalidate is not None:
            self.on_invalidate(self)

    def render(self) -> Renderable:
        """Resolve the current attribute; EMPTY when there is nothing to show."""
        rendered = self.registry.resolve(self._attribute)
        if rendered is None:
            logger.debug("[VIEW] Nothing to render for %r", self._attribute)
            return EMPTY
        return rendered
