"""Component registry and rendering context shared by all renderers."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from article_content.models.nodes import Document, Node, NodeType

from .base import RenderOptions, Renderer, RendererComponent

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RenderContext:
    engine: ComponentRenderer
    options: RenderOptions
    depth: int = 0

    def render_node(self, node: Node) -> str:
        return self.engine.render_node(node, self)

    def render_children(self, node: Node) -> list[str]:
        if not node.children:
            return []
        if self.depth >= self.options.max_depth:
            logger.debug("Dropping children of %s nested below depth %d", node.type, self.options.max_depth)
            return []
        self.depth += 1
        try:
            return [self.render_node(child) for child in node.children]
        finally:
            self.depth -= 1



@dataclass(slots=True)
class ComponentRenderer(Renderer):
    """Walks a document, dispatching each node to the component for its type.

    Node types without a registered component go to the fallback component,
    which keeps unknown content renderable instead of failing.
    """

    _components: dict[str, RendererComponent] = field(default_factory=dict)
    _fallback_component: RendererComponent | None = None

    block_separator = ""

    def __post_init__(self) -> None:
        if not self._components:
            self._components = self.default_components()
        if self._fallback_component is None:
            self._fallback_component = self.fallback_component()

    def default_components(self) -> dict[str, RendererComponent]:  # pragma: no cover - abstract
        raise NotImplementedError

    def fallback_component(self) -> RendererComponent:  # pragma: no cover - abstract
        raise NotImplementedError

    def register(self, node_type: NodeType | str, component: RendererComponent) -> None:
        key = node_type.value if isinstance(node_type, NodeType) else node_type
        self._components[key] = component

    def render(
        self,
        node: Document | Node,
        *,
        options: RenderOptions | None = None,
    ) -> str:
        ctx = RenderContext(engine=self, options=options or RenderOptions())
        if isinstance(node, Document):
            return self.join_blocks([ctx.render_node(block) for block in node.content])
        return ctx.render_node(node)

    def render_node(self, node: Node, ctx: RenderContext) -> str:
        component = self._components.get(node.type, self._fallback_component)
        assert component is not None, "Fallback component must be configured"
        return component.render_node(node, ctx)

    def join_blocks(self, sections: list[str]) -> str:
        return self.block_separator.join(section for section in sections if section)


__all__ = ["ComponentRenderer", "RenderContext"]
