"""Renderer interfaces and shared helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from article_content.models.nodes import Document, Node

if TYPE_CHECKING:  # pragma: no cover - type checking only
    from .context import RenderContext


@dataclass(slots=True)
class RenderOptions:
    default_heading_level: int = 2
    show_code_language: bool = True
    link_rel: str | None = "noopener noreferrer"
    # Children nested deeper than this are dropped so rendering stays within
    # the interpreter's recursion limit.
    max_depth: int = 100


class Renderer(Protocol):
    def render(
        self,
        node: Document | Node,
        *,
        options: RenderOptions | None = None,
    ) -> str:
        ...


class RendererComponent(Protocol):
    def render_node(self, node: Node, ctx: RenderContext) -> str:
        ...


def heading_level(node: Node, options: RenderOptions) -> int:
    """Return the stored heading level, or the configured default when invalid."""
    level = node.attr("level")
    if isinstance(level, bool) or not isinstance(level, int) or not 1 <= level <= 6:
        return options.default_heading_level
    return level


def code_text(node: Node) -> str:
    """Return the raw body of a code block; missing text renders as empty."""
    children = node.children
    if not children:
        return ""
    return children[0].text or ""
