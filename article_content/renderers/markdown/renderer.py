"""Renderer entry-point wiring Markdown components.

The output is the canonical Markdown form of a document: parsing it again
yields an equal document for everything the parser itself produces.
"""

from __future__ import annotations

from dataclasses import dataclass

from article_content.renderers.base import RendererComponent
from article_content.renderers.context import ComponentRenderer

from .components import DEFAULT_COMPONENTS, GenericComponent


@dataclass(slots=True)
class MarkdownRenderer(ComponentRenderer):
    block_separator = "\n\n"

    def default_components(self) -> dict[str, RendererComponent]:
        return dict(DEFAULT_COMPONENTS)

    def fallback_component(self) -> RendererComponent:
        return GenericComponent()


__all__ = ["MarkdownRenderer"]
