"""Renderer entry-point wiring HTML components."""

from __future__ import annotations

from dataclasses import dataclass

from article_content.renderers.base import RendererComponent
from article_content.renderers.context import ComponentRenderer

from .components import DEFAULT_COMPONENTS, GenericComponent


@dataclass(slots=True)
class HtmlRenderer(ComponentRenderer):
    block_separator = "\n"

    def default_components(self) -> dict[str, RendererComponent]:
        return dict(DEFAULT_COMPONENTS)

    def fallback_component(self) -> RendererComponent:
        return GenericComponent()


__all__ = ["HtmlRenderer"]
