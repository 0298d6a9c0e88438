"""Renderer implementations and helpers."""

from .base import RenderOptions, Renderer
from .html import HtmlRenderer
from .markdown import MarkdownRenderer
from .text import extract_text

__all__ = ["HtmlRenderer", "MarkdownRenderer", "RenderOptions", "Renderer", "extract_text"]
