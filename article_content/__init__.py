"""Markdown article content: parsing, rendering and storage."""

__version__ = "0.1.0"

from .models import Document, Mark, Node  # noqa: E402
from .parser import parse_markdown  # noqa: E402
from .renderers import HtmlRenderer, MarkdownRenderer, RenderOptions  # noqa: E402

__all__ = [
    "__version__",
    "Document",
    "HtmlRenderer",
    "Mark",
    "MarkdownRenderer",
    "Node",
    "RenderOptions",
    "parse_markdown",
]
