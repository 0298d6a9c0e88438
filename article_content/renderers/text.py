"""Plain-text extraction used for reading time, excerpts and search."""

from __future__ import annotations

from article_content.models.nodes import Document, Node


def extract_text(document: Document | Node | None) -> str:
    """Return the document's text leaves joined with single spaces."""
    if document is None:
        return ""
    if isinstance(document, Document):
        return " ".join(_node_text(block) for block in document.content).strip()
    return _node_text(document).strip()


def _node_text(node: Node) -> str:
    if node.text:
        return node.text
    if node.content:
        return " ".join(_node_text(child) for child in node.content)
    return ""


__all__ = ["extract_text"]
