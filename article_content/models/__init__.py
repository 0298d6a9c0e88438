"""Document and article model exports."""

from .article import Article
from .nodes import (
    DEFAULT_CODE_LANGUAGE,
    DOCUMENT_TYPE,
    Document,
    Mark,
    MarkType,
    Node,
    NodeType,
)

__all__ = [
    "Article",
    "DEFAULT_CODE_LANGUAGE",
    "DOCUMENT_TYPE",
    "Document",
    "Mark",
    "MarkType",
    "Node",
    "NodeType",
]
