"""Parsing helpers for author-facing Markdown."""

from .inline_parser import merge_text_nodes, parse_inline
from .markdown_parser import load_markdown_path, parse_markdown

__all__ = [
    "load_markdown_path",
    "merge_text_nodes",
    "parse_inline",
    "parse_markdown",
]
