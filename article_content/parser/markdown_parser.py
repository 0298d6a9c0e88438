"""Markdown → Document conversion used when saving articles.

Single pass over the source lines. At each cursor position the first
matching block rule wins, in this order: heading, horizontal rule, fenced
code, blockquote, unordered list, ordered list, paragraph. Parsing never
fails; text that matches nothing becomes a paragraph.
"""

from __future__ import annotations

import re
from pathlib import Path

from article_content.models.nodes import (
    DEFAULT_CODE_LANGUAGE,
    Document,
    Node,
    blockquote,
    bullet_list,
    code_block,
    heading,
    horizontal_rule,
    list_item,
    ordered_list,
    paragraph,
)

from .inline_parser import parse_inline

_HEADING = re.compile(r"^(#{1,6})\s+(.+)$")
_HORIZONTAL_RULE = re.compile(r"^(-{3,}|\*{3,}|_{3,})$")
_BULLET = re.compile(r"^[-*+]\s+")
_ORDERED = re.compile(r"^[0-9]+\.\s+")
_QUOTE_PREFIX = re.compile(r"^>\s?")
_FENCE = "```"


def parse_markdown(source: str) -> Document:
    """Convert Markdown source into a Document."""
    lines = source.replace("\r\n", "\n").split("\n")
    blocks: list[Node] = []
    i = 0

    while i < len(lines):
        line = lines[i]

        if not line.strip():
            i += 1
            continue

        heading_match = _HEADING.match(line)
        if heading_match:
            level = len(heading_match.group(1))
            blocks.append(heading(level, parse_inline(heading_match.group(2))))
            i += 1
            continue

        if _HORIZONTAL_RULE.match(line.strip()):
            blocks.append(horizontal_rule())
            i += 1
            continue

        if line.startswith(_FENCE):
            i = _consume_code_block(lines, i, blocks)
            continue

        if line.startswith(">"):
            i = _consume_blockquote(lines, i, blocks)
            continue

        if _BULLET.match(line):
            items, i = _consume_list_items(lines, i, _BULLET)
            blocks.append(bullet_list(items))
            continue

        if _ORDERED.match(line):
            items, i = _consume_list_items(lines, i, _ORDERED)
            blocks.append(ordered_list(items))
            continue

        i = _consume_paragraph(lines, i, blocks)

    return Document(content=tuple(blocks))


def load_markdown_path(path: str | Path) -> Document:
    """Read Markdown from disk and convert it to a Document."""
    content = Path(path).read_text(encoding="utf-8")
    return parse_markdown(content)


def _consume_code_block(lines: list[str], start: int, blocks: list[Node]) -> int:
    language = lines[start][len(_FENCE):].strip() or DEFAULT_CODE_LANGUAGE
    body: list[str] = []
    i = start + 1
    while i < len(lines) and not lines[i].startswith(_FENCE):
        body.append(lines[i])
        i += 1
    blocks.append(code_block("\n".join(body), language))
    # Skip the closing fence; an unterminated block simply ends the input.
    return i + 1


def _consume_blockquote(lines: list[str], start: int, blocks: list[Node]) -> int:
    quoted: list[str] = []
    i = start
    while i < len(lines) and lines[i].startswith(">"):
        quoted.append(_QUOTE_PREFIX.sub("", lines[i], count=1))
        i += 1
    blocks.append(blockquote([paragraph(parse_inline(" ".join(quoted)))]))
    return i


def _consume_list_items(lines: list[str], start: int, marker: re.Pattern[str]) -> tuple[list[Node], int]:
    items: list[Node] = []
    i = start
    while i < len(lines) and marker.match(lines[i]):
        item_text = marker.sub("", lines[i], count=1)
        items.append(list_item([paragraph(parse_inline(item_text))]))
        i += 1
    return items, i


def _consume_paragraph(lines: list[str], start: int, blocks: list[Node]) -> int:
    collected = [lines[start]]
    i = start + 1
    while i < len(lines) and lines[i].strip() and not _starts_block(lines[i]):
        collected.append(lines[i])
        i += 1
    blocks.append(paragraph(parse_inline(" ".join(collected))))
    return i


def _starts_block(line: str) -> bool:
    return bool(
        _HEADING.match(line)
        or line.startswith(">")
        or line.startswith(_FENCE)
        or _BULLET.match(line)
        or _ORDERED.match(line)
        or _HORIZONTAL_RULE.match(line.strip())
    )


__all__ = ["load_markdown_path", "parse_markdown"]
