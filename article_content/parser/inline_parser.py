"""Inline Markdown scanning into flat, marked text nodes.

Patterns are tried in a fixed priority order at every position: bold,
italic, inline code, link, strikethrough, then plain text. Changing the
order changes the output for ambiguous input such as ``**_x_**``.
"""

from __future__ import annotations

import re
from typing import Iterable

from article_content.models.nodes import MarkType, Node, NodeType, link_mark, mark, text

_BOLD = re.compile(r"(\*\*|__)(.+?)\1")
# Closing delimiter may not be followed by a letter (keeps snake_case_words intact).
_ITALIC = re.compile(r"(\*|_)([^*_]+?)\1(?![a-zA-Z])")
_CODE = re.compile(r"`([^`]+)`")
_LINK = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")
_STRIKE = re.compile(r"~~(.+?)~~")
_SPECIAL = re.compile(r"[*_`\[~]")


def parse_inline(source: str) -> tuple[Node, ...]:
    """Return canonical text nodes for an inline Markdown string."""
    return merge_text_nodes(_scan(source))


def _scan(source: str) -> list[Node]:
    nodes: list[Node] = []
    pos = 0
    end = len(source)
    # A "[" before this position closes on a bracket an earlier link attempt
    # already failed on, so it cannot start a link either.
    link_dead_until = 0

    while pos < end:
        match = _BOLD.match(source, pos)
        if match:
            nodes.append(text(match.group(2), [mark(MarkType.BOLD)]))
            pos = match.end()
            continue

        match = _ITALIC.match(source, pos)
        if match:
            nodes.append(text(match.group(2), [mark(MarkType.ITALIC)]))
            pos = match.end()
            continue

        match = _CODE.match(source, pos)
        if match:
            nodes.append(text(match.group(1), [mark(MarkType.CODE)]))
            pos = match.end()
            continue

        if pos >= link_dead_until:
            match = _LINK.match(source, pos)
            if match:
                nodes.append(text(match.group(1), [link_mark(match.group(2))]))
                pos = match.end()
                continue
            if source[pos] == "[":
                link_dead_until = _failed_link_horizon(source, pos)

        match = _STRIKE.match(source, pos)
        if match:
            nodes.append(text(match.group(1), [mark(MarkType.STRIKE)]))
            pos = match.end()
            continue

        special = _SPECIAL.search(source, pos)
        if special is None:
            nodes.append(text(source[pos:]))
            break
        if special.start() == pos:
            # Unmatched marker character is literal text.
            nodes.append(text(source[pos]))
            pos += 1
        else:
            nodes.append(text(source[pos:special.start()]))
            pos = special.start()

    return nodes


def _failed_link_horizon(source: str, start: int) -> int:
    """Return the position up to which no link can start after a failed match at ``start``."""
    close = source.find("]", start + 1)
    if close == -1:
        return len(source)
    if source.startswith("(", close + 1) and source.find(")", close + 2) == -1:
        # No closing parenthesis remains for any later link.
        return len(source)
    return close


def merge_text_nodes(nodes: Iterable[Node]) -> tuple[Node, ...]:
    """Merge adjacent text nodes whose mark sequences are equal."""
    merged: list[Node] = []
    for node in nodes:
        previous = merged[-1] if merged else None
        if (
            previous is not None
            and previous.type == NodeType.TEXT
            and node.type == NodeType.TEXT
            and previous.mark_set == node.mark_set
        ):
            merged[-1] = previous.model_copy(update={"text": (previous.text or "") + (node.text or "")})
        else:
            merged.append(node)
    return tuple(merged)


__all__ = ["merge_text_nodes", "parse_inline"]
