"""Small helpers for article metadata derived from titles and content."""

from __future__ import annotations

import math
import re

from article_content.models.nodes import Document
from article_content.renderers.text import extract_text

WORDS_PER_MINUTE = 200

_NON_ALPHANUMERIC = re.compile(r"[^a-z0-9]+")


def generate_slug(title: str) -> str:
    """Lowercase ``title`` and collapse everything else into single dashes."""
    return _NON_ALPHANUMERIC.sub("-", title.lower()).strip("-")


def truncate(value: str, length: int) -> str:
    if len(value) <= length:
        return value
    return value[:length].strip() + "..."


def calculate_reading_time(document: Document, *, words_per_minute: int = WORDS_PER_MINUTE) -> int:
    """Estimated minutes to read ``document``; never less than one."""
    if words_per_minute <= 0:
        raise ValueError("words_per_minute must be positive.")
    word_count = len(extract_text(document).split())
    return max(1, math.ceil(word_count / words_per_minute))


__all__ = ["WORDS_PER_MINUTE", "calculate_reading_time", "generate_slug", "truncate"]
