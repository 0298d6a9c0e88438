"""Article store: author Markdown in, stored documents and rendered HTML out."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable
from uuid import UUID, uuid4

from article_content.models.article import Article
from article_content.parser import parse_markdown
from article_content.renderers import HtmlRenderer, MarkdownRenderer, RenderOptions, extract_text
from article_content.repositories.article_repository import ArticleNotFoundError, ArticleRepository
from article_content.utils import calculate_reading_time, generate_slug, truncate

logger = logging.getLogger(__name__)

EXCERPT_LENGTH = 160


class ArticleStoreError(RuntimeError):
    """Raised when ArticleStore operations encounter invalid input or state."""


class ArticleStore:
    """Thin façade that ties parsing, persistence and rendering together."""

    def __init__(
        self,
        repository: ArticleRepository,
        *,
        html_renderer: HtmlRenderer | None = None,
        markdown_renderer: MarkdownRenderer | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        """Internal constructor; prefer ``create_article_store`` for public use."""
        self._repository = repository
        self._html_renderer = html_renderer or HtmlRenderer()
        self._markdown_renderer = markdown_renderer or MarkdownRenderer()
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    # ------------------------------------------------------------------ Queries
    def get_article(self, slug: str) -> Article:
        article = self._repository.get_by_slug(slug)
        if article is None:
            raise ArticleNotFoundError(f"Article {slug!r} not found.")
        return article

    def list_articles(
        self,
        *,
        published_only: bool = False,
        category: str | None = None,
        limit: int | None = None,
    ) -> list[Article]:
        return self._repository.list_articles(
            published_only=published_only,
            category=category,
            limit=limit,
        )

    def render_article(self, slug: str, *, options: RenderOptions | None = None) -> str:
        """Return the stored document of ``slug`` rendered as HTML."""
        return self._html_renderer.render(self.get_article(slug).content, options=options)

    def markdown_source(self, slug: str) -> str:
        """Return canonical Markdown for editing an existing article."""
        return self._markdown_renderer.render(self.get_article(slug).content)

    # ----------------------------------------------------------- Mutating ops
    def save_markdown(
        self,
        title: str,
        markdown: str,
        *,
        slug: str | None = None,
        excerpt: str | None = None,
        category: str | None = None,
        published: bool = False,
        featured: bool = False,
        reading_time: int | None = None,
        article_id: UUID | None = None,
    ) -> Article:
        """Parse ``markdown`` and create or replace the article under its slug.

        With ``article_id`` the article with that id is replaced, so it can be
        given a new slug without losing its creation and publication times.

        Edits always re-parse the full source; stored trees are never patched.
        """
        resolved_slug = slug or generate_slug(title)
        if not resolved_slug:
            raise ArticleStoreError(f"Cannot derive a slug from title {title!r}.")

        document = parse_markdown(markdown)
        existing = self._repository.get_article(article_id) if article_id else None
        if existing is None:
            existing = self._repository.get_by_slug(resolved_slug)
        now = self._clock()

        published_at = None
        if published:
            published_at = existing.published_at if existing and existing.published_at else now

        article = Article(
            id=article_id or (existing.id if existing else uuid4()),
            slug=resolved_slug,
            title=title,
            excerpt=excerpt or truncate(extract_text(document), EXCERPT_LENGTH) or None,
            category=category,
            reading_time=reading_time or calculate_reading_time(document),
            published=published,
            featured=featured,
            published_at=published_at,
            content=document,
            created_time=existing.created_time if existing else now,
            last_edited_time=now,
        )
        self._repository.upsert_article(article)
        logger.info(
            "%s article %s with %d blocks",
            "Updated" if existing else "Created",
            resolved_slug,
            len(document.content),
        )
        return article

    def delete_article(self, slug: str) -> None:
        article = self.get_article(slug)
        self._repository.delete_article(article.id)
        logger.info("Deleted article %s", slug)


__all__ = ["ArticleStore", "ArticleStoreError", "EXCERPT_LENGTH"]
