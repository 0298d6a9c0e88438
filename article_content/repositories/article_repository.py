"""SQLAlchemy-backed repository for Article models."""

from __future__ import annotations

import logging
from typing import Any
from uuid import UUID

from sqlalchemy.orm import Session, sessionmaker

from article_content.db.schema import DbArticle
from article_content.models.article import Article
from article_content.models.nodes import Document

logger = logging.getLogger(__name__)


class RepositoryError(RuntimeError):
    """Base class for repository-level errors."""


class ArticleNotFoundError(RepositoryError):
    """Raised when an article cannot be found for a requested operation."""


class DuplicateSlugError(RepositoryError):
    """Raised when a slug is already taken by a different article."""


class ArticleRepository:
    """Repository that persists and hydrates Article models from the database.

    The document tree is written as its JSON shape and read back unchanged;
    the repository never re-parses or rewrites content.
    """

    def __init__(self, session_factory: sessionmaker[Session]):
        self._session_factory = session_factory

    def get_article(self, article_id: UUID) -> Article | None:
        with self._session_factory() as session:
            row = session.get(DbArticle, str(article_id))
            return self._to_model(row) if row is not None else None

    def get_by_slug(self, slug: str) -> Article | None:
        with self._session_factory() as session:
            row = session.query(DbArticle).filter(DbArticle.slug == slug).one_or_none()
            return self._to_model(row) if row is not None else None

    def list_articles(
        self,
        *,
        published_only: bool = False,
        category: str | None = None,
        limit: int | None = None,
    ) -> list[Article]:
        """Return articles, newest first."""
        with self._session_factory() as session:
            query = session.query(DbArticle)
            if published_only:
                query = query.filter(DbArticle.published.is_(True))
            if category is not None:
                query = query.filter(DbArticle.category == category)
            query = query.order_by(DbArticle.created_time.desc(), DbArticle.slug)
            if limit is not None:
                query = query.limit(limit)
            rows = query.all()
        return [self._to_model(row) for row in rows]

    def upsert_article(self, article: Article) -> None:
        """Insert ``article`` or replace the stored row with the same id."""
        with self._session_factory() as session:
            clash = (
                session.query(DbArticle)
                .filter(DbArticle.slug == article.slug, DbArticle.id != str(article.id))
                .one_or_none()
            )
            if clash is not None:
                raise DuplicateSlugError(f"Slug {article.slug!r} is already used by article {clash.id}.")

            payload = self._to_record(article)
            row = session.get(DbArticle, payload["id"])
            if row is None:
                session.add(DbArticle(**payload))
                logger.debug("Inserted article %s (%s)", article.id, article.slug)
            else:
                for key, value in payload.items():
                    setattr(row, key, value)
                logger.debug("Updated article %s (%s)", article.id, article.slug)
            session.commit()

    def delete_article(self, article_id: UUID) -> None:
        with self._session_factory() as session:
            row = session.get(DbArticle, str(article_id))
            if row is None:
                raise ArticleNotFoundError(f"Article {article_id} not found.")
            session.delete(row)
            session.commit()
        logger.debug("Deleted article %s", article_id)

    # ------------------------------------------------------------------ Mapping
    @staticmethod
    def _to_record(article: Article) -> dict[str, Any]:
        return {
            "id": str(article.id),
            "slug": article.slug,
            "title": article.title,
            "excerpt": article.excerpt,
            "category": article.category,
            "reading_time": article.reading_time,
            "published": article.published,
            "featured": article.featured,
            "published_at": article.published_at,
            "content": article.content.to_json(),
            "created_time": article.created_time,
            "last_edited_time": article.last_edited_time,
        }

    @staticmethod
    def _to_model(row: DbArticle) -> Article:
        return Article(
            id=UUID(row.id),
            slug=row.slug,
            title=row.title,
            excerpt=row.excerpt,
            category=row.category,
            reading_time=row.reading_time,
            published=row.published,
            featured=row.featured,
            published_at=row.published_at,
            content=Document.from_json(row.content),
            created_time=row.created_time,
            last_edited_time=row.last_edited_time,
        )


__all__ = [
    "ArticleNotFoundError",
    "ArticleRepository",
    "DuplicateSlugError",
    "RepositoryError",
]
