"""Factory helpers for constructing the article store façade."""

from __future__ import annotations

from sqlalchemy.orm import Session, sessionmaker

from article_content.repositories.article_repository import ArticleRepository

from .article_store import ArticleStore


def create_article_store(session_factory: sessionmaker[Session]) -> ArticleStore:
    """Build an ArticleStore with the default repository and renderers."""
    return ArticleStore(ArticleRepository(session_factory))


__all__ = ["create_article_store"]
