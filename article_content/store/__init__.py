"""Article store orchestration helpers."""

from .article_store import ArticleStore, ArticleStoreError
from .factory import create_article_store

__all__ = ["ArticleStore", "ArticleStoreError", "create_article_store"]
