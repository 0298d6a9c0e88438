from .article_repository import (
    ArticleNotFoundError,
    ArticleRepository,
    DuplicateSlugError,
    RepositoryError,
)

__all__ = [
    "ArticleNotFoundError",
    "ArticleRepository",
    "DuplicateSlugError",
    "RepositoryError",
]
