from __future__ import annotations

import os
from collections.abc import Iterator

import pytest
from sqlalchemy.engine import Engine

from article_content.db.engine import create_engine, create_session_factory
from article_content.db.schema import Base, DbArticle, create_all
from article_content.repositories.article_repository import ArticleRepository
from article_content.store import ArticleStore, create_article_store


@pytest.fixture(scope="session")
def database_url() -> str | None:
    """Return an external test database URL if provided via env."""
    return os.getenv("ARTICLE_CONTENT_TEST_DATABASE_URL")


@pytest.fixture
def engine(database_url: str | None) -> Iterator[Engine]:
    """Yield an engine targeting the configured database; otherwise SQLite in-memory."""
    engine = create_engine(database_url) if database_url else create_engine()
    create_all(engine)
    try:
        yield engine
    finally:
        with engine.begin() as connection:
            if engine.dialect.name == "sqlite":
                Base.metadata.drop_all(bind=connection)
            else:
                connection.execute(DbArticle.__table__.delete())


@pytest.fixture
def session_factory(engine: Engine):
    return create_session_factory(engine)


@pytest.fixture
def repository(session_factory) -> ArticleRepository:
    return ArticleRepository(session_factory)


@pytest.fixture
def article_store(session_factory) -> ArticleStore:
    return create_article_store(session_factory)
