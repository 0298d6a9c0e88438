"""Database engine and schema helpers."""

from .engine import (
    DATABASE_URL_ENV_VARS,
    DEFAULT_SQLITE_URL,
    create_engine,
    create_session_factory,
    database_url_from_env,
)
from .schema import Base, DbArticle, create_all

__all__ = [
    "Base",
    "DATABASE_URL_ENV_VARS",
    "DEFAULT_SQLITE_URL",
    "DbArticle",
    "create_all",
    "create_engine",
    "create_session_factory",
    "database_url_from_env",
]
