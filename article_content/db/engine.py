"""Database engine helpers."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Mapping, Sequence

from sqlalchemy import create_engine as sa_create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

logger = logging.getLogger(__name__)

DEFAULT_SQLITE_URL = "sqlite+pysqlite:///:memory:"
DATABASE_URL_ENV_VARS: tuple[str, ...] = ("ARTICLE_CONTENT_DATABASE_URL", "DATABASE_URL")


def database_url_from_env(names: Sequence[str] = DATABASE_URL_ENV_VARS) -> str | None:
    """Return the first non-empty database URL found in ``names``."""
    for name in names:
        value = os.getenv(name)
        if value:
            logger.debug("Using database URL from %s", name)
            return value
    return None


def create_engine(
    connection_string: str | None = None,
    *,
    sqlite_path: str | Path | None = None,
    echo: bool = False,
    connect_args: Mapping[str, Any] | None = None,
) -> Engine:
    """Create the engine articles are stored with.

    ``connection_string`` and ``sqlite_path`` are mutually exclusive; with
    neither, articles live in an in-memory SQLite database for the lifetime
    of the process.
    """
    if connection_string and sqlite_path is not None:
        raise ValueError("Provide either 'connection_string' or 'sqlite_path', not both.")

    if connection_string:
        url = connection_string
    elif sqlite_path is not None:
        db_path = Path(sqlite_path).expanduser().resolve()
        url = f"sqlite+pysqlite:///{db_path.as_posix()}"
    else:
        url = DEFAULT_SQLITE_URL

    return sa_create_engine(url, echo=echo, future=True, connect_args=connect_args or {})


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Return the session factory the article repository opens one session per call from.

    Loaded rows stay readable after commit and close; article listings are
    hydrated into models once their session has ended.
    """
    return sessionmaker(bind=engine, class_=Session, expire_on_commit=False, future=True)
