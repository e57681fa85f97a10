"""Database engine helpers."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from sqlalchemy import create_engine as sa_create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from broker_landing.config import Settings

DEFAULT_SQLITE_URL = "sqlite+pysqlite:///:memory:"


def create_engine(
    connection_string: str | None = None,
    *,
    sqlite_path: str | Path | None = None,
    echo: bool = False,
    connect_args: Mapping[str, Any] | None = None,
) -> Engine:
    """Create a SQLAlchemy engine for the landing store.

    Parameters
    ----------
    connection_string:
        Full SQLAlchemy URL. Mutually exclusive with ``sqlite_path``.
    sqlite_path:
        Filesystem path to a SQLite database file, expanded to an absolute path.
    echo:
        Enable SQLAlchemy engine echo logging.
    connect_args:
        Optional mapping passed through to ``sqlalchemy.create_engine``.

    With neither location given an in-memory SQLite database is used; it lives
    on a single shared connection so every session sees the same tables.
    """
    if connection_string and sqlite_path is not None:
        raise ValueError("Provide either 'connection_string' or 'sqlite_path', not both.")

    options: dict[str, Any] = {}
    if connection_string:
        url = connection_string
    elif sqlite_path is not None:
        db_path = Path(sqlite_path).expanduser().resolve()
        url = f"sqlite+pysqlite:///{db_path.as_posix()}"
    else:
        url = DEFAULT_SQLITE_URL
        from sqlalchemy.pool import StaticPool

        options["poolclass"] = StaticPool
        connect_args = {"check_same_thread": False, **(connect_args or {})}

    return sa_create_engine(url, echo=echo, connect_args=connect_args or {}, **options)


def create_engine_from_settings(settings: Settings, *, echo: bool = False) -> Engine:
    return create_engine(settings.database_url, sqlite_path=settings.sqlite_path, echo=echo)


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Return a configured session factory bound to the given engine."""
    return sessionmaker(bind=engine, class_=Session, expire_on_commit=False)
