from __future__ import annotations

import os
from collections.abc import Iterator
from typing import Any, Callable

import pytest
from sqlalchemy.engine import Engine

from broker_landing.db.engine import create_engine, create_session_factory
from broker_landing.db.schema import Base, create_all
from broker_landing.errors import EmptyResult
from broker_landing.pipeline.fetcher import FetchResult
from broker_landing.repositories.landing_repository import LandingRepository


@pytest.fixture(scope="session")
def postgres_url() -> str | None:
    """Return the Postgres test URL if provided via env."""
    return os.getenv("POSTGRES_TEST_URL") or os.getenv("DATABASE_URL")


@pytest.fixture
def engine(postgres_url: str | None, tmp_path) -> Iterator[Engine]:
    """Yield an engine targeting Postgres when configured; otherwise a SQLite file.

    A file database gives each fetcher thread its own connection.
    """
    engine = create_engine(postgres_url) if postgres_url else create_engine(sqlite_path=tmp_path / "landing.db")

    if engine.dialect.name == "sqlite":
        from sqlalchemy import event

        @event.listens_for(engine, "connect")
        def set_sqlite_pragma(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    create_all(engine)
    try:
        yield engine
    finally:
        with engine.begin() as connection:
            if engine.dialect.name == "sqlite":
                Base.metadata.drop_all(bind=connection)
            else:
                for table in reversed(Base.metadata.sorted_tables):
                    connection.execute(table.delete())
        engine.dispose()


@pytest.fixture
def session_factory(engine: Engine):
    return create_session_factory(engine)


@pytest.fixture
def repository(session_factory) -> LandingRepository:
    return LandingRepository(session_factory)


@pytest.fixture
def landing_row() -> Callable[..., dict[str, Any]]:
    """Build one denormalized landing row as the store view returns it."""

    def _factory(
        block_id,
        block_type="hero",
        *,
        order=0,
        active=True,
        config=None,
        page_id=1,
        slug="ana-souza",
        seo_title="Ana Souza | Imóveis",
        seo_description="Homes in Campinas",
    ) -> dict[str, Any]:
        return {
            "broker_slug": slug,
            "page_id": page_id,
            "seo_title": seo_title,
            "seo_description": seo_description,
            "block_id": block_id,
            "block_type": block_type,
            "block_order": order,
            "block_active": active,
            "block_config": config if config is not None else {},
        }

    return _factory


class FakeSource:
    """In-memory row source recording every query it receives."""

    def __init__(self, landing_rows=None, listing_rows=None, *, landing_error=None, listing_error=None):
        self.landing_rows = list(landing_rows or [])
        self.listing_rows = list(listing_rows or [])
        self.landing_error = landing_error
        self.listing_error = listing_error
        self.calls: list[tuple[str, str]] = []

    def fetch_landing_rows(self, slug, *, ascending=True):
        self.calls.append(("landing", slug))
        if self.landing_error is not None:
            raise self.landing_error
        return list(self.landing_rows)

    def fetch_listing_rows(self, slug):
        self.calls.append(("listings", slug))
        if self.listing_error is not None:
            raise self.listing_error
        return list(self.listing_rows)


class ScriptedFetcher:
    """Fetcher returning canned results per slug, with an optional hook per call."""

    def __init__(self, results=None, *, on_fetch=None):
        self.results = dict(results or {})
        self.on_fetch = on_fetch
        self.calls: list[str] = []

    def fetch(self, slug):
        self.calls.append(slug)
        if self.on_fetch is not None:
            self.on_fetch(slug)
        outcome = self.results.get(slug)
        if outcome is None:
            raise EmptyResult(slug)
        if isinstance(outcome, BaseException):
            raise outcome
        if isinstance(outcome, FetchResult):
            return outcome
        return FetchResult(slug=slug, landing_rows=tuple(outcome), listing_rows=())


@pytest.fixture
def fake_source_cls():
    return FakeSource


@pytest.fixture
def scripted_fetcher_cls():
    return ScriptedFetcher

