"""Factory helpers for wiring the composition pipeline to the store."""

from __future__ import annotations

from sqlalchemy.orm import Session, sessionmaker

from broker_landing.config import Settings
from broker_landing.repositories.landing_repository import LandingRepository

from .controller import CompositionController
from .fetcher import StoreRowFetcher
from .navigator import PageNavigator
from .states import DocumentHead


def create_controller(
    session_factory: sessionmaker[Session],
    settings: Settings | None = None,
    *,
    head: DocumentHead | None = None,
) -> CompositionController:
    """Build a controller backed by the default SQLAlchemy repository."""
    settings = settings or Settings()
    fetcher = StoreRowFetcher(LandingRepository(session_factory), timeout=settings.query_timeout)
    return CompositionController(fetcher, head=head, brand_name=settings.brand_name)


def create_navigator(
    session_factory: sessionmaker[Session],
    settings: Settings | None = None,
    *,
    head: DocumentHead | None = None,
) -> PageNavigator:
    settings = settings or Settings()
    return PageNavigator(
        create_controller(session_factory, settings, head=head),
        admin_prefix=settings.admin_prefix,
        demo_slug=settings.demo_slug,
    )


__all__ = ["create_controller", "create_navigator"]
