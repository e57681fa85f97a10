"""Shared NiceGUI app state (settings, session factory, renderer)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from sqlalchemy.orm import Session, sessionmaker

from broker_landing.config import Settings
from broker_landing.db.engine import create_engine, create_engine_from_settings, create_session_factory
from broker_landing.db.schema import create_all
from broker_landing.pipeline import DocumentHead, PageNavigator, create_navigator
from broker_landing.renderers.markdown import MarkdownRenderer
from broker_landing.startup import ensure_landing_page

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parents[2]
DOTENV_PATH = PROJECT_ROOT / ".env"
DB_PATH = Path(__file__).resolve().parent / "landing_demo.db"


@dataclass(slots=True)
class AppContext:
    settings: Settings
    session_factory: sessionmaker[Session]
    renderer: MarkdownRenderer

    def new_navigator(self, head: DocumentHead | None = None) -> PageNavigator:
        """Each client gets its own navigator; loads never share state."""
        return create_navigator(self.session_factory, self.settings, head=head)


_CONTEXT: Optional[AppContext] = None


def get_context() -> AppContext:
    """Return a singleton app context, seeding the demo tenant on first access."""

    global _CONTEXT
    if _CONTEXT is None:
        _CONTEXT = _bootstrap_context()
    return _CONTEXT


def _bootstrap_context() -> AppContext:
    settings = Settings.from_env(dotenv_path=DOTENV_PATH)
    if settings.database_url or settings.sqlite_path:
        engine = create_engine_from_settings(settings)
    else:
        engine = create_engine(sqlite_path=DB_PATH)
    create_all(engine)
    session_factory = create_session_factory(engine)
    ensure_landing_page(session_factory, slug=settings.demo_slug)
    logger.info("Landing app ready (demo slug %r)", settings.demo_slug)
    return AppContext(
        settings=settings,
        session_factory=session_factory,
        renderer=MarkdownRenderer(brand_name=settings.brand_name),
    )


__all__ = ["AppContext", "get_context"]
