"""Create the landing schema and seed the demo broker."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

CURRENT_DIR = Path(__file__).resolve().parent
PROJECT_ROOT = CURRENT_DIR.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from broker_landing.config import Settings
from broker_landing.db.engine import create_engine, create_session_factory
from broker_landing.db.schema import create_all
from broker_landing.startup import ensure_landing_page


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed the demo broker landing page.")
    parser.add_argument("--database-url", type=str, default=None, help="SQLAlchemy URL (overrides env).")
    parser.add_argument("--sqlite-path", type=Path, default=None, help="SQLite database file.")
    parser.add_argument("--slug", type=str, default=None, help="Broker slug to seed (defaults to the demo slug).")
    parser.add_argument("--quiet", action="store_true", help="Only log warnings and errors.")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.INFO if not args.quiet else logging.WARNING,
        format="[%(levelname)s] %(message)s",
    )
    logger = logging.getLogger("seed_demo")

    settings = Settings.from_env(dotenv_path=PROJECT_ROOT / ".env")
    database_url = args.database_url or settings.database_url
    sqlite_path = args.sqlite_path or settings.sqlite_path
    if database_url and sqlite_path:
        raise SystemExit("Provide either a database URL or a SQLite path, not both.")

    engine = create_engine(database_url, sqlite_path=sqlite_path)
    if engine.url.database in (None, "", ":memory:"):
        logger.warning("Seeding an in-memory database; data is discarded on exit")
    create_all(engine)
    session_factory = create_session_factory(engine)

    slug = args.slug or settings.demo_slug
    broker_id = ensure_landing_page(session_factory, slug=slug)
    logger.info("Broker %r ready (id=%s)", slug, broker_id)


if __name__ == "__main__":
    main()
