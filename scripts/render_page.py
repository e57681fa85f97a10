"""Resolve a request path and print the composed landing page as Markdown."""

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
from broker_landing.pipeline import AdminView, DocumentHead, create_navigator
from broker_landing.renderers.markdown import MarkdownRenderer
from broker_landing.startup import ensure_landing_page


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render a broker landing page to Markdown.")
    parser.add_argument("path", nargs="?", default="/", help="Request path, e.g. /joao-silva.")
    parser.add_argument("--database-url", type=str, default=None, help="SQLAlchemy URL (overrides env).")
    parser.add_argument("--sqlite-path", type=Path, default=None, help="SQLite database file.")
    parser.add_argument(
        "--seed-demo",
        action="store_true",
        help="Seed the demo broker before rendering (useful with the in-memory default).",
    )
    parser.add_argument("--quiet", action="store_true", help="Only log warnings and errors.")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.INFO if not args.quiet else logging.WARNING,
        format="[%(levelname)s] %(message)s",
    )
    logger = logging.getLogger("render_page")

    settings = Settings.from_env(dotenv_path=PROJECT_ROOT / ".env")
    database_url = args.database_url or settings.database_url
    sqlite_path = args.sqlite_path or settings.sqlite_path
    if database_url and sqlite_path:
        raise SystemExit("Provide either a database URL or a SQLite path, not both.")

    engine = create_engine(database_url, sqlite_path=sqlite_path)
    create_all(engine)
    session_factory = create_session_factory(engine)
    if args.seed_demo:
        ensure_landing_page(session_factory, slug=settings.demo_slug)

    head = DocumentHead()
    navigator = create_navigator(session_factory, settings, head=head)
    view = navigator.navigate(args.path)
    if isinstance(view, AdminView):
        logger.info("%s is an administrative path; nothing to render", args.path)
        return

    renderer = MarkdownRenderer(brand_name=settings.brand_name)
    if head.title:
        logger.info("Title: %s", head.title)
    print(renderer.render_state(view))


if __name__ == "__main__":
    main()
