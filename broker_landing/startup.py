"""Startup helpers for bootstrapping the demo tenant."""

from __future__ import annotations

import logging
from typing import Any, Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session, sessionmaker

from broker_landing.config import DEFAULT_DEMO_SLUG
from broker_landing.db.schema import DbBroker, DbLandingBlock, DbLandingPage, DbListing, DbListingImage

logger = logging.getLogger(__name__)

DEMO_BLOCKS: tuple[dict[str, Any], ...] = (
    {
        "type": "hero",
        "order": 0,
        "config": {
            "title": "Find the home that fits your life",
            "subtitle": "Personal guidance from search to keys",
            "image": "/static/demo/hero.jpg",
            "button_label": "See properties",
            "button_link": "#catalog",
        },
    },
    {
        "type": "about",
        "order": 1,
        "config": {
            "title": "About me",
            "body": "Fifteen years helping families buy and sell in the city.",
        },
    },
    {
        "type": "features",
        "order": 2,
        "config": {
            "title": "Why work with me",
            "items": [
                {"title": "Local knowledge", "description": "Every neighbourhood, street by street."},
                {"title": "Clear process", "description": "No surprises from offer to closing."},
            ],
        },
    },
    {"type": "catalog", "order": 3, "config": {}},
    {
        "type": "testimonials",
        "order": 4,
        "config": {
            "items": [
                {"id": 1, "text": "We closed in three weeks.", "name": "Marina S."},
                {"id": 2, "text": "Patient and precise.", "name": "Carlos R."},
            ]
        },
    },
    {
        "type": "cta",
        "order": 5,
        "config": {
            "title": "Ready to talk?",
            "button_label": "Message me",
            "button_link": "https://wa.me/5500000000000",
        },
    },
)

DEMO_LISTINGS: tuple[dict[str, Any], ...] = (
    {
        "title": "Garden apartment",
        "location": "Centro",
        "price": 450000.0,
        "main_image": "/static/demo/apartment.jpg",
        "is_featured": True,
        "images": ["/static/demo/apartment-1.jpg", "/static/demo/apartment-2.jpg"],
    },
    {
        "title": "Family house",
        "location": "Jardim Europa",
        "price": 1250000.0,
        "main_image": "/static/demo/house.jpg",
        "images": [],
    },
)


def ensure_landing_page(
    session_factory: sessionmaker[Session],
    *,
    slug: str = DEFAULT_DEMO_SLUG,
    name: str = "Demo Broker",
    seo_title: str = "Demo Broker | Real Estate",
    seo_description: str = "Homes selected by a local specialist.",
    blocks: Sequence[dict[str, Any]] = DEMO_BLOCKS,
    listings: Sequence[dict[str, Any]] = DEMO_LISTINGS,
) -> int:
    """Return the broker id for ``slug``, creating its page and listings if missing.

    An existing broker is left untouched, so repeated calls are idempotent.
    """
    with session_factory() as session:
        existing = session.scalars(select(DbBroker).where(DbBroker.slug == slug)).one_or_none()
        if existing is not None:
            logger.info("Broker %r already present; skipping seed", slug)
            return existing.id

        broker = DbBroker(slug=slug, name=name)
        session.add(broker)
        session.flush()

        page = DbLandingPage(
            broker_id=broker.id,
            is_active=True,
            seo_title=seo_title,
            seo_description=seo_description,
        )
        session.add(page)
        session.flush()

        for entry in blocks:
            session.add(
                DbLandingBlock(
                    page_id=page.id,
                    type=entry["type"],
                    order=entry.get("order", 0),
                    is_active=entry.get("active", True),
                    config=entry.get("config", {}),
                )
            )

        for entry in listings:
            listing = DbListing(
                broker_id=broker.id,
                title=entry["title"],
                location=entry.get("location", ""),
                price=entry.get("price", 0.0),
                main_image=entry.get("main_image"),
                is_active=entry.get("is_active", True),
                is_featured=entry.get("is_featured"),
            )
            session.add(listing)
            session.flush()
            for order, url in enumerate(entry.get("images", [])):
                session.add(DbListingImage(listing_id=listing.id, url=url, order=order))

        session.commit()
        logger.info("Seeded broker %r with %d blocks and %d listings", slug, len(blocks), len(listings))
        return broker.id


__all__ = ["DEMO_BLOCKS", "DEMO_LISTINGS", "ensure_landing_page"]
