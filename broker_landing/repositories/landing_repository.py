"""SQLAlchemy-backed read queries for landing rows and listings."""

from __future__ import annotations

from collections import defaultdict
from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from broker_landing.db.schema import DbBroker, DbLandingBlock, DbLandingPage, DbListing, DbListingImage
from broker_landing.models.listing import Listing, ListingImage

LANDING_ROW_FIELDS = (
    "broker_slug",
    "page_id",
    "seo_title",
    "seo_description",
    "block_id",
    "block_type",
    "block_order",
    "block_active",
    "block_config",
)


class RepositoryError(RuntimeError):
    """Raised when the underlying store cannot answer a query."""


class LandingRepository:
    """Read-only repository answering the two per-slug page queries."""

    def __init__(self, session_factory: sessionmaker[Session]):
        self._session_factory = session_factory

    def fetch_landing_rows(self, slug: str, *, ascending: bool = True) -> list[dict[str, Any]]:
        """Return one denormalized row per block of the broker's active page.

        Page-level SEO fields are repeated on every row. Rows are ordered by
        block order (``ascending`` by default), ties by block id.
        """
        order_column = DbLandingBlock.order if ascending else DbLandingBlock.order.desc()
        stmt = (
            select(
                DbBroker.slug.label("broker_slug"),
                DbLandingPage.id.label("page_id"),
                DbLandingPage.seo_title.label("seo_title"),
                DbLandingPage.seo_description.label("seo_description"),
                DbLandingBlock.id.label("block_id"),
                DbLandingBlock.type.label("block_type"),
                DbLandingBlock.order.label("block_order"),
                DbLandingBlock.is_active.label("block_active"),
                DbLandingBlock.config.label("block_config"),
            )
            .join(DbLandingPage, DbLandingPage.broker_id == DbBroker.id)
            .join(DbLandingBlock, DbLandingBlock.page_id == DbLandingPage.id)
            .where(DbBroker.slug == slug, DbLandingPage.is_active.is_(True))
            .order_by(order_column, DbLandingBlock.id)
        )
        try:
            with self._session_factory() as session:
                return [dict(row) for row in session.execute(stmt).mappings()]
        except SQLAlchemyError as exc:
            raise RepositoryError(f"Landing rows query failed for slug {slug!r}") from exc

    def fetch_listing_rows(self, slug: str) -> list[Listing]:
        """Return every listing of the broker identified by ``slug``."""
        listing_stmt = (
            select(DbListing)
            .join(DbBroker, DbListing.broker_id == DbBroker.id)
            .where(DbBroker.slug == slug)
            .order_by(DbListing.id)
        )
        try:
            with self._session_factory() as session:
                listings = session.scalars(listing_stmt).all()
                galleries = self._load_galleries(session, [row.id for row in listings])
        except SQLAlchemyError as exc:
            raise RepositoryError(f"Listings query failed for slug {slug!r}") from exc
        return [self._to_listing(row, galleries.get(row.id, [])) for row in listings]

    # Internal helpers -------------------------------------------------
    def _load_galleries(self, session: Session, listing_ids: list[int]) -> dict[int, list[ListingImage]]:
        if not listing_ids:
            return {}
        stmt = (
            select(DbListingImage)
            .where(DbListingImage.listing_id.in_(listing_ids))
            .order_by(DbListingImage.listing_id, DbListingImage.order, DbListingImage.id)
        )
        galleries: dict[int, list[ListingImage]] = defaultdict(list)
        for image in session.scalars(stmt):
            galleries[image.listing_id].append(
                ListingImage(id=image.id, url=image.url, order=image.order)
            )
        return galleries

    @staticmethod
    def _to_listing(row: DbListing, images: list[ListingImage]) -> Listing:
        return Listing(
            id=row.id,
            main_image=row.main_image,
            title=row.title,
            location=row.location,
            price=row.price,
            active=row.is_active,
            featured=row.is_featured,
            images=tuple(images),
        )


__all__ = ["LANDING_ROW_FIELDS", "LandingRepository", "RepositoryError"]
