"""Row fetcher issuing the landing and listings queries for a slug."""

from __future__ import annotations

import logging
import time
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Mapping, Protocol, Sequence

from broker_landing.errors import DegradedFetch, EmptyResult, FetchError
from broker_landing.models.listing import Listing

logger = logging.getLogger(__name__)


class RowSource(Protocol):
    """Store boundary: the two read-only per-slug queries."""

    def fetch_landing_rows(self, slug: str, *, ascending: bool = True) -> Sequence[Mapping[str, Any]]:
        ...

    def fetch_listing_rows(self, slug: str) -> Sequence[Listing]:
        ...


@dataclass(frozen=True, slots=True)
class FetchResult:
    slug: str
    landing_rows: tuple[Mapping[str, Any], ...]
    listing_rows: tuple[Listing, ...] | None = None
    listing_error: DegradedFetch | None = None

    @property
    def degraded(self) -> bool:
        return self.listing_error is not None


class RowFetcher(Protocol):
    def fetch(self, slug: str) -> FetchResult:
        ...


class StoreRowFetcher:
    """Issue both queries concurrently and wait for both before returning.

    Landing failures raise ``FetchError`` and an empty landing result raises
    ``EmptyResult``. Listing failures are logged and recorded on the result as
    ``DegradedFetch``.
    """

    def __init__(self, source: RowSource, *, timeout: float | None = None):
        self._source = source
        self._timeout = timeout

    def fetch(self, slug: str) -> FetchResult:
        pool = ThreadPoolExecutor(max_workers=2, thread_name_prefix="landing-fetch")
        try:
            landing_future = pool.submit(self._source.fetch_landing_rows, slug, ascending=True)
            listing_future = pool.submit(self._source.fetch_listing_rows, slug)
            deadline = time.monotonic() + self._timeout if self._timeout is not None else None
            listing_rows, listing_error = self._collect_listings(slug, listing_future, deadline)
            landing_rows = self._collect_landing(slug, landing_future, deadline)
        finally:
            # Timed-out queries are abandoned rather than awaited.
            pool.shutdown(wait=False, cancel_futures=True)

        if not landing_rows:
            raise EmptyResult(slug)
        return FetchResult(
            slug=slug,
            landing_rows=tuple(landing_rows),
            listing_rows=listing_rows,
            listing_error=listing_error,
        )

    def _collect_landing(self, slug: str, future: Future, deadline: float | None) -> Sequence[Mapping[str, Any]]:
        try:
            return future.result(timeout=_remaining(deadline)) or ()
        except Exception as exc:
            raise FetchError(slug, exc) from exc

    def _collect_listings(
        self, slug: str, future: Future, deadline: float | None
    ) -> tuple[tuple[Listing, ...] | None, DegradedFetch | None]:
        try:
            rows = future.result(timeout=_remaining(deadline))
        except Exception as exc:
            logger.warning("Listings unavailable for %r; continuing without catalog: %s", slug, exc)
            return None, DegradedFetch(slug, exc)
        return (tuple(rows) if rows is not None else None), None


def _remaining(deadline: float | None) -> float | None:
    """Seconds left before ``deadline``; both queries share one budget."""
    if deadline is None:
        return None
    return max(0.0, deadline - time.monotonic())


__all__ = ["FetchResult", "RowFetcher", "RowSource", "StoreRowFetcher"]
