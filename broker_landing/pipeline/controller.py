"""Composition controller owning the loading / not-found / ready state machine."""

from __future__ import annotations

import logging
import threading
from typing import Callable

from broker_landing.config import DEFAULT_BRAND_NAME
from broker_landing.errors import EmptyResult, FetchError
from broker_landing.models.testimonial import Testimonial

from .fetcher import RowFetcher
from .normalizers import normalize_blocks, normalize_listings
from .states import CompositionState, DocumentHead, Loading, NotFound, Ready

logger = logging.getLogger(__name__)

StateListener = Callable[[CompositionState], None]


class CompositionController:
    """Run fetch -> normalize -> transition for one slug at a time.

    Each ``load`` takes a new sequence token; a completion is applied only if
    its token is still the latest issued, so a superseded load never
    overwrites newer state.
    """

    def __init__(
        self,
        fetcher: RowFetcher,
        *,
        head: DocumentHead | None = None,
        brand_name: str = DEFAULT_BRAND_NAME,
    ):
        self._fetcher = fetcher
        self.head = head if head is not None else DocumentHead()
        self._brand_name = brand_name
        self._lock = threading.Lock()
        self._token = 0
        self._state: CompositionState = Loading()
        self._listeners: list[StateListener] = []

    @property
    def state(self) -> CompositionState:
        return self._state

    @property
    def current_token(self) -> int:
        return self._token

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register ``listener`` for applied transitions; returns an unsubscribe callable."""
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    def load(self, slug: str) -> CompositionState:
        """Load ``slug`` from scratch, discarding any prior state."""
        with self._lock:
            self._token += 1
            token = self._token
            self._state = Loading(slug)
        self._notify(token)
        logger.info("Loading landing page for slug %r", slug)

        state = self._compose(slug)
        return self._apply(token, state)

    # Internal helpers -------------------------------------------------
    def _compose(self, slug: str) -> CompositionState:
        try:
            result = self._fetcher.fetch(slug)
            composition = normalize_blocks(result.landing_rows)
            listings = normalize_listings(result.listing_rows)
        except EmptyResult:
            logger.info("No landing page for slug %r", slug)
            return NotFound(slug)
        except FetchError as exc:
            logger.error("Landing query failed for slug %r: %s", slug, exc.cause)
            return NotFound(slug)
        except Exception:
            logger.exception("Unexpected failure composing slug %r", slug)
            return NotFound(slug)

        testimonials: tuple[Testimonial, ...] = ()
        return Ready(slug=slug, composition=composition, listings=listings, testimonials=testimonials)

    def _apply(self, token: int, state: CompositionState) -> CompositionState:
        with self._lock:
            if token != self._token:
                logger.debug("Discarding stale load %d (current %d)", token, self._token)
                return self._state
            self._state = state
            if isinstance(state, Ready):
                self.head.title = state.composition.seo_title or self._brand_name
                self.head.description = state.composition.seo_description
        self._notify(token)
        return state

    def _notify(self, token: int) -> None:
        """Deliver the current state to every listener while ``token`` is current.

        Listeners run outside the lock. A newer load takes over delivery, and a
        state that changed during a callback is delivered again, so each
        listener always ends on the controller's current state.
        """
        for listener in list(self._listeners):
            with self._lock:
                if token != self._token:
                    return
                state = self._state
            while True:
                listener(state)
                with self._lock:
                    if self._state is state:
                        break
                    state = self._state


__all__ = ["CompositionController", "StateListener"]
