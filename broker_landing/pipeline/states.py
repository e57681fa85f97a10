"""Presentation states of a landing page load."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from broker_landing.models.listing import Listing
from broker_landing.models.page import PageComposition
from broker_landing.models.testimonial import Testimonial


@dataclass(frozen=True, slots=True)
class Loading:
    slug: str | None = None


@dataclass(frozen=True, slots=True)
class NotFound:
    slug: str | None = None


@dataclass(frozen=True, slots=True)
class Ready:
    slug: str
    composition: PageComposition
    listings: tuple[Listing, ...] = ()
    testimonials: tuple[Testimonial, ...] = ()


CompositionState = Union[Loading, NotFound, Ready]


@dataclass(slots=True)
class DocumentHead:
    """Document-level strings written once a page becomes ready."""

    title: str = ""
    description: str = ""


__all__ = ["CompositionState", "DocumentHead", "Loading", "NotFound", "Ready"]
