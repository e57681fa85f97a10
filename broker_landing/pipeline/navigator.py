"""Route-level entry point: admin bypass and once-per-slug loading."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

from broker_landing.config import DEFAULT_ADMIN_PREFIX, DEFAULT_DEMO_SLUG
from broker_landing.routing import Route, resolve_route

from .controller import CompositionController
from .states import CompositionState

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AdminView:
    """Marker returned for administrative paths; the admin surface owns them."""

    route: Route


PageView = Union[AdminView, CompositionState]


class PageNavigator:
    """Resolve paths and drive the controller, one full load per slug change."""

    def __init__(
        self,
        controller: CompositionController,
        *,
        admin_prefix: str = DEFAULT_ADMIN_PREFIX,
        demo_slug: str = DEFAULT_DEMO_SLUG,
    ):
        self.controller = controller
        self._admin_prefix = admin_prefix
        self._demo_slug = demo_slug
        self._current_slug: str | None = None

    @property
    def current_slug(self) -> str | None:
        return self._current_slug

    def navigate(self, path: str) -> PageView:
        route = resolve_route(path, admin_prefix=self._admin_prefix, fallback=self._demo_slug)
        if route.is_admin:
            logger.debug("Admin route %r bypasses composition", path)
            return AdminView(route)

        assert route.slug is not None
        if route.slug == self._current_slug:
            return self.controller.state
        self._current_slug = route.slug
        return self.controller.load(route.slug)


__all__ = ["AdminView", "PageNavigator", "PageView"]
