"""Route boundary: admin bypass and slug extraction."""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import urlsplit

from broker_landing.config import DEFAULT_ADMIN_PREFIX, DEFAULT_DEMO_SLUG


@dataclass(frozen=True, slots=True)
class Route:
    path: str
    slug: str | None
    is_admin: bool = False


def resolve_slug(path: str, *, fallback: str = DEFAULT_DEMO_SLUG) -> str:
    """Return the tenant slug for ``path``; the root path maps to ``fallback``."""
    slug = urlsplit(path or "").path.strip("/")
    return slug or fallback


def is_admin_path(path: str, *, admin_prefix: str = DEFAULT_ADMIN_PREFIX) -> bool:
    prefix = admin_prefix.rstrip("/")
    route_path = urlsplit(path or "").path
    return route_path.startswith(prefix)


def resolve_route(
    path: str,
    *,
    admin_prefix: str = DEFAULT_ADMIN_PREFIX,
    fallback: str = DEFAULT_DEMO_SLUG,
) -> Route:
    if is_admin_path(path, admin_prefix=admin_prefix):
        return Route(path=path, slug=None, is_admin=True)
    return Route(path=path, slug=resolve_slug(path, fallback=fallback))


__all__ = ["Route", "is_admin_path", "resolve_route", "resolve_slug"]
