"""Environment-driven settings."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from dotenv import load_dotenv

DEFAULT_DEMO_SLUG = "demo"
DEFAULT_ADMIN_PREFIX = "/admin"
DEFAULT_BRAND_NAME = "Corretor Prime"


@dataclass(frozen=True, slots=True)
class Settings:
    database_url: str | None = None
    sqlite_path: Path | None = None
    demo_slug: str = DEFAULT_DEMO_SLUG
    admin_prefix: str = DEFAULT_ADMIN_PREFIX
    brand_name: str = DEFAULT_BRAND_NAME
    query_timeout: float | None = None

    def __post_init__(self) -> None:
        if not self.demo_slug:
            raise ValueError("demo_slug cannot be empty.")
        if not self.admin_prefix.startswith("/"):
            raise ValueError("admin_prefix must start with '/'.")
        if self.query_timeout is not None and self.query_timeout <= 0:
            raise ValueError("query_timeout must be positive when set.")

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        *,
        dotenv_path: str | Path | None = None,
    ) -> "Settings":
        """Build settings from ``environ`` (defaults to ``os.environ``).

        When reading the process environment, a ``.env`` file is loaded first
        without overriding variables that are already set.
        """
        if environ is None:
            load_dotenv(dotenv_path, override=False)
            environ = os.environ

        sqlite_path = environ.get("LANDING_SQLITE_PATH")
        timeout = environ.get("LANDING_QUERY_TIMEOUT")
        return cls(
            database_url=environ.get("LANDING_DATABASE_URL") or environ.get("DATABASE_URL") or None,
            sqlite_path=Path(sqlite_path) if sqlite_path else None,
            demo_slug=environ.get("LANDING_DEMO_SLUG") or DEFAULT_DEMO_SLUG,
            admin_prefix=environ.get("LANDING_ADMIN_PREFIX") or DEFAULT_ADMIN_PREFIX,
            brand_name=environ.get("LANDING_BRAND_NAME") or DEFAULT_BRAND_NAME,
            query_timeout=float(timeout) if timeout else None,
        )


__all__ = ["DEFAULT_ADMIN_PREFIX", "DEFAULT_BRAND_NAME", "DEFAULT_DEMO_SLUG", "Settings"]
