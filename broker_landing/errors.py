"""Error taxonomy for the landing page composition pipeline."""

from __future__ import annotations


class CompositionError(RuntimeError):
    """Base class for composition pipeline errors."""


class FetchError(CompositionError):
    """Raised when the landing rows query fails at the transport or store level."""

    def __init__(self, slug: str, cause: BaseException | None = None):
        super().__init__(f"Landing rows query failed for slug {slug!r}: {cause}")
        self.slug = slug
        self.cause = cause


class EmptyResult(CompositionError):
    """Raised when the landing rows query succeeds but returns no rows."""

    def __init__(self, slug: str | None = None):
        super().__init__(f"No landing rows for slug {slug!r}.")
        self.slug = slug


class DegradedFetch(CompositionError):
    """Recorded (not raised) when the listings query fails."""

    def __init__(self, slug: str, cause: BaseException | None = None):
        super().__init__(f"Listings query failed for slug {slug!r}: {cause}")
        self.slug = slug
        self.cause = cause


__all__ = ["CompositionError", "DegradedFetch", "EmptyResult", "FetchError"]
