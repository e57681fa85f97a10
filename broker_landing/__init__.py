"""Composition of broker landing pages from typed content blocks."""

__version__ = "0.1.0"

from .startup import ensure_landing_page  # noqa: E402

__all__ = ["__version__", "ensure_landing_page"]
