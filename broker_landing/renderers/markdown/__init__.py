"""Markdown rendering for landing pages."""

from .components import DEFAULT_COMPONENTS
from .renderer import MarkdownRenderer

__all__ = ["DEFAULT_COMPONENTS", "MarkdownRenderer"]
