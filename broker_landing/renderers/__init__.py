"""Renderer implementations and helpers."""

from .base import RenderOptions, Renderer, RendererComponent
from .markdown import MarkdownRenderer

__all__ = ["RenderOptions", "Renderer", "RendererComponent", "MarkdownRenderer"]
