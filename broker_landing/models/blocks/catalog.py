"""Listing catalog block definition."""

from __future__ import annotations

from pydantic import Field

from .base import Block, BlockConfig, BlockType


class CatalogConfig(BlockConfig):
    """Catalog payload; listings are injected at dispatch, never read from here."""


class CatalogBlock(Block):
    type: BlockType = Field(default=BlockType.CATALOG, frozen=True)
    config: CatalogConfig = Field(default_factory=CatalogConfig)


__all__ = ["CatalogBlock", "CatalogConfig"]
