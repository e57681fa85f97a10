"""Hero banner block definition."""

from __future__ import annotations

from pydantic import Field

from .base import Block, BlockConfig, BlockType


class HeroConfig(BlockConfig):
    pass


class HeroBlock(Block):
    type: BlockType = Field(default=BlockType.HERO, frozen=True)
    config: HeroConfig = Field(default_factory=HeroConfig)


__all__ = ["HeroBlock", "HeroConfig"]
