"""Features (differentiators) section block definition."""

from __future__ import annotations

from pydantic import Field

from .base import Block, BlockConfig, BlockType


class FeaturesConfig(BlockConfig):
    pass


class FeaturesBlock(Block):
    type: BlockType = Field(default=BlockType.FEATURES, frozen=True)
    config: FeaturesConfig = Field(default_factory=FeaturesConfig)


__all__ = ["FeaturesBlock", "FeaturesConfig"]
