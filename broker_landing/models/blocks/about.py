"""About section block definition."""

from __future__ import annotations

from pydantic import Field

from .base import Block, BlockConfig, BlockType


class AboutConfig(BlockConfig):
    pass


class AboutBlock(Block):
    type: BlockType = Field(default=BlockType.ABOUT, frozen=True)
    config: AboutConfig = Field(default_factory=AboutConfig)


__all__ = ["AboutBlock", "AboutConfig"]
