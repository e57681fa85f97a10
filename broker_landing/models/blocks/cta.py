"""Call-to-action block definition."""

from __future__ import annotations

from pydantic import Field

from .base import Block, BlockConfig, BlockType


class CtaConfig(BlockConfig):
    pass


class CtaBlock(Block):
    type: BlockType = Field(default=BlockType.CTA, frozen=True)
    config: CtaConfig = Field(default_factory=CtaConfig)


__all__ = ["CtaBlock", "CtaConfig"]
