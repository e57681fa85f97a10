"""Typed block exports and helpers."""

from __future__ import annotations

from typing import Annotated, Union

from pydantic import Field

from .about import AboutBlock, AboutConfig
from .base import Block, BlockConfig, BlockItem, BlockType
from .catalog import CatalogBlock, CatalogConfig
from .cta import CtaBlock, CtaConfig
from .features import FeaturesBlock, FeaturesConfig
from .hero import HeroBlock, HeroConfig
from .testimonials import TestimonialItem, TestimonialsBlock, TestimonialsConfig

AnyBlock = Annotated[
    Union[
        HeroBlock,
        AboutBlock,
        FeaturesBlock,
        CatalogBlock,
        TestimonialsBlock,
        CtaBlock,
    ],
    Field(discriminator="type"),
]

BLOCK_CLASS_MAP: dict[BlockType, type[Block]] = {
    BlockType.HERO: HeroBlock,
    BlockType.ABOUT: AboutBlock,
    BlockType.FEATURES: FeaturesBlock,
    BlockType.CATALOG: CatalogBlock,
    BlockType.TESTIMONIALS: TestimonialsBlock,
    BlockType.CTA: CtaBlock,
}

CONFIG_CLASS_MAP: dict[BlockType, type[BlockConfig]] = {
    BlockType.HERO: HeroConfig,
    BlockType.ABOUT: AboutConfig,
    BlockType.FEATURES: FeaturesConfig,
    BlockType.CATALOG: CatalogConfig,
    BlockType.TESTIMONIALS: TestimonialsConfig,
    BlockType.CTA: CtaConfig,
}


def _known(block_type: BlockType | str) -> BlockType | None:
    if isinstance(block_type, BlockType):
        return block_type
    try:
        return BlockType(block_type)
    except ValueError:
        return None


def block_class_for(block_type: BlockType | str) -> type[Block]:
    """Return the block variant for ``block_type``; unknown tags get the generic ``Block``."""
    normalized = _known(block_type)
    return BLOCK_CLASS_MAP.get(normalized, Block) if normalized else Block


def config_model_for(block_type: BlockType | str) -> type[BlockConfig]:
    normalized = _known(block_type)
    return CONFIG_CLASS_MAP.get(normalized, BlockConfig) if normalized else BlockConfig


__all__ = [
    "AnyBlock",
    "Block",
    "BlockConfig",
    "BlockItem",
    "BlockType",
    "HeroBlock",
    "HeroConfig",
    "AboutBlock",
    "AboutConfig",
    "FeaturesBlock",
    "FeaturesConfig",
    "CatalogBlock",
    "CatalogConfig",
    "TestimonialItem",
    "TestimonialsBlock",
    "TestimonialsConfig",
    "CtaBlock",
    "CtaConfig",
    "block_class_for",
    "config_model_for",
]
