"""Domain models for broker landing pages."""

from .blocks import Block, BlockConfig, BlockItem, BlockType, block_class_for, config_model_for
from .listing import Listing, ListingImage
from .page import PageComposition
from .testimonial import Testimonial

__all__ = [
    "Block",
    "BlockConfig",
    "BlockItem",
    "BlockType",
    "Listing",
    "ListingImage",
    "PageComposition",
    "Testimonial",
    "block_class_for",
    "config_model_for",
]
