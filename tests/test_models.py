from __future__ import annotations

import pytest
from pydantic import ValidationError

from broker_landing.models.blocks import (
    Block,
    BlockConfig,
    BlockType,
    CatalogBlock,
    HeroBlock,
    HeroConfig,
    TestimonialItem as TestimonialItemModel,
    TestimonialsBlock as TestimonialsBlockModel,
    block_class_for,
    config_model_for,
)
from broker_landing.models.listing import Listing, ListingImage
from broker_landing.models.testimonial import Testimonial as TestimonialModel


def test_block_class_for_maps_known_types():
    assert block_class_for("hero") is HeroBlock
    assert block_class_for(BlockType.CATALOG) is CatalogBlock
    assert block_class_for("testimonials") is TestimonialsBlockModel
    assert config_model_for("hero") is HeroConfig


def test_block_class_for_unknown_type_falls_back_to_generic_block():
    assert block_class_for("video") is Block
    assert config_model_for("video") is BlockConfig


def test_generic_block_keeps_unknown_type_tag():
    block = Block(id=9, type="video", order=1, active=True, config={"url": "x"})

    assert block.type == "video"
    assert block.known_type is None
    assert block.config.model_extra == {"url": "x"}


def test_variant_block_coerces_type_and_config():
    block = HeroBlock(id=1, type="hero", order=0, active=True, config={"title": "Welcome"})

    assert block.type is BlockType.HERO
    assert block.known_type is BlockType.HERO
    assert isinstance(block.config, HeroConfig)
    assert block.config.title == "Welcome"


def test_blocks_are_immutable():
    block = HeroBlock(id=1, order=0, active=True)

    with pytest.raises(ValidationError):
        block.order = 3


def test_listing_gallery_is_ordered_and_price_non_negative():
    listing = Listing(
        id=1,
        title="Loft",
        price=10.0,
        images=[ListingImage(id=2, url="b.jpg", order=2), ListingImage(id=1, url="a.jpg", order=1)],
    )

    assert [image.url for image in listing.images] == ["a.jpg", "b.jpg"]
    with pytest.raises(ValidationError):
        Listing(id=2, title="Bad", price=-1)


def test_testimonial_from_item_prefers_testimonial_fields():
    item = TestimonialItemModel(id=7, text="Great service", name="Ana", title="ignored", description="ignored")

    assert TestimonialModel.from_item(item, 0) == TestimonialModel(id=7, text="Great service", name="Ana")


def test_testimonial_from_item_falls_back_to_block_item_fields():
    item = TestimonialItemModel(title="Bruno", description="Fast and honest")

    testimonial = TestimonialModel.from_item(item, 3)

    assert testimonial.id == 3
    assert testimonial.name == "Bruno"
    assert testimonial.text == "Fast and honest"
