from __future__ import annotations

from broker_landing.models.blocks import (
    AboutBlock,
    Block,
    BlockType,
    CatalogBlock,
    CtaBlock,
    FeaturesBlock,
    HeroBlock,
    TestimonialsBlock as TestimonialsBlockModel,
)
from broker_landing.models.listing import Listing
from broker_landing.models.testimonial import Testimonial as TestimonialModel
from broker_landing.pipeline.dispatcher import dispatch_blocks, ordered_active_blocks, render_blocks
from broker_landing.pipeline.normalizers import normalize_blocks


class RecordingSink:
    def __init__(self):
        self.calls = []

    def render(self, block_type, block_id, payload):
        self.calls.append((block_type, block_id, payload))
        return f"{block_type.value}:{block_id}"


def test_dispatch_sorts_by_order_and_drops_inactive(landing_row):
    composition = normalize_blocks(
        [
            landing_row(1, "hero", order=1, active=True),
            landing_row(2, "cta", order=0, active=True),
            landing_row(3, "about", order=2, active=False),
        ]
    )

    dispatched = dispatch_blocks(composition.blocks)

    assert [(item.type, item.id) for item in dispatched] == [
        (BlockType.CTA, 2),
        (BlockType.HERO, 1),
    ]


def test_dispatch_sort_is_stable_for_equal_orders():
    blocks = [
        HeroBlock(id="b", order=1),
        AboutBlock(id="a", order=0),
        CtaBlock(id="c", order=1),
        FeaturesBlock(id="d", order=0),
    ]

    assert [block.id for block in ordered_active_blocks(blocks)] == ["a", "d", "b", "c"]


def test_dispatch_resorts_even_when_input_is_descending():
    blocks = [CtaBlock(id=order, order=order) for order in (5, 3, 9, -1)]

    assert [item.id for item in dispatch_blocks(blocks)] == [-1, 3, 5, 9]


def test_config_types_receive_their_config():
    hero = HeroBlock(id=1, order=0, config={"title": "Welcome"})
    about = AboutBlock(id=2, order=1, config={"body": "Me"})
    features = FeaturesBlock(id=3, order=2, config={"items": [{"title": "Fast"}]})
    cta = CtaBlock(id=4, order=3, config={"button_label": "Call"})

    payloads = {item.id: item.payload for item in dispatch_blocks([hero, about, features, cta])}

    assert payloads == {1: hero.config, 2: about.config, 3: features.config, 4: cta.config}


def test_catalog_receives_listings_and_ignores_config():
    listings = (Listing(id=1, title="Loft", price=1.0),)
    catalog = CatalogBlock(id=5, order=0, config={"title": "ignored"})

    dispatched = dispatch_blocks([catalog], listings=listings)

    assert dispatched[0].payload == listings


def test_catalog_receives_empty_collection_without_listings():
    dispatched = dispatch_blocks([CatalogBlock(id=5, order=0)])

    assert dispatched[0].payload == ()


def test_embedded_testimonials_supersede_separate_source():
    items = [
        {"id": 1, "text": "Excellent", "name": "Rita"},
        {"id": 2, "text": "Recommended", "name": "Paulo", "active": True},
    ]
    block = TestimonialsBlockModel(id=6, order=0, config={"items": items})
    separate = (TestimonialModel(id=99, text="Should not show", name="Nobody"),)

    dispatched = dispatch_blocks([block], testimonials=separate)

    assert dispatched[0].payload == (
        TestimonialModel(id=1, text="Excellent", name="Rita"),
        TestimonialModel(id=2, text="Recommended", name="Paulo", active=True),
    )


def test_testimonials_fall_back_to_separate_source_when_items_empty():
    separate = (TestimonialModel(id=1, text="From elsewhere", name="Lia"),)
    block = TestimonialsBlockModel(id=6, order=0, config={"items": []})

    dispatched = dispatch_blocks([block], testimonials=separate)

    assert dispatched[0].payload == separate


def test_generic_testimonials_block_reinterprets_items():
    block = Block(id=8, type="testimonials", order=0, config={"items": [{"text": "Nice", "name": "Ivo"}]})

    dispatched = dispatch_blocks([block])

    assert dispatched[0].payload == (TestimonialModel(id=0, text="Nice", name="Ivo"),)


def test_unknown_types_are_skipped_silently():
    blocks = [
        Block(id=1, type="video", order=0),
        HeroBlock(id=2, order=1),
        Block(id=3, type="", order=2),
    ]
    sink = RecordingSink()

    outputs = render_blocks(blocks, sink)

    assert outputs == ["hero:2"]
    assert [call[1] for call in sink.calls] == [2]


def test_dispatched_blocks_are_keyed_by_id():
    dispatched = dispatch_blocks([HeroBlock(id="hero-1", order=0)])

    assert dispatched[0].key == "hero-1"


def test_render_blocks_calls_sink_once_per_block_in_order():
    listings = (Listing(id=1, title="Loft", price=1.0),)
    blocks = [CatalogBlock(id=2, order=1), HeroBlock(id=1, order=0), CtaBlock(id=3, order=2, active=False)]
    sink = RecordingSink()

    render_blocks(blocks, sink, listings=listings)

    assert [(call[0], call[1]) for call in sink.calls] == [(BlockType.HERO, 1), (BlockType.CATALOG, 2)]
    assert sink.calls[1][2] == listings
