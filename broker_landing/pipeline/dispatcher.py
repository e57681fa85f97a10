"""Block dispatch: sort, filter inactive blocks and route payloads by type."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Protocol, Sequence

from broker_landing.models.blocks import Block, BlockType, TestimonialItem
from broker_landing.models.listing import Listing
from broker_landing.models.testimonial import Testimonial

logger = logging.getLogger(__name__)


class BlockSink(Protocol):
    def render(self, block_type: BlockType, block_id: int | str, payload: Any) -> str:
        ...


@dataclass(frozen=True, slots=True)
class DispatchedBlock:
    type: BlockType
    id: int | str
    payload: Any

    @property
    def key(self) -> int | str:
        return self.id


PayloadResolver = Callable[[Block, Sequence[Listing], Sequence[Testimonial]], Any]


def _config_payload(block: Block, listings, testimonials) -> Any:
    return block.config


def _catalog_payload(block: Block, listings, testimonials) -> tuple[Listing, ...]:
    return tuple(listings)


def _testimonials_payload(block: Block, listings, testimonials) -> tuple[Testimonial, ...]:
    items = getattr(block.config, "items", ())
    if items:
        return tuple(
            Testimonial.from_item(_as_testimonial_item(item), index)
            for index, item in enumerate(items)
        )
    return tuple(testimonials)


def _as_testimonial_item(item: Any) -> TestimonialItem:
    if isinstance(item, TestimonialItem):
        return item
    return TestimonialItem.model_validate(item.model_dump())


PAYLOAD_RESOLVERS: dict[BlockType, PayloadResolver] = {
    BlockType.HERO: _config_payload,
    BlockType.ABOUT: _config_payload,
    BlockType.FEATURES: _config_payload,
    BlockType.CATALOG: _catalog_payload,
    BlockType.TESTIMONIALS: _testimonials_payload,
    BlockType.CTA: _config_payload,
}


def ordered_active_blocks(blocks: Iterable[Block]) -> list[Block]:
    """Stable sort by ``order`` then drop inactive blocks."""
    return [block for block in sorted(blocks, key=lambda block: block.order) if block.active]


def dispatch_blocks(
    blocks: Iterable[Block],
    *,
    listings: Sequence[Listing] = (),
    testimonials: Sequence[Testimonial] = (),
) -> list[DispatchedBlock]:
    """Return the renderable sequence for ``blocks``.

    Unknown type tags produce nothing; that is not an error.
    """
    dispatched: list[DispatchedBlock] = []
    for block in ordered_active_blocks(blocks):
        block_type = block.known_type
        resolver = PAYLOAD_RESOLVERS.get(block_type) if block_type else None
        if resolver is None:
            logger.debug("Skipping block %r with unknown type %r", block.id, block.type)
            continue
        payload = resolver(block, listings, testimonials)
        dispatched.append(DispatchedBlock(type=block_type, id=block.id, payload=payload))
    return dispatched


def render_blocks(
    blocks: Iterable[Block],
    sink: BlockSink,
    *,
    listings: Sequence[Listing] = (),
    testimonials: Sequence[Testimonial] = (),
) -> list[str]:
    """Call ``sink.render(type, id, payload)`` once per dispatched block."""
    return [
        sink.render(item.type, item.id, item.payload)
        for item in dispatch_blocks(blocks, listings=listings, testimonials=testimonials)
    ]


__all__ = [
    "BlockSink",
    "DispatchedBlock",
    "PAYLOAD_RESOLVERS",
    "dispatch_blocks",
    "ordered_active_blocks",
    "render_blocks",
]
