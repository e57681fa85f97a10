"""Markdown renderer component implementations."""

from __future__ import annotations

from typing import Any, Sequence

from broker_landing.models.blocks import BlockConfig, BlockType
from broker_landing.models.listing import Listing
from broker_landing.models.testimonial import Testimonial
from broker_landing.renderers.base import RendererComponent


def join_sections(sections: Sequence[str | None]) -> str:
    cleaned = [section.strip() for section in sections if section and section.strip()]
    return "\n\n".join(cleaned)


def format_price(price: float) -> str:
    whole = f"{price:,.2f}"
    # Brazilian real formatting: thousands with '.', decimals with ','.
    return "R$ " + whole.replace(",", "_").replace(".", ",").replace("_", ".")


def quote(text: str) -> str:
    lines = text.splitlines() or [""]
    return "\n".join(f"> {line}" if line else ">" for line in lines)


def _button(config: BlockConfig) -> str | None:
    if not config.button_label:
        return None
    return f"[{config.button_label}]({config.button_link or '#'})"


def _image(config: BlockConfig, alt: str | None = None) -> str | None:
    if not config.image:
        return None
    return f"![{alt or config.title or ''}]({config.image})"


def _items(config: BlockConfig) -> str | None:
    lines = []
    for item in config.items:
        if item.title and item.description:
            lines.append(f"- **{item.title}**: {item.description}")
        elif item.title or item.description:
            lines.append(f"- {item.title or item.description}")
    return "\n".join(lines) or None


# ---------------------------------------------------------------------------
# Component implementations


class HeroComponent(RendererComponent):
    def render(self, block_id: int | str, payload: BlockConfig) -> str:
        return join_sections(
            [
                f"# {payload.title}" if payload.title else None,
                f"### {payload.subtitle}" if payload.subtitle else None,
                _image(payload),
                payload.body,
                _button(payload),
            ]
        )


class AboutComponent(RendererComponent):
    def render(self, block_id: int | str, payload: BlockConfig) -> str:
        return join_sections(
            [
                f"## {payload.title or 'About'}",
                f"*{payload.subtitle}*" if payload.subtitle else None,
                _image(payload),
                payload.body,
                _items(payload),
            ]
        )


class FeaturesComponent(RendererComponent):
    def render(self, block_id: int | str, payload: BlockConfig) -> str:
        return join_sections(
            [
                f"## {payload.title}" if payload.title else None,
                payload.subtitle,
                payload.body,
                _items(payload),
            ]
        )


class CatalogComponent(RendererComponent):
    """Render the injected listing collection; the block config is never read."""

    def __init__(self, title: str = "Properties", empty_message: str = "No properties available right now."):
        self.title = title
        self.empty_message = empty_message

    def render(self, block_id: int | str, payload: Sequence[Listing]) -> str:
        if not payload:
            return join_sections([f"## {self.title}", self.empty_message])
        entries = [self._render_listing(listing) for listing in payload]
        return join_sections([f"## {self.title}", *entries])

    def _render_listing(self, listing: Listing) -> str:
        star = " ★" if listing.featured else ""
        lines = [f"### {listing.title}{star}"]
        if listing.main_image:
            lines.append(f"![{listing.title}]({listing.main_image})")
        details = " · ".join(part for part in (listing.location, format_price(listing.price)) if part)
        lines.append(details)
        if listing.images:
            lines.append(" ".join(f"[{index}]({image.url})" for index, image in enumerate(listing.images, 1)))
        return "\n\n".join(lines)


class TestimonialsComponent(RendererComponent):
    def __init__(self, title: str = "What clients say"):
        self.title = title

    def render(self, block_id: int | str, payload: Sequence[Testimonial]) -> str:
        quotes = [
            quote(f"{testimonial.text}\n\n-- {testimonial.name}" if testimonial.name else testimonial.text)
            for testimonial in payload
            if testimonial.active is not False and testimonial.text
        ]
        if not quotes:
            return ""
        return join_sections([f"## {self.title}", *quotes])


class CtaComponent(RendererComponent):
    def render(self, block_id: int | str, payload: BlockConfig) -> str:
        return join_sections(
            [
                f"## {payload.title}" if payload.title else None,
                payload.subtitle,
                payload.body,
                _button(payload),
            ]
        )


DEFAULT_COMPONENTS: dict[BlockType, Any] = {
    BlockType.HERO: HeroComponent(),
    BlockType.ABOUT: AboutComponent(),
    BlockType.FEATURES: FeaturesComponent(),
    BlockType.CATALOG: CatalogComponent(),
    BlockType.TESTIMONIALS: TestimonialsComponent(),
    BlockType.CTA: CtaComponent(),
}


__all__ = [
    "AboutComponent",
    "CatalogComponent",
    "CtaComponent",
    "DEFAULT_COMPONENTS",
    "FeaturesComponent",
    "HeroComponent",
    "TestimonialsComponent",
    "format_price",
    "join_sections",
]
