"""Testimonial model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from .blocks.testimonials import TestimonialItem


class Testimonial(BaseModel):
    id: int | str
    text: str = ""
    name: str = ""
    active: bool | None = None

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_item(cls, item: TestimonialItem, index: int) -> "Testimonial":
        """Reinterpret a testimonials block config item as a testimonial entry."""
        return cls(
            id=item.id if item.id is not None else index,
            text=item.text if item.text is not None else (item.description or ""),
            name=item.name if item.name is not None else (item.title or ""),
            active=item.active,
        )


__all__ = ["Testimonial"]
