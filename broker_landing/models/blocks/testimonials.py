"""Testimonials block definition."""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator

from .base import Block, BlockConfig, BlockItem, BlockType, coerce_text


class TestimonialItem(BlockItem):
    """Config item that may carry a full testimonial entry."""

    id: int | str | None = None
    text: str | None = None
    name: str | None = None
    active: bool | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> int | str | None:
        if isinstance(value, bool):
            return None
        return value if isinstance(value, (int, str)) else None

    @field_validator("text", "name", mode="before")
    @classmethod
    def _coerce_entry_text(cls, value: Any) -> str | None:
        return coerce_text(value)

    @field_validator("active", mode="before")
    @classmethod
    def _coerce_active(cls, value: Any) -> bool | None:
        return value if isinstance(value, bool) else None


class TestimonialsConfig(BlockConfig):
    items: tuple[TestimonialItem, ...] = Field(default_factory=tuple)


class TestimonialsBlock(Block):
    type: BlockType = Field(default=BlockType.TESTIMONIALS, frozen=True)
    config: TestimonialsConfig = Field(default_factory=TestimonialsConfig)


__all__ = ["TestimonialItem", "TestimonialsBlock", "TestimonialsConfig"]
