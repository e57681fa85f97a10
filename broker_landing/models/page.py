"""Resolved landing page composition."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .blocks import Block


class PageComposition(BaseModel):
    """SEO metadata plus every block of one broker page, unsorted and unfiltered."""

    page_id: int | str | None = None
    seo_title: str = ""
    seo_description: str = ""
    blocks: tuple[Block, ...] = Field(default_factory=tuple)

    model_config = ConfigDict(frozen=True)


__all__ = ["PageComposition"]
