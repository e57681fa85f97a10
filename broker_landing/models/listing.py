"""Property listing model shown by the catalog block."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ListingImage(BaseModel):
    id: int | str
    url: str
    order: int = 0

    model_config = ConfigDict(frozen=True)


class Listing(BaseModel):
    """Independently-sourced catalog entry for a broker."""

    id: int | str
    main_image: str | None = None
    title: str
    location: str = ""
    price: float = Field(default=0.0, ge=0)
    active: bool | None = None
    featured: bool | None = None
    images: tuple[ListingImage, ...] = Field(default_factory=tuple)

    model_config = ConfigDict(frozen=True)

    @field_validator("images")
    @classmethod
    def _order_gallery(cls, images: tuple[ListingImage, ...]) -> tuple[ListingImage, ...]:
        return tuple(sorted(images, key=lambda image: image.order))


__all__ = ["Listing", "ListingImage"]
