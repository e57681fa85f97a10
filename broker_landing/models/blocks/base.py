"""Shared building blocks for typed landing page blocks."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class BlockType(str, Enum):
    HERO = "hero"
    ABOUT = "about"
    FEATURES = "features"
    CATALOG = "catalog"
    TESTIMONIALS = "testimonials"
    CTA = "cta"


def coerce_text(value: Any) -> str | None:
    """Keep strings, stringify numbers, drop anything else."""
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


def _as_mapping(data: Any) -> Any:
    if isinstance(data, BaseModel):
        return data.model_dump()
    return data if isinstance(data, Mapping) else {}


class BlockItem(BaseModel):
    """Ordered sub-item of a block payload (feature bullet, step, ...)."""

    title: str | None = None
    description: str | None = None

    model_config = ConfigDict(extra="allow", frozen=True)

    @field_validator("title", "description", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str | None:
        return coerce_text(value)


class BlockConfig(BaseModel):
    """Loosely-typed content payload shared by every block type.

    Validation is lenient: malformed fields fall back to their defaults and
    malformed items are dropped, so one bad payload never fails a page.
    """

    title: str | None = None
    subtitle: str | None = None
    body: str | None = None
    image: str | None = None
    button_label: str | None = None
    button_link: str | None = None
    items: tuple[BlockItem, ...] = Field(default_factory=tuple)

    model_config = ConfigDict(extra="allow", frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _require_mapping(cls, data: Any) -> Any:
        return _as_mapping(data)

    @field_validator("title", "subtitle", "body", "image", "button_label", "button_link", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str | None:
        return coerce_text(value)

    @field_validator("items", mode="before")
    @classmethod
    def _drop_malformed_items(cls, value: Any) -> tuple[Any, ...]:
        if not isinstance(value, (list, tuple)):
            return ()
        items = []
        for item in value:
            if isinstance(item, str):
                items.append({"title": item})
            elif isinstance(item, (Mapping, BaseModel)):
                items.append(_as_mapping(item))
        return tuple(items)

    @classmethod
    def passthrough(cls, raw: Any) -> "BlockConfig":
        """Wrap ``raw`` without validation; used for unrecognised block types."""
        return cls.model_construct(**dict(raw)) if isinstance(raw, Mapping) else cls()


class Block(BaseModel):
    """Immutable representation of one content unit of a landing page.

    ``type`` keeps unrecognised tags verbatim; they are skipped at dispatch
    rather than rejected here.
    """

    id: int | str
    type: BlockType | str
    order: int = 0
    active: bool = True
    config: BlockConfig = Field(default_factory=BlockConfig)

    model_config = ConfigDict(frozen=True)

    @property
    def known_type(self) -> BlockType | None:
        if isinstance(self.type, BlockType):
            return self.type
        try:
            return BlockType(self.type)
        except ValueError:
            return None


__all__ = ["Block", "BlockConfig", "BlockItem", "BlockType", "coerce_text"]
