"""Renderer interfaces shared by presentation backends."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol

from broker_landing.models.blocks import BlockType
from broker_landing.pipeline.states import CompositionState


@dataclass(slots=True)
class RenderOptions:
    include_header: bool = True
    include_footer: bool = True
    brand_name: str | None = None


class Renderer(Protocol):
    def render(self, block_type: BlockType, block_id: int | str, payload: Any) -> str:
        ...

    def render_state(self, state: CompositionState, *, options: RenderOptions | None = None) -> str:
        ...


class RendererComponent(Protocol):
    def render(self, block_id: int | str, payload: Any) -> str:
        ...


__all__ = ["RenderOptions", "Renderer", "RendererComponent"]
