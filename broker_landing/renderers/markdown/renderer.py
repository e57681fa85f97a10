"""Renderer entry-point wiring Markdown components."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from broker_landing.config import DEFAULT_BRAND_NAME
from broker_landing.models.blocks import BlockType
from broker_landing.pipeline.dispatcher import render_blocks
from broker_landing.pipeline.states import CompositionState, Loading, NotFound, Ready
from broker_landing.renderers.base import RenderOptions, Renderer, RendererComponent

from .components import DEFAULT_COMPONENTS, join_sections

logger = logging.getLogger(__name__)

LOADING_MESSAGE = "Loading experience..."
NOT_FOUND_TITLE = "Page not found"
NOT_FOUND_MESSAGE = (
    "We could not find this broker's profile. Check that the address is correct."
)
NOT_FOUND_LINK = "[Back to home](/)"


def _default_components() -> dict[BlockType, RendererComponent]:
    return dict(DEFAULT_COMPONENTS)


@dataclass(slots=True)
class MarkdownRenderer(Renderer):
    _components: dict[BlockType, RendererComponent] = field(default_factory=dict)
    brand_name: str = DEFAULT_BRAND_NAME

    def __post_init__(self) -> None:
        if not self._components:
            self._components = _default_components()

    def register(self, block_type: BlockType, component: RendererComponent) -> None:
        self._components[block_type] = component

    def render(self, block_type: BlockType, block_id: int | str, payload: Any) -> str:
        component = self._components.get(block_type)
        if component is None:
            logger.debug("No component registered for block type %r", block_type)
            return ""
        return component.render(block_id, payload).strip()

    def render_state(self, state: CompositionState, *, options: RenderOptions | None = None) -> str:
        opts = options or RenderOptions()
        if isinstance(state, Ready):
            return self._render_ready(state, opts)
        if isinstance(state, NotFound):
            return join_sections([f"# {NOT_FOUND_TITLE}", NOT_FOUND_MESSAGE, NOT_FOUND_LINK])
        if isinstance(state, Loading):
            return LOADING_MESSAGE
        raise TypeError(f"Unsupported composition state: {type(state)!r}")

    # Internal helpers -------------------------------------------------
    def _render_ready(self, state: Ready, options: RenderOptions) -> str:
        brand = options.brand_name or self.brand_name
        sections = render_blocks(
            state.composition.blocks,
            self,
            listings=state.listings,
            testimonials=state.testimonials,
        )
        if options.include_header:
            sections.insert(0, f"**{brand}**")
        if options.include_footer:
            sections.append(f"---\n\n© {brand}")
        return join_sections(sections)


__all__ = ["LOADING_MESSAGE", "MarkdownRenderer", "NOT_FOUND_MESSAGE", "NOT_FOUND_TITLE"]
