"""Public broker landing pages."""

from __future__ import annotations

from nicegui import run, ui

from broker_landing.pipeline import AdminView, DocumentHead, Ready
from broker_landing.renderers.markdown import LOADING_MESSAGE

from ..layout import loading_indicator, page_frame
from ..state import get_context


async def _render_path(path: str) -> None:  # pragma: no cover - UI wiring
    ctx = get_context()
    head = DocumentHead()
    navigator = ctx.new_navigator(head)

    with page_frame(brand=ctx.settings.brand_name):
        spinner = loading_indicator(LOADING_MESSAGE)
        view = await run.io_bound(navigator.navigate, path)
        spinner.delete()

        if isinstance(view, AdminView):
            ui.navigate.to(ctx.settings.admin_prefix)
            return
        if isinstance(view, Ready):
            ui.page_title(head.title)
            if head.description:
                ui.add_head_html(f'<meta name="description" content="{_escape(head.description)}">')
        ui.markdown(ctx.renderer.render_state(view)).classes("w-full")


def _escape(value: str) -> str:
    return value.replace("&", "&amp;").replace('"', "&quot;").replace("<", "&lt;")


@ui.page("/")
async def root_page() -> None:  # pragma: no cover - UI wiring
    await _render_path("/")


@ui.page("/{slug}")
async def broker_page(slug: str) -> None:  # pragma: no cover - UI wiring
    await _render_path(f"/{slug}")


__all__ = ["broker_page", "root_page"]
