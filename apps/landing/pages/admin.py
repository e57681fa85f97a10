"""Administrative route placeholder; the public pipeline never runs here."""

from __future__ import annotations

from nicegui import ui

from ..layout import page_frame
from ..state import get_context


def _admin_body() -> None:  # pragma: no cover - UI wiring
    ctx = get_context()
    ui.page_title(f"{ctx.settings.brand_name} | Admin")
    with page_frame(brand=ctx.settings.brand_name):
        ui.label("Landing page administration").classes("text-3xl font-semibold")
        ui.label("Page editing is handled by the administrative service.").classes("text-slate-500")


@ui.page("/admin")
def admin_page() -> None:  # pragma: no cover - UI wiring
    _admin_body()


@ui.page("/admin/{rest:path}")
def admin_subpage(rest: str) -> None:  # pragma: no cover - UI wiring
    _admin_body()


__all__ = ["admin_page", "admin_subpage"]
