"""Reusable layout helpers for the NiceGUI landing app."""

from __future__ import annotations

from contextlib import contextmanager

from nicegui import ui


@contextmanager
def page_frame(*, brand: str) -> None:
    """Render the shared header and yield a central content column."""

    with ui.header().classes("bg-slate-950 text-white shadow-sm"):
        with ui.row().classes("w-full items-center justify-between px-6 py-3"):
            ui.link(text=brand, target="/").classes("text-lg font-semibold no-underline text-white")
    with ui.column().classes("max-w-5xl mx-auto w-full gap-6 py-10 px-4"):
        yield


def loading_indicator(message: str) -> ui.column:
    with ui.column().classes("w-full items-center gap-4 py-24") as container:
        ui.spinner(size="xl")
        ui.label(message).classes("text-slate-400 tracking-wider")
    return container


__all__ = ["loading_indicator", "page_frame"]
