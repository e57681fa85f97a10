from __future__ import annotations

from broker_landing.pipeline.controller import CompositionController
from broker_landing.pipeline.fetcher import StoreRowFetcher
from broker_landing.pipeline.navigator import AdminView, PageNavigator
from broker_landing.pipeline.states import NotFound, Ready


def _navigator(source, **kwargs):
    return PageNavigator(CompositionController(StoreRowFetcher(source)), **kwargs)


def test_empty_path_loads_demo_slug(fake_source_cls, landing_row):
    source = fake_source_cls([landing_row(1, slug="demo")])
    navigator = _navigator(source)

    view = navigator.navigate("/")

    assert isinstance(view, Ready)
    assert view.slug == "demo"
    assert ("landing", "demo") in source.calls


def test_admin_path_issues_no_queries(fake_source_cls, landing_row):
    source = fake_source_cls([landing_row(1)])
    navigator = _navigator(source)

    view = navigator.navigate("/admin/blocks")

    assert isinstance(view, AdminView)
    assert view.route.is_admin
    assert source.calls == []
    assert navigator.controller.current_token == 0


def test_same_slug_is_loaded_once(fake_source_cls, landing_row):
    source = fake_source_cls([landing_row(1)])
    navigator = _navigator(source)

    first = navigator.navigate("/ana-souza")
    second = navigator.navigate("/ana-souza/")

    assert first is second
    assert source.calls.count(("landing", "ana-souza")) == 1


def test_slug_change_reruns_pipeline(fake_source_cls, landing_row):
    source = fake_source_cls([landing_row(1)])
    navigator = _navigator(source)

    navigator.navigate("/ana-souza")
    source.landing_rows = []
    view = navigator.navigate("/unknown-agent")

    assert view == NotFound("unknown-agent")
    assert navigator.current_slug == "unknown-agent"
    assert navigator.controller.current_token == 2


def test_custom_prefix_and_demo_slug(fake_source_cls, landing_row):
    source = fake_source_cls([landing_row(1)])
    navigator = _navigator(source, admin_prefix="/painel", demo_slug="vitrine")

    assert isinstance(navigator.navigate("/painel"), AdminView)
    navigator.navigate("")

    assert source.calls[0][1] == "vitrine"


def test_path_beginning_with_admin_prefix_bypasses_pipeline(fake_source_cls, landing_row):
    source = fake_source_cls([landing_row(1)])
    navigator = _navigator(source)

    view = navigator.navigate("/administrador")

    assert isinstance(view, AdminView)
    assert source.calls == []
