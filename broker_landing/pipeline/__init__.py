"""Composition pipeline: fetch, normalize, state machine and dispatch."""

from .controller import CompositionController
from .dispatcher import BlockSink, DispatchedBlock, dispatch_blocks, render_blocks
from .factory import create_controller, create_navigator
from .fetcher import FetchResult, RowFetcher, StoreRowFetcher
from .navigator import AdminView, PageNavigator
from .normalizers import group_landing_rows, normalize_blocks, normalize_listings
from .states import CompositionState, DocumentHead, Loading, NotFound, Ready

__all__ = [
    "AdminView",
    "BlockSink",
    "CompositionController",
    "CompositionState",
    "DispatchedBlock",
    "DocumentHead",
    "FetchResult",
    "Loading",
    "NotFound",
    "PageNavigator",
    "Ready",
    "create_controller",
    "create_navigator",
    "RowFetcher",
    "StoreRowFetcher",
    "dispatch_blocks",
    "group_landing_rows",
    "normalize_blocks",
    "normalize_listings",
    "render_blocks",
]
