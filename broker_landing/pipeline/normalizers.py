"""Normalization from flat store rows into page compositions and listings."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Sequence

from broker_landing.errors import EmptyResult
from broker_landing.models.blocks import Block, BlockConfig, block_class_for
from broker_landing.models.listing import Listing
from broker_landing.models.page import PageComposition

logger = logging.getLogger(__name__)

LandingRow = Mapping[str, Any]


def group_landing_rows(rows: Iterable[LandingRow]) -> dict[Any, list[LandingRow]]:
    """Group denormalized rows by their shared page identifier, keeping fetch order."""
    groups: dict[Any, list[LandingRow]] = {}
    for row in rows:
        groups.setdefault(row.get("page_id"), []).append(row)
    return groups


def normalize_block(row: LandingRow) -> Block:
    """Map one landing row onto the block variant matching its type tag.

    Unrecognised tags keep their raw config unvalidated.
    """
    block_type = row["block_type"]
    block_cls = block_class_for(block_type)
    raw_config = row.get("block_config") or {}
    config = BlockConfig.passthrough(raw_config) if block_cls is Block else raw_config
    return block_cls(
        id=row["block_id"],
        type=block_type,
        order=row["block_order"],
        active=row["block_active"],
        config=config,
    )


def normalize_blocks(rows: Sequence[LandingRow]) -> PageComposition:
    """Reduce landing rows to a ``PageComposition``.

    Page-level SEO fields come from the first row of the first page group;
    every row of that group becomes a block. No filtering, sorting or type
    validation happens here.
    """
    groups = group_landing_rows(rows)
    if not groups:
        raise EmptyResult()

    page_id, page_rows = next(iter(groups.items()))
    if len(groups) > 1:
        logger.warning(
            "Landing rows span %d pages; composing page %r only", len(groups), page_id
        )

    representative = page_rows[0]
    return PageComposition(
        page_id=page_id,
        seo_title=representative.get("seo_title") or "",
        seo_description=representative.get("seo_description") or "",
        blocks=tuple(normalize_block(row) for row in page_rows),
    )


def normalize_listings(rows: Sequence[Listing] | None) -> tuple[Listing, ...]:
    """Pass listing rows through; an absent or failed fetch becomes an empty collection."""
    if not rows:
        return ()
    return tuple(rows)


__all__ = ["group_landing_rows", "normalize_block", "normalize_blocks", "normalize_listings"]
