from typing import Any, Dict, List, Optional, Sequence

from flask import current_app

from catalog_builder.models.catalog_block import CatalogBlock
from catalog_builder.domain.blocks import block_display_title
from catalog_builder.domain.invariants.block import assert_anchor_slug, assert_unique_anchors
from catalog_builder.domain.navigation import anchor_conflicts, derive_anchor, unique_anchor
from catalog_builder.domain.slugs import slugify
from catalog_builder.exceptions import RecordNotFound
from catalog_builder.application.lookups import get_block, get_catalog, list_blocks
from catalog_builder.utils.audit import log_action
from catalog_builder.utils.transaction import transactional


def set_navigation_anchor(
    *,
    block_id: str,
    user_id: str,
    label: Optional[str],
    enforce_unique: bool = False,
) -> CatalogBlock:
    """
    Set a block's navigation label and derive its anchor slug.

    The anchor comes from the label, else from the block's display title.
    Sibling anchors are not checked unless ``enforce_unique`` is set; use
    ``anchor_conflicts`` to detect a clash instead.
    """
    block = get_block(block_id, user_id)
    label = (label or "").strip()
    anchor = derive_anchor(label, block.type, block.data)

    siblings = list_blocks(block.catalog_id)
    if enforce_unique and anchor:
        anchor = unique_anchor(anchor, siblings, exclude_id=block.id)
    elif anchor_conflicts(siblings, anchor, exclude_id=block.id):
        current_app.logger.warning(
            "Anchor %r of block %s is already used in catalog %s",
            anchor, block.id, block.catalog_id,
        )

    assert_anchor_slug(anchor)

    with transactional():
        block.navigation_label = label or None
        block.anchor_slug = anchor or None

        log_action(
            actor_id=user_id,
            action="block.anchor",
            entity_type="block",
            entity_id=block.id,
            payload={"label": block.navigation_label, "anchor": block.anchor_slug},
        )

    return block


def update_navigation(
    *,
    catalog_id: str,
    user_id: str,
    items: Sequence[Dict[str, Any]],
    enforce_unique: bool = False,
) -> List[CatalogBlock]:
    """
    Batch navigation edit.

    Each item is ``{"block_id", "label", "show_in_nav", "anchor"?}``. Items
    hidden from the navigation lose their label and anchor; shown items
    fall back to the block title when no label is given. With
    ``enforce_unique`` a clashing anchor gets a numeric suffix, as in
    ``set_navigation_anchor``.
    """
    catalog = get_catalog(catalog_id, user_id)
    blocks = list_blocks(catalog.id)
    by_id = {block.id: block for block in blocks}

    with transactional():
        for item in items:
            block = by_id.get(item.get("block_id"))
            if block is None:
                raise RecordNotFound("block", item.get("block_id"))

            if not item.get("show_in_nav"):
                block.navigation_label = None
                block.anchor_slug = None
                continue

            label = (item.get("label") or "").strip() or block_display_title(block.type, block.data)
            anchor = slugify(item.get("anchor")) or derive_anchor(label, block.type, block.data)
            if enforce_unique and anchor:
                anchor = unique_anchor(anchor, blocks, exclude_id=block.id)
            assert_anchor_slug(anchor)

            block.navigation_label = label or None
            block.anchor_slug = anchor or None

        if enforce_unique:
            assert_unique_anchors(blocks)

        log_action(
            actor_id=user_id,
            action="catalog.navigation",
            entity_type="catalog",
            entity_id=catalog.id,
            payload={"count": len(items)},
        )

    return sorted(blocks, key=lambda b: b.sort)
