import copy

from flask import current_app

from catalog_builder.extensions import db
from catalog_builder.models.catalog_block import CatalogBlock
from catalog_builder.domain.invariants.block import assert_block_sort
from catalog_builder.domain.navigation import derive_anchor, unique_anchor
from catalog_builder.application.lookups import get_block, list_blocks
from catalog_builder.utils.order import insert_after
from catalog_builder.utils.audit import log_action
from catalog_builder.utils.transaction import transactional


def duplicate_block(
    *,
    block_id: str,
    user_id: str,
    carry_navigation: bool = False,
) -> CatalogBlock:
    """
    Copy a block right after its source.

    Type, payload and visibility are copied verbatim. The navigation label
    and anchor are dropped unless ``carry_navigation`` is set, in which
    case the anchor is regenerated so it stays unique in the catalog.
    """
    source = get_block(block_id, user_id)
    siblings = list_blocks(source.catalog_id)

    block = CatalogBlock()
    block.catalog_id = source.catalog_id
    block.type = source.type
    block.data = copy.deepcopy(source.data)
    block.visible = source.visible

    if carry_navigation and source.navigation_label:
        block.navigation_label = source.navigation_label
        base = source.anchor_slug or derive_anchor(source.navigation_label, source.type, source.data)
        block.anchor_slug = unique_anchor(base, siblings) or None

    with transactional():
        db.session.add(block)
        ordered = insert_after(siblings, source, block)
        assert_block_sort(ordered)
        db.session.flush()  # ensures block.id is available

        log_action(
            actor_id=user_id,
            action="block.duplicate",
            entity_type="block",
            entity_id=block.id,
            payload={"source_id": source.id, "sort": block.sort},
        )

    current_app.logger.debug("Duplicated block %s as %s", source.id, block.id)
    return block
