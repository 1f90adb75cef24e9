from typing import Any, Dict, Optional

from flask import current_app

from catalog_builder.extensions import db
from catalog_builder.models.catalog_block import CatalogBlock
from catalog_builder.domain.blocks import BlockType, merge_block_data
from catalog_builder.application.lookups import get_catalog, list_blocks
from catalog_builder.utils.order import next_order
from catalog_builder.utils.audit import log_action
from catalog_builder.utils.transaction import transactional


def add_block(
    *,
    catalog_id: str,
    user_id: str,
    block_type: str,
    data: Optional[Dict[str, Any]] = None,
) -> CatalogBlock:
    """
    Append a new visible block of ``block_type`` to the end of the catalog.

    The payload starts from the kind's defaults; no navigation anchor is
    assigned until a label is set.
    """
    kind = BlockType.parse(block_type)
    catalog = get_catalog(catalog_id, user_id)

    block = CatalogBlock()
    block.catalog_id = catalog.id
    block.type = kind.value
    block.data = merge_block_data(kind, data)
    block.sort = next_order(list_blocks(catalog.id))
    block.visible = True

    with transactional():
        db.session.add(block)
        db.session.flush()  # ensures block.id is available

        log_action(
            actor_id=user_id,
            action="block.create",
            entity_type="block",
            entity_id=block.id,
            payload={"catalog_id": catalog.id, "type": block.type, "sort": block.sort},
        )

    current_app.logger.debug("Added %s block %s to catalog %s", block.type, block.id, catalog.id)
    return block
