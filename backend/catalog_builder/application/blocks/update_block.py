import copy
from typing import Any, Dict

from catalog_builder.models.catalog_block import CatalogBlock
from catalog_builder.application.lookups import get_block
from catalog_builder.utils.audit import log_action
from catalog_builder.utils.transaction import transactional


def update_block(
    *,
    block_id: str,
    user_id: str,
    data: Dict[str, Any],
) -> CatalogBlock:
    """
    Settings edit: replaces the block payload. Type, order and visibility
    are untouched.
    """
    if not isinstance(data, dict):
        raise ValueError("Block data must be an object")

    block = get_block(block_id, user_id)

    with transactional():
        # Assign a fresh dict so the JSON column change is tracked
        block.data = copy.deepcopy(data)

        log_action(
            actor_id=user_id,
            action="block.update",
            entity_type="block",
            entity_id=block.id,
            payload={"fields": sorted(data)},
        )

    return block
