from catalog_builder.extensions import db
from catalog_builder.application.lookups import get_block
from catalog_builder.utils.audit import log_action
from catalog_builder.utils.transaction import transactional


def delete_block(*, block_id: str, user_id: str) -> None:
    """
    Remove a block. Sibling sort values are left as they are.
    """
    block = get_block(block_id, user_id)
    catalog_id = block.catalog_id

    with transactional():
        db.session.delete(block)

        log_action(
            actor_id=user_id,
            action="block.delete",
            entity_type="block",
            entity_id=block_id,
            payload={"catalog_id": catalog_id},
        )
