from catalog_builder.models.catalog_block import CatalogBlock
from catalog_builder.application.lookups import get_block
from catalog_builder.utils.audit import log_action
from catalog_builder.utils.transaction import transactional


def toggle_block_visibility(*, block_id: str, user_id: str) -> CatalogBlock:
    """
    Flip ``visible``. Hidden blocks keep their place in the ordering and
    are only left out of public rendering.
    """
    block = get_block(block_id, user_id)

    with transactional():
        block.visible = not block.visible

        log_action(
            actor_id=user_id,
            action="block.visibility",
            entity_type="block",
            entity_id=block.id,
            payload={"visible": block.visible},
        )

    return block
