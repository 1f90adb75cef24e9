from typing import List, Sequence

from catalog_builder.models.catalog_block import CatalogBlock
from catalog_builder.domain.invariants.block import assert_block_sort
from catalog_builder.domain.invariants.exceptions import InvariantViolation
from catalog_builder.application.lookups import get_catalog, list_blocks
from catalog_builder.utils.order import reorder, resequence
from catalog_builder.utils.audit import log_action
from catalog_builder.utils.transaction import transactional


def reorder_blocks(
    *,
    catalog_id: str,
    user_id: str,
    from_index: int,
    to_index: int,
) -> List[CatalogBlock]:
    """
    Move one block and persist the dense 0..N-1 sort sequence for the
    whole catalog. Hidden blocks take part like any other.
    """
    catalog = get_catalog(catalog_id, user_id)
    blocks = list_blocks(catalog.id)

    with transactional():
        ordered = reorder(blocks, from_index, to_index)
        assert_block_sort(ordered)

        log_action(
            actor_id=user_id,
            action="block.reorder",
            entity_type="catalog",
            entity_id=catalog.id,
            payload={"from": from_index, "to": to_index},
        )

    return ordered


def apply_block_order(
    *,
    catalog_id: str,
    user_id: str,
    block_ids: Sequence[str],
) -> List[CatalogBlock]:
    """
    Persist an explicit full ordering, e.g. the result of a drag and drop.

    ``block_ids`` must list every block of the catalog exactly once.
    """
    catalog = get_catalog(catalog_id, user_id)
    blocks = list_blocks(catalog.id)
    by_id = {block.id: block for block in blocks}

    if len(block_ids) != len(by_id) or set(block_ids) != set(by_id):
        raise InvariantViolation(
            "Block order must list every block of the catalog exactly once"
        )

    with transactional():
        ordered = resequence([by_id[block_id] for block_id in block_ids])

        log_action(
            actor_id=user_id,
            action="block.reorder",
            entity_type="catalog",
            entity_id=catalog.id,
            payload={"count": len(ordered)},
        )

    return ordered
