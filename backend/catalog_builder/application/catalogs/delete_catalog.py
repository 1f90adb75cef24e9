from catalog_builder.extensions import db
from catalog_builder.application.lookups import get_catalog
from catalog_builder.utils.audit import log_action
from catalog_builder.utils.transaction import transactional


def delete_catalog(*, catalog_id: str, user_id: str) -> None:
    """
    Hard-delete a catalog; its blocks go with it (delete-orphan cascade).
    """
    catalog = get_catalog(catalog_id, user_id)
    block_count = len(catalog.blocks)

    with transactional():
        db.session.delete(catalog)

        log_action(
            actor_id=user_id,
            action="catalog.delete",
            entity_type="catalog",
            entity_id=catalog_id,
            payload={"blocks": block_count},
        )
