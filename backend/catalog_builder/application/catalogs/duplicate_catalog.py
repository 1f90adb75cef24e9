import copy
from typing import Optional

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from catalog_builder.extensions import db
from catalog_builder.exceptions import CatalogDuplicationError
from catalog_builder.models.catalog import Catalog
from catalog_builder.models.catalog_block import CatalogBlock
from catalog_builder.domain.lifecycle.catalog import DRAFT
from catalog_builder.domain.slugs import MAX_SLUG_LENGTH, unique_slug
from catalog_builder.application.lookups import catalog_slug_exists, get_catalog, list_blocks
from catalog_builder.utils.audit import log_action
from catalog_builder.utils.transaction import transactional

COPY_SUFFIX = "-copia"


def duplicate_catalog(
    *,
    catalog_id: str,
    user_id: str,
    max_attempts: Optional[int] = None,
) -> Catalog:
    """
    Copy a catalog and all of its blocks.

    The copy gets the first free ``<slug>-copia[-N]`` slug for the user and
    always starts unpublished, with its link and profile flags off. Blocks
    keep their sort values and navigation.

    The catalog row is committed before the blocks are copied. If the block
    copy fails, ``CatalogDuplicationError`` carries the new catalog id; the
    row is not rolled back.
    """
    source = get_catalog(catalog_id, user_id)
    source_blocks = list_blocks(source.id)

    # Room for "-copia" plus a "-NNNNN" counter within the slug length limit
    stem = source.slug[:MAX_SLUG_LENGTH - len(COPY_SUFFIX) - 6].rstrip("-")
    slug = unique_slug(
        f"{stem}{COPY_SUFFIX}",
        lambda candidate: catalog_slug_exists(user_id, candidate),
        max_attempts=max_attempts or current_app.config["SLUG_MAX_ATTEMPTS"],
    )

    catalog = Catalog()
    catalog.user_id = user_id
    catalog.title = f"{source.title} (Cópia)"
    catalog.description = source.description
    catalog.slug = slug
    catalog.cover = copy.deepcopy(source.cover)
    catalog.theme_overrides = copy.deepcopy(source.theme_overrides or {})
    catalog.status = DRAFT
    catalog.link_active = False
    catalog.on_profile = False

    with transactional():
        db.session.add(catalog)
        db.session.flush()  # ensures catalog.id is available

        log_action(
            actor_id=user_id,
            action="catalog.duplicate",
            entity_type="catalog",
            entity_id=catalog.id,
            payload={"source_id": source.id, "slug": slug},
        )

    try:
        with transactional():
            copy_blocks(source_blocks, catalog.id)
    except SQLAlchemyError as exc:
        current_app.logger.exception(
            "Copying blocks from catalog %s into %s failed", source.id, catalog.id
        )
        raise CatalogDuplicationError(catalog.id) from exc

    current_app.logger.info(
        "Duplicated catalog %s as %s (%d blocks)", source.id, catalog.id, len(source_blocks)
    )
    return catalog


def copy_blocks(blocks, catalog_id: str) -> None:
    db.session.add_all([
        CatalogBlock(
            catalog_id=catalog_id,
            type=block.type,
            data=copy.deepcopy(block.data),
            sort=block.sort,
            visible=block.visible,
            navigation_label=block.navigation_label,
            anchor_slug=block.anchor_slug,
        )
        for block in blocks
    ])
