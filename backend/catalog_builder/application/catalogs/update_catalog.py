from typing import Any, Dict

from catalog_builder.models.catalog import Catalog
from catalog_builder.domain.invariants.catalog import assert_catalog
from catalog_builder.domain.slugs import SlugUnavailable, slugify
from catalog_builder.application.lookups import catalog_slug_exists, get_catalog
from catalog_builder.utils.audit import log_action
from catalog_builder.utils.transaction import transactional


ALLOWED_UPDATE_FIELDS = ("title", "description", "slug", "cover", "theme_overrides")


def update_catalog(
    *,
    catalog_id: str,
    user_id: str,
    data: Dict[str, Any],
) -> Catalog:
    """
    Update the editable content fields of a catalog.

    Design rules:
    - Only whitelisted fields are mutable (publish flags have their own operations)
    - No silent no-op updates
    - A new slug is normalized and must be free for this user
    """
    catalog = get_catalog(catalog_id, user_id)

    if "slug" in data:
        data = dict(data, slug=slugify(data["slug"]))
        if data["slug"] != catalog.slug and catalog_slug_exists(user_id, data["slug"], exclude_id=catalog.id):
            raise SlugUnavailable(f"Slug already exists: {data['slug']}")

    changed_fields: list[str] = []

    with transactional():
        for field in ALLOWED_UPDATE_FIELDS:
            if field in data and getattr(catalog, field) != data[field]:
                setattr(catalog, field, data[field])
                changed_fields.append(field)

        if not changed_fields:
            raise ValueError("No valid fields provided for update")

        assert_catalog(catalog)

        log_action(
            actor_id=user_id,
            action="catalog.update",
            entity_type="catalog",
            entity_id=catalog.id,
            payload={"fields": changed_fields},
        )

    return catalog
