from typing import Any, Dict, Optional

from flask import current_app
from sqlalchemy.exc import IntegrityError

from catalog_builder.extensions import db
from catalog_builder.models.catalog import Catalog
from catalog_builder.domain.invariants.catalog import assert_catalog
from catalog_builder.domain.lifecycle.catalog import DRAFT
from catalog_builder.domain.slugs import SlugUnavailable, slugify, unique_slug
from catalog_builder.application.lookups import catalog_slug_exists
from catalog_builder.utils.audit import log_action
from catalog_builder.utils.transaction import transactional


def create_catalog(
    *,
    user_id: str,
    title: str,
    slug: Optional[str] = None,
    description: Optional[str] = None,
    cover: Optional[Dict[str, Any]] = None,
    theme_overrides: Optional[Dict[str, Any]] = None,
) -> Catalog:
    """
    Create a new catalog in DRAFT state.

    An explicit slug must be free for this user; otherwise the slug is
    derived from the title with a numeric suffix when needed.
    """
    if not title or not title.strip():
        raise ValueError("Title is required")

    if slug:
        slug = slugify(slug)
        if not slug:
            raise ValueError("Slug must contain letters or digits")
        if catalog_slug_exists(user_id, slug):
            raise SlugUnavailable(f"Slug already exists: {slug}")
    else:
        slug = unique_slug(
            title,
            lambda candidate: catalog_slug_exists(user_id, candidate),
            max_attempts=current_app.config["SLUG_MAX_ATTEMPTS"],
        )

    catalog = Catalog()
    catalog.user_id = user_id
    catalog.title = title.strip()
    catalog.slug = slug
    catalog.description = description
    catalog.cover = cover
    catalog.theme_overrides = theme_overrides or {}
    catalog.status = DRAFT
    catalog.link_active = False
    catalog.on_profile = False

    try:
        with transactional():
            db.session.add(catalog)
            db.session.flush()  # ensures catalog.id is available

            assert_catalog(catalog)

            log_action(
                actor_id=user_id,
                action="catalog.create",
                entity_type="catalog",
                entity_id=catalog.id,
                payload={"title": catalog.title, "slug": catalog.slug},
            )

        return catalog

    except IntegrityError as exc:
        # Lost a race on (user_id, slug)
        raise SlugUnavailable(f"Slug already exists: {slug}") from exc
