from typing import Any, Dict

from catalog_builder.models.catalog import Catalog
from catalog_builder.domain.lifecycle.catalog import CATALOG_FLAG_FIELDS, assert_catalog_status
from catalog_builder.application.lookups import get_catalog
from catalog_builder.utils.audit import log_action
from catalog_builder.utils.transaction import transactional


def _validate_flags(updates: Dict[str, Any]) -> None:
    unknown = set(updates) - CATALOG_FLAG_FIELDS
    if unknown:
        raise ValueError(f"Unknown catalog flags: {sorted(unknown)}")

    if not updates:
        raise ValueError("No catalog flags provided")

    if "status" in updates:
        assert_catalog_status(updates["status"])

    for field in ("link_active", "on_profile"):
        if field in updates and not isinstance(updates[field], bool):
            raise ValueError(f"{field} must be a boolean")


def batch_update_catalog(
    *,
    catalog_id: str,
    user_id: str,
    updates: Dict[str, Any],
) -> Catalog:
    """
    Apply any of ``status``, ``link_active`` and ``on_profile`` in one write.

    The flags are independent: no combination is rejected (a published
    catalog may have its link switched off).
    """
    _validate_flags(updates)
    catalog = get_catalog(catalog_id, user_id)

    with transactional():
        for field, value in updates.items():
            setattr(catalog, field, value)

        log_action(
            actor_id=user_id,
            action="catalog.flags",
            entity_type="catalog",
            entity_id=catalog.id,
            payload=dict(updates),
        )

    return catalog


def set_catalog_status(*, catalog_id: str, user_id: str, status: str) -> Catalog:
    return batch_update_catalog(catalog_id=catalog_id, user_id=user_id, updates={"status": status})


def set_catalog_link_active(*, catalog_id: str, user_id: str, link_active: bool) -> Catalog:
    return batch_update_catalog(catalog_id=catalog_id, user_id=user_id, updates={"link_active": link_active})


def set_catalog_on_profile(*, catalog_id: str, user_id: str, on_profile: bool) -> Catalog:
    return batch_update_catalog(catalog_id=catalog_id, user_id=user_id, updates={"on_profile": on_profile})
