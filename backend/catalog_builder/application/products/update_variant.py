from typing import Any, Dict

from catalog_builder.models.product import ProductVariant
from catalog_builder.application.lookups import get_variant
from catalog_builder.application.products.create_product import parse_price
from catalog_builder.utils.audit import log_action
from catalog_builder.utils.transaction import transactional


ALLOWED_UPDATE_FIELDS = ("sku", "price", "is_available", "image_url")


def update_variant(
    *,
    variant_id: str,
    user_id: str,
    data: Dict[str, Any],
) -> ProductVariant:
    """
    Edit a variant's own price, SKU, availability or image. Its
    combination is fixed; change options through ``save_product_variants``.
    """
    variant = get_variant(variant_id, user_id)

    if "price" in data:
        data = dict(data, price=parse_price(data["price"]))
    if "is_available" in data and not isinstance(data["is_available"], bool):
        raise ValueError("is_available must be a boolean")

    changed_fields: list[str] = []

    with transactional():
        for field in ALLOWED_UPDATE_FIELDS:
            if field in data and getattr(variant, field) != data[field]:
                setattr(variant, field, data[field])
                changed_fields.append(field)

        if not changed_fields:
            raise ValueError("No valid fields provided for update")

        log_action(
            actor_id=user_id,
            action="variant.update",
            entity_type="variant",
            entity_id=variant.id,
            payload={"fields": changed_fields},
        )

    return variant
