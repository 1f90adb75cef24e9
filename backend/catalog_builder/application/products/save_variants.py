from typing import Any, Dict, List, Sequence

from flask import current_app

from catalog_builder.extensions import db
from catalog_builder.models.product import ProductOption, ProductOptionValue, ProductVariant
from catalog_builder.domain.invariants.exceptions import InvariantViolation
from catalog_builder.domain.invariants.variant import assert_variant_combination
from catalog_builder.domain.variants import VariantsData
from catalog_builder.application.lookups import get_product
from catalog_builder.application.products.create_product import parse_price
from catalog_builder.application.products.load_variants import load_product_variants
from catalog_builder.utils.audit import log_action
from catalog_builder.utils.transaction import transactional


def _clean_options(options: Sequence[Dict[str, Any]]) -> List[Dict[str, Any]]:
    cleaned = []
    seen = set()

    for option in options:
        name = (option.get("name") or "").strip()
        if not name:
            raise InvariantViolation("Option name is required")
        if name in seen:
            raise InvariantViolation(f"Duplicate option: {name}")
        seen.add(name)

        labels = [str(label).strip() for label in option.get("values") or []]
        if not labels or not all(labels):
            raise InvariantViolation(f"Option {name!r} needs at least one non-empty value")
        if len(set(labels)) != len(labels):
            raise InvariantViolation(f"Option {name!r} has duplicate values")

        cleaned.append({"name": name, "values": labels})

    return cleaned


def save_product_variants(
    *,
    product_id: str,
    user_id: str,
    options: Sequence[Dict[str, Any]],
    variants: Sequence[Dict[str, Any]],
) -> VariantsData:
    """
    Replace a product's options, values and variants.

    Input shapes:
    - option:  {"name": "Size", "values": ["P", "M", "G"]}
    - variant: {"sku", "price", "is_available", "image_url",
                "combination": {"Size": "M", "Color": "Blue"}}

    Every variant must name exactly one value for every option.
    """
    product = get_product(product_id, user_id)
    cleaned = _clean_options(options)
    labels_by_option = {o["name"]: set(o["values"]) for o in cleaned}

    for variant in variants:
        combination = variant.get("combination") or {}
        assert_variant_combination(combination, labels_by_option)
        for name, label in combination.items():
            if label not in labels_by_option[name]:
                raise InvariantViolation(f"Unknown value {label!r} for option {name!r}")

    with transactional():
        # delete-orphan cascades remove old values and variant links
        product.variants = []
        product.options = []
        db.session.flush()

        value_rows: Dict[tuple, ProductOptionValue] = {}
        for option_sort, option_data in enumerate(cleaned):
            option = ProductOption(product_id=product.id, name=option_data["name"], sort=option_sort)
            for value_sort, label in enumerate(option_data["values"]):
                value = ProductOptionValue(value=label, sort=value_sort)
                option.values.append(value)
                value_rows[(option_data["name"], label)] = value
            product.options.append(option)

        for variant_sort, variant_data in enumerate(variants):
            variant = ProductVariant(
                product_id=product.id,
                sku=variant_data.get("sku") or None,
                price=parse_price(variant_data.get("price")),
                is_available=bool(variant_data.get("is_available", True)),
                image_url=variant_data.get("image_url") or None,
                sort=variant_sort,
            )
            variant.option_values = [
                value_rows[(name, label)]
                for name, label in (variant_data.get("combination") or {}).items()
            ]
            product.variants.append(variant)

        db.session.flush()

        log_action(
            actor_id=user_id,
            action="product.variants",
            entity_type="product",
            entity_id=product.id,
            payload={"options": len(cleaned), "variants": len(variants)},
        )

    current_app.logger.debug(
        "Saved %d options and %d variants for product %s", len(cleaned), len(variants), product.id
    )
    return load_product_variants(product)
