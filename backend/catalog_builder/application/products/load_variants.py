from sqlalchemy import select

from catalog_builder.extensions import db
from catalog_builder.models.product import (
    Product,
    ProductOption,
    ProductOptionValue,
    ProductVariant,
    product_variant_options,
)
from catalog_builder.domain.variants import VariantsData, build_variants


def load_product_variants(product: Product) -> VariantsData:
    """
    Read a product's options, values, variants and variant links, then
    assemble them with ``build_variants``.
    """
    options = (
        ProductOption.query
        .filter_by(product_id=product.id)
        .order_by(ProductOption.sort.asc())
        .all()
    )
    if not options:
        return VariantsData(options=[], variants=[])

    values = (
        ProductOptionValue.query
        .filter(ProductOptionValue.option_id.in_([o.id for o in options]))
        .order_by(ProductOptionValue.sort.asc())
        .all()
    )

    variants = (
        ProductVariant.query
        .filter_by(product_id=product.id)
        .order_by(ProductVariant.sort.asc(), ProductVariant.created_at.asc())
        .all()
    )

    links: dict[str, list[str]] = {}
    if variants:
        rows = db.session.execute(
            select(product_variant_options.c.variant_id, product_variant_options.c.value_id)
            .where(product_variant_options.c.variant_id.in_([v.id for v in variants]))
        ).all()
        for variant_id, value_id in rows:
            links.setdefault(variant_id, []).append(value_id)

    return build_variants(
        [{"id": o.id, "name": o.name, "sort": o.sort} for o in options],
        [{"id": v.id, "option_id": v.option_id, "value": v.value, "sort": v.sort} for v in values],
        [
            {
                "id": v.id,
                "sku": v.sku,
                "price": v.price,
                "is_available": v.is_available,
                "image_url": v.image_url,
                "value_ids": links.get(v.id, []),
            }
            for v in variants
        ],
    )
