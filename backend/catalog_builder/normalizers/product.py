from catalog_builder.domain.selection import initial_selection, value_states
from catalog_builder.domain.variants import get_price_range


def money(value):
    return str(value) if value is not None else None


def normalize_variant(variant):
    if variant is None:
        return None

    return {
        "id": variant.id,
        "sku": variant.sku,
        "price": money(variant.price),
        "is_available": variant.is_available,
        "image_url": variant.image_url,
        "combination": dict(variant.combination),
    }


def normalize_price_range(price_range):
    return {
        "min": money(price_range.min),
        "max": money(price_range.max),
        "has_range": price_range.has_range,
    }


def normalize_variants(product, data, selection=None):
    """
    Options, variants and price range of a product, plus the selector
    state for ``selection`` (the seeded selection when omitted).
    """
    if selection is None:
        selection = initial_selection(data.options, data.variants)

    return {
        "product_id": product.id,
        "base_price": money(product.price),
        "options": [
            {
                "id": option.id,
                "name": option.name,
                "sort": option.sort,
                "values": [
                    {"id": value.id, "label": value.label, "sort": value.sort}
                    for value in option.values
                ],
            }
            for option in data.options
        ],
        "variants": [normalize_variant(v) for v in data.variants],
        "price_range": normalize_price_range(get_price_range(data.variants, product.price)),
        "selection": dict(selection),
        "value_states": value_states(data.options, data.variants, selection),
    }
