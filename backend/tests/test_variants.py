from decimal import Decimal

from catalog_builder.domain.variants import (
    ProductVariant,
    build_variants,
    find_matching_variant,
    get_price_range,
    is_complete,
)

OPTIONS = [
    {"id": "color", "name": "Color", "sort": 1},
    {"id": "size", "name": "Size", "sort": 0},
]

VALUES = [
    {"id": "m", "option_id": "size", "value": "M", "sort": 1},
    {"id": "p", "option_id": "size", "value": "P", "sort": 0},
    {"id": "blue", "option_id": "color", "value": "Blue", "sort": 0},
    {"id": "white", "option_id": "color", "value": "White", "sort": 1},
]


def _variants():
    return [
        ProductVariant(id="v1", price=Decimal("10"), combination={"size": "p", "color": "blue"}),
        ProductVariant(id="v2", price=Decimal("15"), combination={"size": "m", "color": "blue"}),
        ProductVariant(id="v3", is_available=False, combination={"size": "m", "color": "white"}),
    ]


def test_build_variants_joins_values_and_orders_by_sort():
    data = build_variants(OPTIONS, VALUES, [])

    assert [o.id for o in data.options] == ["size", "color"]
    assert [v.label for v in data.options[0].values] == ["P", "M"]
    assert [v.label for v in data.options[1].values] == ["Blue", "White"]


def test_build_variants_maps_value_links_to_combination():
    data = build_variants(OPTIONS, VALUES, [
        {"id": "v1", "sku": "TS-P-BL", "price": Decimal("10"), "is_available": True,
         "image_url": None, "value_ids": ["p", "blue"]},
    ])

    variant = data.variants[0]
    assert variant.combination == {"size": "p", "color": "blue"}
    assert variant.sku == "TS-P-BL"
    assert is_complete(variant, data.options)


def test_build_variants_drops_dangling_value_references():
    data = build_variants(OPTIONS, VALUES, [
        {"id": "v1", "is_available": True, "value_ids": ["p", "deleted-value"]},
    ])

    variant = data.variants[0]
    assert variant.combination == {"size": "p"}
    assert not is_complete(variant, data.options)


def test_build_variants_handles_empty_input():
    data = build_variants([], [], [])
    assert data.options == []
    assert data.variants == []


def test_find_matching_variant_full_selection():
    match = find_matching_variant(_variants(), {"size": "m", "color": "white"})
    assert match.id == "v3"


def test_find_matching_variant_partial_selection_returns_first_in_order():
    match = find_matching_variant(_variants(), {"color": "blue"})
    assert match.id == "v1"


def test_find_matching_variant_subset_of_combination_matches():
    variant = ProductVariant(id="only", combination={"size": "p", "color": "blue"})
    assert find_matching_variant([variant], {"size": "p"}) is variant
    assert find_matching_variant([variant], {}) is variant


def test_find_matching_variant_returns_none_without_match():
    assert find_matching_variant(_variants(), {"size": "p", "color": "white"}) is None
    assert find_matching_variant([], {"size": "p"}) is None


def test_price_range_mixes_variant_and_base_prices():
    variants = [
        ProductVariant(id="a", price=10),
        ProductVariant(id="b", price=15),
        ProductVariant(id="c", price=None),
    ]

    price_range = get_price_range(variants, 12)

    assert (price_range.min, price_range.max, price_range.has_range) == (10, 15, True)


def test_price_range_falls_back_to_base_price():
    variants = [ProductVariant(id="a"), ProductVariant(id="b")]

    price_range = get_price_range(variants, 20)

    assert (price_range.min, price_range.max, price_range.has_range) == (20, 20, False)


def test_price_range_without_any_price():
    price_range = get_price_range([ProductVariant(id="a")], None)
    assert (price_range.min, price_range.max, price_range.has_range) == (None, None, False)


def test_price_range_single_price_has_no_range():
    price_range = get_price_range([ProductVariant(id="a", price=Decimal("9.90"))], None)
    assert price_range.min == price_range.max == Decimal("9.90")
    assert price_range.has_range is False
