from decimal import Decimal

import pytest

from catalog_builder.models.product import ProductOptionValue, ProductVariant
from catalog_builder.domain.invariants.exceptions import InvariantViolation
from catalog_builder.domain.variants import find_matching_variant, get_price_range
from catalog_builder.exceptions import RecordNotFound
from catalog_builder.application.products.create_product import create_product, parse_price
from catalog_builder.application.products.load_variants import load_product_variants
from catalog_builder.application.products.save_variants import save_product_variants
from catalog_builder.application.products.update_variant import update_variant
from conftest import OTHER_USER_ID, USER_ID

OPTIONS = [
    {"name": "Size", "values": ["P", "M"]},
    {"name": "Color", "values": ["Blue", "White"]},
]


@pytest.fixture
def product(app):
    return create_product(user_id=USER_ID, title="Camiseta", price="12")


def _save(product, variants, options=OPTIONS):
    return save_product_variants(
        product_id=product.id, user_id=USER_ID, options=options, variants=variants
    )


def test_parse_price():
    assert parse_price("10.50") == Decimal("10.50")
    assert parse_price(None) is None
    assert parse_price("") is None
    with pytest.raises(ValueError):
        parse_price("-1")
    with pytest.raises(ValueError):
        parse_price("abc")


@pytest.mark.parametrize("value", ["NaN", "sNaN", "Infinity", "-Infinity"])
def test_parse_price_rejects_non_finite_values(value):
    with pytest.raises(ValueError):
        parse_price(value)


def test_save_and_load_variants(product):
    data = _save(product, [
        {"sku": "P-BL", "price": "10", "combination": {"Size": "P", "Color": "Blue"}},
        {"sku": "M-BL", "price": "15", "combination": {"Size": "M", "Color": "Blue"}},
        {"sku": "M-WH", "is_available": False, "combination": {"Size": "M", "Color": "White"}},
    ])

    assert [o.name for o in data.options] == ["Size", "Color"]
    assert [v.label for v in data.options[0].values] == ["P", "M"]
    assert [v.sku for v in data.variants] == ["P-BL", "M-BL", "M-WH"]

    size, color = data.options
    labels = {value.id: value.label for option in data.options for value in option.values}
    first = data.variants[0]
    assert {labels[value_id] for value_id in first.combination.values()} == {"P", "Blue"}
    assert set(first.combination) == {size.id, color.id}

    price_range = get_price_range(data.variants, product.price)
    assert (price_range.min, price_range.max, price_range.has_range) == (
        Decimal("10"), Decimal("15"), True,
    )

    reloaded = load_product_variants(product)
    assert [v.id for v in reloaded.variants] == [v.id for v in data.variants]


def test_partial_selection_matches_first_variant_in_order(product):
    data = _save(product, [
        {"sku": "M-WH", "combination": {"Size": "M", "Color": "White"}},
        {"sku": "M-BL", "combination": {"Size": "M", "Color": "Blue"}},
    ])
    size = data.options[0]
    medium = size.values[1]

    assert find_matching_variant(data.variants, {size.id: medium.id}).sku == "M-WH"


def test_save_variants_replaces_previous_rows(product):
    _save(product, [{"combination": {"Size": "P", "Color": "Blue"}}])
    data = _save(
        product,
        [{"sku": "U", "combination": {"Tamanho": "Único"}}],
        options=[{"name": "Tamanho", "values": ["Único"]}],
    )

    assert [o.name for o in data.options] == ["Tamanho"]
    assert ProductVariant.query.count() == 1
    assert ProductOptionValue.query.count() == 1


@pytest.mark.parametrize("options, variants", [
    (OPTIONS, [{"combination": {"Size": "P"}}]),
    (OPTIONS, [{"combination": {"Size": "P", "Color": "Blue", "Fit": "Slim"}}]),
    (OPTIONS, [{"combination": {"Size": "XL", "Color": "Blue"}}]),
    ([{"name": "Size", "values": []}], []),
    ([{"name": "Size", "values": ["P", "P"]}], []),
    ([{"name": "Size", "values": ["P"]}, {"name": "Size", "values": ["M"]}], []),
    ([{"name": "", "values": ["P"]}], []),
])
def test_save_variants_rejects_invalid_input(product, options, variants):
    with pytest.raises(InvariantViolation):
        _save(product, variants, options=options)


def test_save_variants_requires_ownership(product):
    with pytest.raises(RecordNotFound):
        save_product_variants(product_id=product.id, user_id=OTHER_USER_ID, options=[], variants=[])


def test_update_variant(product):
    data = _save(product, [{"sku": "P-BL", "combination": {"Size": "P", "Color": "Blue"}}])
    variant_id = data.variants[0].id

    variant = update_variant(
        variant_id=variant_id,
        user_id=USER_ID,
        data={"price": "9.90", "is_available": False, "sku": "NEW"},
    )

    assert variant.price == Decimal("9.90")
    assert variant.is_available is False
    assert variant.sku == "NEW"

    with pytest.raises(ValueError):
        update_variant(variant_id=variant_id, user_id=USER_ID, data={"sku": "NEW"})
    with pytest.raises(ValueError):
        update_variant(variant_id=variant_id, user_id=USER_ID, data={"is_available": "no"})
    with pytest.raises(RecordNotFound):
        update_variant(variant_id=variant_id, user_id=OTHER_USER_ID, data={"sku": "X"})
