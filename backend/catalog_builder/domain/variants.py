"""
Product variant resolution.

Pure functions over already-loaded rows: assemble options and variants,
match a (partial) selection to a variant, and compute the price range.
Nothing here raises on dangling or partial data.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Mapping, Optional

Combination = Dict[str, str]  # option_id -> value_id


@dataclass(frozen=True)
class OptionValue:
    id: str
    label: str
    sort: int = 0


@dataclass(frozen=True)
class ProductOption:
    id: str
    name: str
    sort: int = 0
    values: List[OptionValue] = field(default_factory=list)


@dataclass(frozen=True)
class ProductVariant:
    id: str
    sku: Optional[str] = None
    price: Optional[Decimal] = None
    is_available: bool = True
    image_url: Optional[str] = None
    combination: Combination = field(default_factory=dict)


@dataclass(frozen=True)
class VariantsData:
    options: List[ProductOption]
    variants: List[ProductVariant]


@dataclass(frozen=True)
class PriceRange:
    min: Optional[Decimal]
    max: Optional[Decimal]
    has_range: bool


def _sort_key(row: Mapping[str, Any]):
    return row.get("sort") or 0


def build_variants(
    options_raw: Iterable[Mapping[str, Any]],
    values_raw: Iterable[Mapping[str, Any]],
    variants_raw: Iterable[Mapping[str, Any]],
) -> VariantsData:
    """
    Assemble options (with their values) and variants from flat rows.

    Row shapes:
    - option:  {"id", "name", "sort"}
    - value:   {"id", "option_id", "value", "sort"}
    - variant: {"id", "sku", "price", "is_available", "image_url", "value_ids"}

    A variant linked to a value id that is not in ``values_raw`` simply
    loses that entry, so its combination may be incomplete.
    """
    values_list = sorted(values_raw, key=_sort_key)
    values_by_id = {v["id"]: v for v in values_list}

    options = [
        ProductOption(
            id=o["id"],
            name=o["name"],
            sort=o.get("sort") or 0,
            values=[
                OptionValue(id=v["id"], label=v["value"], sort=v.get("sort") or 0)
                for v in values_list
                if v["option_id"] == o["id"]
            ],
        )
        for o in sorted(options_raw, key=_sort_key)
    ]

    variants = []
    for raw in variants_raw:
        combination: Combination = {}
        for value_id in raw.get("value_ids") or ():
            value = values_by_id.get(value_id)
            if value is not None:
                combination[value["option_id"]] = value_id

        variants.append(
            ProductVariant(
                id=raw["id"],
                sku=raw.get("sku"),
                price=raw.get("price"),
                is_available=bool(raw.get("is_available", True)),
                image_url=raw.get("image_url"),
                combination=combination,
            )
        )

    return VariantsData(options=options, variants=variants)


def find_matching_variant(
    variants: Iterable[ProductVariant],
    selection: Mapping[str, str],
) -> Optional[ProductVariant]:
    """
    Return the first variant agreeing with every pair in ``selection``.

    Keys the variant has beyond the selection do not disqualify it, so a
    partial selection matches the first compatible variant in list order.
    """
    for variant in variants:
        if all(
            variant.combination.get(option_id) == value_id
            for option_id, value_id in selection.items()
        ):
            return variant
    return None


def get_price_range(
    variants: Iterable[ProductVariant],
    base_price: Optional[Decimal],
) -> PriceRange:
    prices = [
        variant.price if variant.price is not None else base_price
        for variant in variants
    ]
    prices = [p for p in prices if p is not None]

    if not prices:
        return PriceRange(min=base_price, max=base_price, has_range=False)

    low, high = min(prices), max(prices)
    return PriceRange(min=low, max=high, has_range=low != high)


def is_complete(variant: ProductVariant, options: Iterable[ProductOption]) -> bool:
    return all(option.id in variant.combination for option in options)
