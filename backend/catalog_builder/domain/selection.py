"""
Selection policy for the interactive variant selector.
"""
from __future__ import annotations

from typing import Dict, List, Mapping, Optional, Sequence

from .variants import (
    Combination,
    ProductOption,
    ProductVariant,
    find_matching_variant,
)


def initial_selection(
    options: Sequence[ProductOption],
    variants: Sequence[ProductVariant],
) -> Combination:
    """
    Seed the selector: the first available variant's combination,
    otherwise the first value of every option.
    """
    if not options:
        return {}

    for variant in variants:
        if variant.is_available:
            return dict(variant.combination)

    return {
        option.id: option.values[0].id
        for option in options
        if option.values
    }


def select_value(selection: Mapping[str, str], option_id: str, value_id: str) -> Combination:
    updated = dict(selection)
    updated[option_id] = value_id
    return updated


def value_states(
    options: Sequence[ProductOption],
    variants: Sequence[ProductVariant],
    selection: Mapping[str, str],
) -> Dict[str, List[Dict[str, object]]]:
    """
    For every option value, whether picking it (keeping the rest of the
    selection) lands on a known unavailable variant.

    A value with no matching variant at all stays enabled.
    """
    states: Dict[str, List[Dict[str, object]]] = {}

    for option in options:
        entries = []
        for value in option.values:
            candidate = find_matching_variant(
                variants, select_value(selection, option.id, value.id)
            )
            entries.append({
                "value_id": value.id,
                "label": value.label,
                "selected": selection.get(option.id) == value.id,
                "disabled": candidate is not None and candidate.is_available is False,
            })
        states[option.id] = entries

    return states


def resolve_selection(
    options: Sequence[ProductOption],
    variants: Sequence[ProductVariant],
    selection: Mapping[str, str],
) -> Optional[ProductVariant]:
    """Only a selection naming every option resolves to a variant."""
    if len(selection) != len(options):
        return None
    return find_matching_variant(variants, selection)
