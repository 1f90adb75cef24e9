from types import SimpleNamespace

import pytest

from catalog_builder.domain.blocks import (
    BLOCK_DEFAULTS,
    BlockType,
    block_display_title,
    default_block_data,
    merge_block_data,
)
from catalog_builder.domain.invariants.block import (
    assert_anchor_slug,
    assert_block_sort,
    assert_unique_anchors,
)
from catalog_builder.domain.invariants.exceptions import InvariantViolation
from catalog_builder.domain.navigation import (
    anchor_conflicts,
    derive_anchor,
    navigation_items,
    unique_anchor,
)


def _block(id, sort, label=None, anchor=None, visible=True):
    return SimpleNamespace(
        id=id, sort=sort, navigation_label=label, anchor_slug=anchor, visible=visible
    )


def test_every_block_type_has_defaults():
    assert len(BlockType) == 19
    assert set(BLOCK_DEFAULTS) == set(BlockType)


def test_parse_rejects_unknown_type():
    assert BlockType.parse("faq") is BlockType.FAQ
    with pytest.raises(InvariantViolation):
        BlockType.parse("carousel")


def test_default_block_data_is_a_fresh_copy():
    data = default_block_data("faq")
    data["items"].append({"question": "?"})

    assert BLOCK_DEFAULTS[BlockType.FAQ]["items"] == []


def test_merge_block_data_overlays_defaults():
    data = merge_block_data("text", {"body": "Olá", "extra": 1})

    assert data["body"] == "Olá"
    assert data["align"] == "left"
    assert data["extra"] == 1


def test_block_display_title():
    assert block_display_title("faq", {"title": "  Dúvidas  "}) == "Dúvidas"
    assert block_display_title("divider", {"title": "ignored"}) == ""
    assert block_display_title("image", None) == ""


def test_derive_anchor_prefers_label_then_title():
    assert derive_anchor("Nossos Produtos", "product_grid", {"title": "Vitrine"}) == "nossos-produtos"
    assert derive_anchor("  ", "faq", {"title": "Perguntas Frequentes"}) == "perguntas-frequentes"
    assert derive_anchor(None, "divider", {}) == ""


def test_anchor_conflicts_ignores_the_block_itself():
    blocks = [_block("a", 0, anchor="faq"), _block("b", 1, anchor="sobre")]

    assert anchor_conflicts(blocks, "faq") is True
    assert anchor_conflicts(blocks, "faq", exclude_id="a") is False
    assert anchor_conflicts(blocks, "") is False


def test_unique_anchor_adds_suffix_within_length_limit():
    long_anchor = "a" * 50
    blocks = [_block("a", 0, anchor=long_anchor), _block("b", 1, anchor="faq")]

    assert unique_anchor("faq", blocks) == "faq-1"
    assert unique_anchor("contato", blocks) == "contato"

    suffixed = unique_anchor(long_anchor, blocks)
    assert suffixed != long_anchor
    assert len(suffixed) <= 50


def test_navigation_items_only_lists_visible_labelled_blocks():
    blocks = [
        _block("c", 2, label="Contato", anchor="contato"),
        _block("a", 0, label="Sobre", anchor="sobre"),
        _block("b", 1, label="Oculto", anchor="oculto", visible=False),
        _block("d", 3),
    ]

    assert navigation_items(blocks) == [
        {"block_id": "a", "label": "Sobre", "anchor": "sobre"},
        {"block_id": "c", "label": "Contato", "anchor": "contato"},
    ]


def test_block_invariants():
    assert_block_sort([_block("a", 0), _block("b", 3)])
    with pytest.raises(InvariantViolation):
        assert_block_sort([_block("a", 1), _block("b", 1)])

    assert_anchor_slug(None)
    assert_anchor_slug("sobre-nos")
    with pytest.raises(InvariantViolation):
        assert_anchor_slug("Sobre Nós")
    with pytest.raises(InvariantViolation):
        assert_anchor_slug("a" * 51)

    with pytest.raises(InvariantViolation):
        assert_unique_anchors([_block("a", 0, anchor="faq"), _block("b", 1, anchor="faq")])
