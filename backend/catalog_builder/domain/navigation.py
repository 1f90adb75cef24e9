"""
In-page navigation derived from block labels and anchors.
"""
from typing import Iterable, List, Optional, Set

from .blocks import block_display_title
from .slugs import MAX_SLUG_LENGTH, slugify, unique_slug


def derive_anchor(label: Optional[str], block_type, data) -> str:
    """
    Anchor for a block: the slugified label, else the slugified display
    title, else an empty string.
    """
    if label and label.strip():
        return slugify(label)
    return slugify(block_display_title(block_type, data))


def taken_anchors(blocks: Iterable, exclude_id: Optional[str] = None) -> Set[str]:
    return {
        block.anchor_slug
        for block in blocks
        if block.anchor_slug and block.id != exclude_id
    }


def anchor_conflicts(blocks: Iterable, anchor: Optional[str], exclude_id: Optional[str] = None) -> bool:
    """Uniqueness hook: True when a sibling block already uses ``anchor``."""
    if not anchor:
        return False
    return anchor in taken_anchors(blocks, exclude_id)


def unique_anchor(base: str, blocks: Iterable, exclude_id: Optional[str] = None) -> str:
    taken = taken_anchors(blocks, exclude_id)
    anchor = slugify(base) or "secao"
    if anchor not in taken:
        return anchor

    # Leave room for a "-NNNNN" suffix within the slug length limit
    stem = anchor[:MAX_SLUG_LENGTH - 6].rstrip("-")
    return unique_slug(stem, taken.__contains__, fallback="secao")


def navigation_items(blocks: Iterable) -> List[dict]:
    """Visible blocks carrying both a label and an anchor, in display order."""
    return [
        {
            "block_id": block.id,
            "label": block.navigation_label,
            "anchor": block.anchor_slug,
        }
        for block in sorted(blocks, key=lambda b: b.sort)
        if block.visible and block.navigation_label and block.anchor_slug
    ]
