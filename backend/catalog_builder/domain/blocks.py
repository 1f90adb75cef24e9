"""
The fixed catalog of block kinds and the payload each kind carries.

A block's ``data`` is a tagged union keyed by ``BlockType``: every kind
declares its default payload here, and anything that renders or
serializes blocks dispatches on the same enum.
"""
from __future__ import annotations

import copy
from enum import Enum
from typing import Any, Dict, Optional

from .invariants.exceptions import InvariantViolation


class BlockType(str, Enum):
    COVER = "cover"
    HEADING = "heading"
    TEXT = "text"
    IMAGE = "image"
    VIDEO = "video"
    PRODUCT_GRID = "product_grid"
    CATEGORY_GRID = "category_grid"
    ABOUT = "about"
    ABOUT_BUSINESS = "about_business"
    CONTACT = "contact"
    SOCIALS = "socials"
    EXTERNAL_LINKS = "external_links"
    TESTIMONIALS = "testimonials"
    BENEFITS = "benefits"
    FAQ = "faq"
    IMPORTANT_INFO = "important_info"
    LOCATION = "location"
    CATALOGS = "catalogs"
    DIVIDER = "divider"

    @classmethod
    def parse(cls, value) -> "BlockType":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvariantViolation(f"Unknown block type: {value!r}") from None


BLOCK_DEFAULTS: Dict[BlockType, Dict[str, Any]] = {
    BlockType.COVER: {
        "title": "",
        "subtitle": "",
        "image_url": None,
        "images": [],
        "layout": "center",
        "align": "center",
        "use_profile_logo": True,
    },
    BlockType.HEADING: {"title": "", "body": "", "align": "left"},
    BlockType.TEXT: {"title": "", "body": "", "align": "left", "show_frame": False},
    BlockType.IMAGE: {
        "image_url": None,
        "caption": "",
        "show_caption": False,
        "align": "center",
        "width": "full",
        "corners": "rounded",
    },
    BlockType.VIDEO: {"title": "", "url": ""},
    BlockType.PRODUCT_GRID: {
        "title": "",
        "source": "all",
        "product_ids": [],
        "categories": [],
        "tags": [],
        "limit": 12,
        "sort": "recent",
        "show_price": True,
        "show_tags": False,
    },
    BlockType.CATEGORY_GRID: {
        "title": "",
        "description": "",
        "selected_categories": [],
        "columns": 2,
        "show_count": True,
        "show_button": False,
        "button_text": "",
    },
    BlockType.ABOUT: {"title": "", "body": ""},
    BlockType.ABOUT_BUSINESS: {"title": "", "body": "", "image_url": None},
    BlockType.CONTACT: {
        "title": "",
        "show_whatsapp": True,
        "show_phone": False,
        "show_email": False,
        "whatsapp_label": "",
        "phone_label": "",
        "email_label": "",
    },
    BlockType.SOCIALS: {
        "show_instagram": True,
        "show_facebook": False,
        "show_youtube": False,
        "show_website": False,
    },
    BlockType.EXTERNAL_LINKS: {"title": "", "links": []},
    BlockType.TESTIMONIALS: {"title": "", "items": [], "background": "default"},
    BlockType.BENEFITS: {
        "title": "",
        "subtitle": "",
        "items": [],
        "layout": "list",
        "background": "default",
    },
    BlockType.FAQ: {"title": "", "items": [], "background": "default"},
    BlockType.IMPORTANT_INFO: {
        "title": "",
        "items": [],
        "layout": "list",
        "background": "default",
    },
    BlockType.LOCATION: {
        "title": "",
        "description": "",
        "selected_locations": [],
        "layout": "list",
    },
    BlockType.CATALOGS: {"catalog_ids": [], "layout": "grid", "columns": 2},
    BlockType.DIVIDER: {},
}

_missing = set(BlockType) - set(BLOCK_DEFAULTS)
if _missing:
    raise RuntimeError(f"Block types without a default payload: {sorted(_missing)}")


def default_block_data(block_type) -> Dict[str, Any]:
    return copy.deepcopy(BLOCK_DEFAULTS[BlockType.parse(block_type)])


def merge_block_data(block_type, data: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Type defaults overlaid with ``data``.

    Keys the kind does not declare are kept as-is; payloads are not
    validated against a schema.
    """
    merged = default_block_data(block_type)
    merged.update(copy.deepcopy(data or {}))
    return merged


def block_display_title(block_type, data: Optional[Dict[str, Any]]) -> str:
    if BlockType.parse(block_type) is BlockType.DIVIDER:
        return ""
    title = (data or {}).get("title")
    return title.strip() if isinstance(title, str) else ""
