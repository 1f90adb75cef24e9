from catalog_builder.domain.navigation import navigation_items
from catalog_builder.domain.theme import effective_theme, theme_variables
from .block import normalize_block


def normalize_catalog(catalog, admin=False, include_blocks=False):
    data = {
        "id": catalog.id,
        "title": catalog.title,
        "description": catalog.description,
        "slug": catalog.slug,
        "cover": catalog.cover,
        "theme_overrides": catalog.theme_overrides or {},
    }

    if admin:
        data["status"] = catalog.status
        data["link_active"] = catalog.link_active
        data["on_profile"] = catalog.on_profile
        data["created_at"] = catalog.created_at.isoformat() if catalog.created_at else None

    if include_blocks:
        blocks = sorted(catalog.blocks, key=lambda b: b.sort)
        data["blocks"] = [normalize_block(b, admin=admin) for b in blocks]

    return data


def normalize_public_catalog(catalog, profile=None):
    """
    Rendering payload for visitors: visible blocks only, the derived
    in-page navigation and the resolved theme tokens.
    """
    blocks = [b for b in sorted(catalog.blocks, key=lambda b: b.sort) if b.visible]
    theme = effective_theme(catalog.theme_overrides, profile)

    return {
        "id": catalog.id,
        "title": catalog.title,
        "description": catalog.description,
        "slug": catalog.slug,
        "cover": catalog.cover,
        "blocks": [normalize_block(b) for b in blocks],
        "navigation": navigation_items(blocks),
        "theme": {
            "mode": theme.mode,
            "accent_color": theme.accent_color,
            "font": theme.font,
            "cta_shape": theme.cta_shape,
            "variables": theme_variables(theme),
        },
    }
