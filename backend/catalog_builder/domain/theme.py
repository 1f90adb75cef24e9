"""
Theme tokens for public rendering.

Computed from the catalog's overrides and the owner's profile defaults
and handed to the rendering boundary as plain values.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

DEFAULT_ACCENT = "#8B5CF6"

FONT_FAMILIES = {
    "clean": {"heading": "Inter, sans-serif", "body": "Inter, sans-serif"},
    "elegant": {"heading": "Playfair Display, serif", "body": "Inter, sans-serif"},
    "modern": {"heading": "Poppins, sans-serif", "body": "Poppins, sans-serif"},
}

CTA_RADIUS = {
    "rounded": "1rem",
    "square": "0.375rem",
    "capsule": "9999px",
}


@dataclass(frozen=True)
class ThemeTokens:
    mode: str = "light"
    accent_color: str = DEFAULT_ACCENT
    font: str = "clean"
    cta_shape: str = "rounded"


def effective_theme(
    overrides: Optional[Mapping[str, Any]] = None,
    profile: Optional[Mapping[str, Any]] = None,
) -> ThemeTokens:
    """
    Profile defaults unless the catalog opts out of the brand theme
    with ``use_brand: false``.
    """
    overrides = overrides or {}
    profile = profile or {}

    if overrides.get("use_brand") is not False:
        return ThemeTokens(
            mode=profile.get("theme_mode") or "light",
            accent_color=profile.get("accent_color") or DEFAULT_ACCENT,
            font=profile.get("font_theme") or "clean",
            cta_shape=profile.get("cta_shape") or "rounded",
        )

    return ThemeTokens(
        mode=overrides.get("mode") or "light",
        accent_color=overrides.get("accent_color") or DEFAULT_ACCENT,
        font=overrides.get("font") or "clean",
        cta_shape=overrides.get("cta_shape") or "rounded",
    )


def hex_to_hsl(hex_color: str) -> str:
    """"#8B5CF6" -> "258 90% 66%" (the format CSS variables expect)."""
    value = hex_color.lstrip("#")
    try:
        r, g, b = (int(value[i:i + 2], 16) / 255 for i in (0, 2, 4))
    except ValueError:
        return hex_to_hsl(DEFAULT_ACCENT)

    high, low = max(r, g, b), min(r, g, b)
    lightness = (high + low) / 2
    hue = saturation = 0.0

    if high != low:
        delta = high - low
        saturation = delta / (2 - high - low) if lightness > 0.5 else delta / (high + low)
        if high == r:
            hue = ((g - b) / delta + (6 if g < b else 0)) / 6
        elif high == g:
            hue = ((b - r) / delta + 2) / 6
        else:
            hue = ((r - g) / delta + 4) / 6

    return f"{round(hue * 360)} {round(saturation * 100)}% {round(lightness * 100)}%"


def theme_variables(tokens: ThemeTokens) -> Dict[str, str]:
    dark = tokens.mode == "dark"
    accent = hex_to_hsl(tokens.accent_color)
    fonts = FONT_FAMILIES.get(tokens.font, FONT_FAMILIES["clean"])

    return {
        "--background": "240 10% 10%" if dark else "0 0% 100%",
        "--foreground": "0 0% 95%" if dark else "240 10% 10%",
        "--card": "240 10% 13%" if dark else "0 0% 100%",
        "--muted": "240 5% 20%" if dark else "240 5% 96%",
        "--muted-foreground": "240 5% 64%" if dark else "240 4% 46%",
        "--border": "240 6% 20%" if dark else "240 6% 90%",
        "--primary": accent,
        "--primary-foreground": "0 0% 100%",
        "--accent": accent,
        "--ring": accent,
        "--radius": CTA_RADIUS.get(tokens.cta_shape, CTA_RADIUS["rounded"]),
        "--font-heading": fonts["heading"],
        "--font-body": fonts["body"],
    }
