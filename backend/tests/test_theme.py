from catalog_builder.domain.theme import (
    DEFAULT_ACCENT,
    ThemeTokens,
    effective_theme,
    hex_to_hsl,
    theme_variables,
)

PROFILE = {"theme_mode": "dark", "accent_color": "#FF0000", "font_theme": "modern", "cta_shape": "capsule"}


def test_brand_theme_is_used_by_default():
    tokens = effective_theme({"accent_color": "#00FF00"}, PROFILE)
    assert tokens == ThemeTokens(mode="dark", accent_color="#FF0000", font="modern", cta_shape="capsule")


def test_catalog_overrides_apply_when_brand_is_off():
    tokens = effective_theme(
        {"use_brand": False, "mode": "light", "accent_color": "#00FF00", "font": "elegant"},
        PROFILE,
    )
    assert tokens.accent_color == "#00FF00"
    assert tokens.font == "elegant"
    assert tokens.cta_shape == "rounded"


def test_defaults_without_profile():
    assert effective_theme() == ThemeTokens(accent_color=DEFAULT_ACCENT)


def test_hex_to_hsl():
    assert hex_to_hsl("#8B5CF6") == "258 90% 66%"
    assert hex_to_hsl("#FFFFFF") == "0 0% 100%"
    assert hex_to_hsl("#FF0000") == "0 100% 50%"
    assert hex_to_hsl("not-a-color") == hex_to_hsl(DEFAULT_ACCENT)


def test_theme_variables():
    variables = theme_variables(ThemeTokens(mode="dark", cta_shape="square", font="elegant"))

    assert variables["--background"] == "240 10% 10%"
    assert variables["--primary"] == "258 90% 66%"
    assert variables["--radius"] == "0.375rem"
    assert variables["--font-heading"].startswith("Playfair Display")
