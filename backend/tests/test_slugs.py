import pytest

from catalog_builder.domain.slugs import SlugUnavailable, slugify, unique_slug


@pytest.mark.parametrize("text, expected", [
    ("Cardápio de Verão", "cardapio-de-verao"),
    ("  Açaí & Café!!  ", "acai-cafe"),
    ("Produtos---Novos", "produtos-novos"),
    ("ÀÉÎÕÜ ç ñ", "aeiou-c-n"),
    ("2024 Coleção #1", "2024-colecao-1"),
    ("", ""),
    ("!!!", ""),
    (None, ""),
])
def test_slugify_normalizes_text(text, expected):
    assert slugify(text) == expected


@pytest.mark.parametrize("text", [
    "Cardápio de Verão",
    "a" * 49 + " b",
    "-- leading and trailing --",
    "Ünïcödé wörds everywhere in a rather long title that keeps going",
])
def test_slugify_is_idempotent(text):
    once = slugify(text)
    assert slugify(once) == once


def test_slugify_truncates_to_fifty_characters_without_trailing_hyphen():
    slug = slugify("a" * 49 + " bcd")
    assert len(slug) <= 50
    assert not slug.endswith("-")


def test_unique_slug_returns_base_when_free():
    assert unique_slug("Menu", lambda candidate: False) == "menu"


def test_unique_slug_appends_increasing_suffix():
    taken = {"menu", "menu-1", "menu-2"}
    slug = unique_slug("Menu", taken.__contains__)

    assert slug == "menu-3"
    assert slug not in taken
    assert slug.startswith(slugify("Menu"))


def test_unique_slug_uses_fallback_for_empty_base():
    assert unique_slug("!!!", lambda candidate: False) == "catalogo"
    assert unique_slug("", {"secao"}.__contains__, fallback="secao") == "secao-1"


def test_unique_slug_treats_lookup_errors_as_available():
    def exists(candidate):
        raise ConnectionError("backend unreachable")

    assert unique_slug("Menu", exists) == "menu"


def test_unique_slug_is_bounded():
    with pytest.raises(SlugUnavailable):
        unique_slug("Menu", lambda candidate: True, max_attempts=25)


def test_unique_slug_probes_exactly_max_attempts():
    probes = []

    def exists(candidate):
        probes.append(candidate)
        return True

    with pytest.raises(SlugUnavailable):
        unique_slug("menu", exists, max_attempts=3)

    assert probes == ["menu", "menu-1", "menu-2"]


def test_unique_slug_suffix_stays_within_length_limit():
    base = "Cardápio completo de verão com todos os pratos da casa"
    full = slugify(base)
    assert len(full) > 48

    slug = unique_slug(base, {full}.__contains__)

    assert slug.endswith("-1")
    assert len(slug) <= 50
    assert slugify(slug) == slug
    assert slug.startswith(full[:40])


def test_unique_slug_shortens_stem_for_longer_counters():
    full = "a" * 50
    taken = {full} | {f"{'a' * (50 - len(str(n)) - 1)}-{n}" for n in range(1, 12)}

    slug = unique_slug(full, taken.__contains__)

    assert slug == "a" * 47 + "-12"


def test_unique_slug_strips_hyphen_exposed_by_shortening():
    base = "a" * 47 + "-bc"
    slug = unique_slug(base, {base}.__contains__)

    assert slug == "a" * 47 + "-1"
