"""
Slug normalization and collision-free slug search.

Used for catalog URLs and for in-page block anchors.
"""
import logging
import re
import unicodedata
from typing import Callable

logger = logging.getLogger(__name__)

MAX_SLUG_LENGTH = 50
DEFAULT_MAX_ATTEMPTS = 10000

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


class SlugUnavailable(Exception):
    """No free slug was found within the allowed number of probes."""


def slugify(text) -> str:
    """
    Normalize arbitrary text into a URL-safe slug.

    "Cardápio de Verão!" -> "cardapio-de-verao"
    """
    if text is None:
        return ""

    value = str(text).lower().strip()

    # Strip accents: decompose, then drop combining marks
    value = unicodedata.normalize("NFD", value)
    value = "".join(ch for ch in value if not unicodedata.combining(ch))

    value = _NON_ALNUM.sub("-", value).strip("-")

    # Truncation can expose a trailing hyphen
    return value[:MAX_SLUG_LENGTH].strip("-")


def unique_slug(
    base,
    exists: Callable[[str], bool],
    *,
    fallback: str = "catalogo",
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> str:
    """
    Find the first free slug derived from ``base``.

    Probes ``slug``, then ``slug-1``, ``slug-2``, ... until ``exists``
    reports the candidate as free. A lookup that raises counts as free.

    The stem is shortened so a suffixed candidate stays within
    ``MAX_SLUG_LENGTH``.

    Raises:
    - SlugUnavailable after ``max_attempts`` probes
    """
    slug = slugify(base) or slugify(fallback)
    candidate = slug

    for counter in range(max_attempts):
        if counter:
            suffix = f"-{counter}"
            candidate = slug[:MAX_SLUG_LENGTH - len(suffix)].rstrip("-") + suffix

        try:
            taken = exists(candidate)
        except Exception as exc:
            logger.warning("Slug lookup failed for %r, treating as available: %s", candidate, exc)
            return candidate

        if not taken:
            return candidate

    raise SlugUnavailable(
        f"No free slug for {slug!r} after {max_attempts} attempts"
    )
