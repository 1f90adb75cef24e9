from .block import assert_block_sort
from .exceptions import InvariantViolation
from ..lifecycle.catalog import CATALOG_STATUSES
from ..slugs import slugify


def assert_catalog(catalog):
    if not catalog.title or not catalog.title.strip():
        raise InvariantViolation("Catalog title is required.")

    if not catalog.slug or slugify(catalog.slug) != catalog.slug:
        raise InvariantViolation(f"Catalog slug is not normalized: {catalog.slug!r}")

    if catalog.status not in CATALOG_STATUSES:
        raise InvariantViolation(f"Unknown catalog status: {catalog.status!r}")

    assert_block_sort(catalog.blocks)
