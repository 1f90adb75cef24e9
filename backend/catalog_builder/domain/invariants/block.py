from collections import Counter

from .exceptions import InvariantViolation
from ..slugs import MAX_SLUG_LENGTH, slugify


def assert_block_sort(blocks):
    """Sort values must be unique; gaps are allowed."""
    sorts = [block.sort for block in blocks]
    duplicated = sorted(value for value, count in Counter(sorts).items() if count > 1)
    if duplicated:
        raise InvariantViolation(
            f"Block sort values must be unique within a catalog: {duplicated}"
        )


def assert_anchor_slug(anchor):
    if not anchor:
        return

    if slugify(anchor) != anchor:
        raise InvariantViolation(f"Anchor slug is not normalized: {anchor!r}")

    if len(anchor) > MAX_SLUG_LENGTH:
        raise InvariantViolation(
            f"Anchor slug longer than {MAX_SLUG_LENGTH} characters: {anchor!r}"
        )


def assert_unique_anchors(blocks):
    anchors = [block.anchor_slug for block in blocks if block.anchor_slug]
    duplicated = sorted(value for value, count in Counter(anchors).items() if count > 1)
    if duplicated:
        raise InvariantViolation(
            f"Anchor slugs must be unique within a catalog: {duplicated}"
        )
