from typing import Set

DRAFT = "rascunho"
PUBLISHED = "publicado"

CATALOG_STATUSES: Set[str] = {DRAFT, PUBLISHED}

# Flags that may be toggled independently of each other
CATALOG_FLAG_FIELDS: Set[str] = {"status", "link_active", "on_profile"}


def assert_catalog_status(status: str) -> None:
    """
    Guards status values. Both directions are allowed: a catalog can be
    published and returned to draft any number of times.
    """
    if status not in CATALOG_STATUSES:
        raise ValueError(
            f"Illegal catalog status: {status!r} (expected one of {sorted(CATALOG_STATUSES)})"
        )
