# catalog_builder/normalizers/pagination.py
from typing import Any, Callable, Dict, List, Optional

from catalog_builder.utils.pagination import CursorMeta


def normalize_pagination(
    items: List[Any],
    normalize_fn: Callable[[Any], Dict[str, Any]],
    *,
    cursor: Optional[CursorMeta] = None,
) -> Dict[str, Any]:
    """
    Normalize a cursor-paginated list response.
    """
    response: Dict[str, Any] = {
        "items": [normalize_fn(item) for item in items],
    }

    if cursor is not None:
        response["pagination"] = {
            "has_more": cursor["has_more"],
            "next_cursor": cursor["next_cursor"],
        }

    return response
