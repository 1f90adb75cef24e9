from typing import List, Sequence, TypeVar

from catalog_builder.domain.invariants.exceptions import InvariantViolation

T = TypeVar("T")


def move_item(items: Sequence[T], from_index: int, to_index: int) -> List[T]:
    """
    Remove the item at ``from_index`` and reinsert it at ``to_index``.
    """
    size = len(items)
    for index in (from_index, to_index):
        if not 0 <= index < size:
            raise InvariantViolation(
                f"Index {index} out of range for {size} blocks"
            )

    moved = list(items)
    moved.insert(to_index, moved.pop(from_index))
    return moved


def resequence(items: Sequence[T], order_field: str = "sort", start: int = 0) -> List[T]:
    """
    Re-assigns dense order values (start..start+N-1) following list order.
    """
    for index, item in enumerate(items, start=start):
        setattr(item, order_field, index)
    return list(items)


def reorder(items: Sequence[T], from_index: int, to_index: int, order_field: str = "sort") -> List[T]:
    return resequence(move_item(items, from_index, to_index), order_field)


def insert_after(items: Sequence[T], anchor: T, item: T, order_field: str = "sort") -> List[T]:
    """
    Place ``item`` right after ``anchor`` and re-sequence the list.
    """
    ordered = list(items)
    ordered.insert(ordered.index(anchor) + 1, item)
    return resequence(ordered, order_field)


def next_order(items: Sequence, order_field: str = "sort") -> int:
    """Append-to-end value: one past the current maximum, 0 when empty."""
    values = [getattr(item, order_field) for item in items]
    return max(values) + 1 if values else 0
