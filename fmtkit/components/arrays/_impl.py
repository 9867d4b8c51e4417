"""
Array utilities - grouping, pagination, dedupe and sort over record lists.

Records may be mappings (field lookup by key) or plain objects
(attribute lookup). A missing field resolves to None.

Key behaviors:
- group_by keeps first-seen group order and input order inside each group
- paginate is 1-based and returns a short/empty page past the end
- dedupe_by_path keeps the first record for each resolved value and drops
  records whose path does not resolve
- sort_by_key returns a new list unless in_place is requested
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any, TypeVar

T = TypeVar("T")

_MISSING = object()


# --- Field Access ---


def get_field(record: Any, key: str) -> Any:
    """Read a single field from a mapping or an object (None if absent)."""
    if isinstance(record, Mapping):
        return record.get(key)
    return getattr(record, key, None)


def resolve_path(record: Any, path: str) -> Any:
    """
    Resolve a dot-separated path against nested mappings, objects and sequences.

    Returns the module-level _MISSING sentinel when any step is absent or
    when an intermediate value is None.
    """
    current = record
    for part in path.split("."):
        if current is None:
            return _MISSING
        if isinstance(current, Mapping):
            if part not in current:
                return _MISSING
            current = current[part]
        elif isinstance(current, Sequence) and not isinstance(current, str | bytes):
            if not part.isdigit() or int(part) >= len(current):
                return _MISSING
            current = current[int(part)]
        elif hasattr(current, part):
            current = getattr(current, part)
        else:
            return _MISSING
    return current


# --- Operations ---


def group_by(data: Iterable[T], key: str) -> dict[str, list[T]]:
    """
    Group records by the string form of a field.

    Example:
        >>> group_by([{"c": "A"}, {"c": "B"}, {"c": "A"}], "c")
        {'A': [{'c': 'A'}, {'c': 'A'}], 'B': [{'c': 'B'}]}
    """
    grouped: dict[str, list[T]] = {}
    for item in data:
        grouped.setdefault(str(get_field(item, key)), []).append(item)
    return grouped


def paginate(data: Sequence[T], page: int, page_size: int) -> list[T]:
    """
    Return the 1-based page of page_size contiguous items.

    Raises ValueError for non-positive page or page_size.
    """
    if page < 1:
        raise ValueError(f"page must be >= 1, got {page}")
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")

    start = (page - 1) * page_size
    return list(data[start : start + page_size])


def page_count(total: int, page_size: int) -> int:
    """Number of non-empty pages for total items."""
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")
    return -(-total // page_size)


def dedupe_by_path(data: Iterable[T], path: str) -> list[T]:
    """
    Remove records sharing the same value at a nested path.

    The first record seen for each value wins; records whose path does not
    resolve are dropped. Booleans never collide with the numbers they
    compare equal to (True vs 1). Resolved values must be hashable.

    Example:
        >>> rows = [{"a": {"s": 1}}, {"a": {"s": 2}}, {"a": {"s": 1}}]
        >>> dedupe_by_path(rows, "a.s")
        [{'a': {'s': 1}}, {'a': {'s': 2}}]
    """
    unique: dict[Any, T] = {}
    for item in data:
        value = resolve_path(item, path)
        if value is _MISSING:
            continue
        marker = (isinstance(value, bool), value)
        if marker not in unique:
            unique[marker] = item
    return list(unique.values())


def sort_by_key(data: list[T], key: str, *, in_place: bool = False) -> list[T]:
    """
    Stable ascending sort by a field.

    With in_place=True the given list is sorted and returned (same object);
    otherwise a new list is returned and the input is left untouched.
    """
    if in_place:
        data.sort(key=lambda item: get_field(item, key))
        return data
    return sorted(data, key=lambda item: get_field(item, key))
