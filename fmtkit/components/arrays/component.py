"""
Arrays component - grouping, pagination, dedupe and sort.

Invariants:
- Every input record appears in exactly one group
- Concatenating pages 1..n reconstructs the input
- Dedupe output never holds two records with the same resolved value
- Sorting is stable and does not touch the input unless in_place is set
"""

from __future__ import annotations

import logging

from ._impl import dedupe_by_path, group_by, page_count, paginate, sort_by_key
from .models import (
    ArrayValidationError,
    DedupeInput,
    GroupInput,
    GroupOutput,
    ListOutput,
    PageOutput,
    PaginateInput,
    SortInput,
)

logger = logging.getLogger(__name__)


def _require_name(value: str, code: str, field_name: str) -> list[ArrayValidationError]:
    if value:
        return []
    return [
        ArrayValidationError(
            code=code,
            message=f"{field_name} is required",
            field=field_name,
        )
    ]


# --- Component Entry Points ---


def run_group(inp: GroupInput) -> GroupOutput:
    """
    Group records by a field.

    Args:
        inp: Records and the field to group on.

    Returns:
        GroupOutput with groups keyed by the string form of the field.
    """
    errors = _require_name(inp.key, "key_required", "key")
    if errors:
        return GroupOutput(groups={}, errors=errors, success=False)

    return GroupOutput(groups=group_by(inp.data, inp.key))


def run_paginate(inp: PaginateInput) -> PageOutput:
    """
    Slice one page of records.

    Args:
        inp: Records, 1-based page number and page size.

    Returns:
        PageOutput with the page items and totals, or errors.
    """
    errors: list[ArrayValidationError] = []
    if inp.page < 1:
        errors.append(
            ArrayValidationError(
                code="page_must_be_positive",
                message="Page number must be 1 or greater",
                field="page",
            )
        )
    if inp.page_size < 1:
        errors.append(
            ArrayValidationError(
                code="page_size_must_be_positive",
                message="Page size must be 1 or greater",
                field="page_size",
            )
        )

    total_items = len(inp.data)
    if errors:
        logger.debug("Rejected pagination request: %s", [e.code for e in errors])
        return PageOutput(
            items=[],
            page=inp.page,
            page_size=inp.page_size,
            total_items=total_items,
            total_pages=0,
            errors=errors,
            success=False,
        )

    return PageOutput(
        items=paginate(inp.data, inp.page, inp.page_size),
        page=inp.page,
        page_size=inp.page_size,
        total_items=total_items,
        total_pages=page_count(total_items, inp.page_size),
    )


def run_dedupe(inp: DedupeInput) -> ListOutput:
    """
    Remove records sharing a value at a dot-separated path.

    Args:
        inp: Records and the path to key uniqueness on.

    Returns:
        ListOutput with the first record for each distinct value.
    """
    errors = _require_name(inp.path, "path_required", "path")
    if errors:
        return ListOutput(items=[], errors=errors, success=False)

    try:
        items = dedupe_by_path(inp.data, inp.path)
    except TypeError as e:
        logger.debug("Dedupe on %r hit an unhashable value: %s", inp.path, e)
        return ListOutput(
            items=[],
            errors=[
                ArrayValidationError(
                    code="unhashable_value",
                    message=f"Value at path '{inp.path}' cannot be used as a key",
                    field="path",
                )
            ],
            success=False,
        )

    return ListOutput(items=items)


def run_sort(inp: SortInput) -> ListOutput:
    """
    Sort records by a field (stable, ascending).

    Args:
        inp: Records, sort field and whether to sort the given list in place.

    Returns:
        ListOutput with the sorted records.
    """
    errors = _require_name(inp.key, "key_required", "key")
    if errors:
        return ListOutput(items=[], errors=errors, success=False)

    try:
        items = sort_by_key(inp.data, inp.key, in_place=inp.in_place)
    except TypeError as e:
        logger.debug("Sort on %r hit unorderable values: %s", inp.key, e)
        return ListOutput(
            items=[],
            errors=[
                ArrayValidationError(
                    code="unorderable_values",
                    message=f"Values of '{inp.key}' cannot be compared",
                    field="key",
                )
            ],
            success=False,
        )

    return ListOutput(items=items)
