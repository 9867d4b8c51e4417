"""
Arrays component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

# --- Validation Error ---


@dataclass(frozen=True)
class ArrayValidationError:
    """Array operation validation error."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class GroupInput:
    """Input for grouping records by a field."""

    data: list[Any]
    key: str


@dataclass(frozen=True)
class PaginateInput:
    """Input for slicing one page out of a list."""

    data: list[Any]
    page: int
    page_size: int


@dataclass(frozen=True)
class DedupeInput:
    """Input for removing records with a duplicate value at a path."""

    data: list[Any]
    path: str


@dataclass(frozen=True)
class SortInput:
    """Input for sorting records by a field."""

    data: list[Any]
    key: str
    in_place: bool = False


# --- Output Models ---


@dataclass(frozen=True)
class GroupOutput:
    """Output containing grouped records."""

    groups: dict[str, list[Any]]
    errors: list[ArrayValidationError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class PageOutput:
    """Output containing one page of records."""

    items: list[Any]
    page: int
    page_size: int
    total_items: int
    total_pages: int
    errors: list[ArrayValidationError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class ListOutput:
    """Output containing a list of records (dedupe, sort)."""

    items: list[Any]
    errors: list[ArrayValidationError] = field(default_factory=list)
    success: bool = True
