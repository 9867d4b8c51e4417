"""
Arrays component - grouping, pagination, dedupe and sort over record lists.
"""

from ._impl import (
    dedupe_by_path,
    get_field,
    group_by,
    page_count,
    paginate,
    resolve_path,
    sort_by_key,
)
from .component import run_dedupe, run_group, run_paginate, run_sort
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

__all__ = [
    # Entry points
    "run_dedupe",
    "run_group",
    "run_paginate",
    "run_sort",
    # Input models
    "DedupeInput",
    "GroupInput",
    "PaginateInput",
    "SortInput",
    # Output models
    "ArrayValidationError",
    "GroupOutput",
    "ListOutput",
    "PageOutput",
    # _impl re-exports
    "dedupe_by_path",
    "get_field",
    "group_by",
    "page_count",
    "paginate",
    "resolve_path",
    "sort_by_key",
]
