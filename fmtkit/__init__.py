"""
fmtkit - stateless formatting, array, string and object helpers.

The plain functions re-exported here are the main API. Each component also
offers run_* entry points that validate input models and report errors
instead of raising (see fmtkit.components.*).
"""

from fmtkit.components.arrays import dedupe_by_path, group_by, paginate, sort_by_key
from fmtkit.components.dates import (
    format_date,
    format_time,
    format_time_ago,
    format_time_diff,
)
from fmtkit.components.numbers import (
    format_bytes,
    format_currency,
    format_duration,
    format_number,
)
from fmtkit.components.strings import (
    capitalize,
    is_palindrome,
    remove_special_chars,
    remove_whitespace,
    reverse,
    slugify,
    to_camel_case,
    to_kebab_case,
    to_pascal_case,
    to_snake_case,
    truncate,
    word_count,
)
from fmtkit.components.utility import (
    debounce,
    deep_clone,
    disable_on_empty_values,
    disable_on_equal_values,
    is_empty,
    throttle,
)

__version__ = "0.1.0"

__all__ = [
    # arrays
    "dedupe_by_path",
    "group_by",
    "paginate",
    "sort_by_key",
    # dates
    "format_date",
    "format_time",
    "format_time_ago",
    "format_time_diff",
    # numbers
    "format_bytes",
    "format_currency",
    "format_duration",
    "format_number",
    # strings
    "capitalize",
    "is_palindrome",
    "remove_special_chars",
    "remove_whitespace",
    "reverse",
    "slugify",
    "to_camel_case",
    "to_kebab_case",
    "to_pascal_case",
    "to_snake_case",
    "truncate",
    "word_count",
    # utility
    "debounce",
    "deep_clone",
    "disable_on_empty_values",
    "disable_on_equal_values",
    "is_empty",
    "throttle",
]
