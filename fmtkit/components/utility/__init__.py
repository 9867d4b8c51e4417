"""
Utility component - generic object helpers.
"""

from ._impl import (
    Debounced,
    Throttled,
    debounce,
    deep_clone,
    disable_on_empty_values,
    disable_on_equal_values,
    is_empty,
    throttle,
)

__all__ = [
    "Debounced",
    "Throttled",
    "debounce",
    "deep_clone",
    "disable_on_empty_values",
    "disable_on_equal_values",
    "is_empty",
    "throttle",
]
