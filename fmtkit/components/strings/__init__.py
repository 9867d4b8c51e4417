"""
Strings component - case conversion, slugs and small text helpers.
"""

from ._impl import (
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
from .component import OPERATIONS, run_analyze, run_transform
from .models import (
    AnalyzeInput,
    AnalyzeOutput,
    StringValidationError,
    TransformInput,
    TransformOutput,
)
from .ports import RulesPort

__all__ = [
    # Entry points
    "OPERATIONS",
    "run_analyze",
    "run_transform",
    # Input models
    "AnalyzeInput",
    "TransformInput",
    # Output models
    "AnalyzeOutput",
    "StringValidationError",
    "TransformOutput",
    # Ports
    "RulesPort",
    # _impl re-exports
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
]
