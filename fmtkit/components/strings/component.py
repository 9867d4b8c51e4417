"""
Strings component - named text transformations and text statistics.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

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
from .models import (
    AnalyzeInput,
    AnalyzeOutput,
    StringValidationError,
    TransformInput,
    TransformOutput,
)
from .ports import RulesPort

logger = logging.getLogger(__name__)

DEFAULT_TRUNCATE_LENGTH = 10
DEFAULT_ELLIPSIS = "..."

# Operations that take the text alone
SIMPLE_OPERATIONS: dict[str, Callable[[str], str]] = {
    "slugify": slugify,
    "remove_whitespace": remove_whitespace,
    "reverse": reverse,
    "camel": to_camel_case,
    "pascal": to_pascal_case,
    "snake": to_snake_case,
    "kebab": to_kebab_case,
    "remove_special_chars": remove_special_chars,
}

OPERATIONS: tuple[str, ...] = ("capitalize", "truncate", *SIMPLE_OPERATIONS)


# --- Component Entry Points ---


def run_transform(inp: TransformInput, *, rules: RulesPort | None = None) -> TransformOutput:
    """
    Apply a named transformation to text.

    Args:
        inp: Input containing text, operation name and operation options.
        rules: Optional rules port for truncation defaults.

    Returns:
        TransformOutput with the transformed text or errors.
    """
    if inp.operation == "capitalize":
        return TransformOutput(value=capitalize(inp.text, inp.sep, inp.join_sep))

    if inp.operation == "truncate":
        max_len = inp.max_len
        if max_len is None:
            max_len = rules.get_truncate_length() if rules else DEFAULT_TRUNCATE_LENGTH
        if max_len < 0:
            return TransformOutput(
                value=None,
                errors=[
                    StringValidationError(
                        code="invalid_max_len",
                        message="Truncation length must not be negative",
                        field="max_len",
                    )
                ],
                success=False,
            )
        ellipsis = rules.get_ellipsis() if rules else DEFAULT_ELLIPSIS
        return TransformOutput(value=truncate(inp.text, max_len, ellipsis))

    operation = SIMPLE_OPERATIONS.get(inp.operation)
    if operation is None:
        logger.debug("Unknown string operation requested: %r", inp.operation)
        return TransformOutput(
            value=None,
            errors=[
                StringValidationError(
                    code="unknown_operation",
                    message=f"Operation must be one of: {', '.join(OPERATIONS)}",
                    field="operation",
                )
            ],
            success=False,
        )

    return TransformOutput(value=operation(inp.text))


def run_analyze(inp: AnalyzeInput) -> AnalyzeOutput:
    """Word count, palindrome check and length for a piece of text."""
    return AnalyzeOutput(
        word_count=word_count(inp.text),
        is_palindrome=is_palindrome(inp.text),
        length=len(inp.text),
    )
