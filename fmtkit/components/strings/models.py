"""
Strings component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

# --- Validation Error ---


@dataclass(frozen=True)
class StringValidationError:
    """String transformation validation error."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class TransformInput:
    """
    Input for a named text transformation.

    sep/join_sep apply to "capitalize"; max_len applies to "truncate"
    (falls back to the rules default when unset).
    """

    text: str
    operation: str
    sep: str = " "
    join_sep: str = " "
    max_len: int | None = None


@dataclass(frozen=True)
class AnalyzeInput:
    """Input for text statistics."""

    text: str


# --- Output Models ---


@dataclass(frozen=True)
class TransformOutput:
    """Output containing transformed text."""

    value: str | None
    errors: list[StringValidationError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class AnalyzeOutput:
    """Output containing text statistics."""

    word_count: int
    is_palindrome: bool
    length: int
