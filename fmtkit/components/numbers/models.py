"""
Numbers component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

# --- Validation Error ---


@dataclass(frozen=True)
class NumberValidationError:
    """Numeric formatting validation error."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class DurationInput:
    """Input for formatting a duration in seconds."""

    seconds: float


@dataclass(frozen=True)
class BytesInput:
    """Input for formatting a byte count."""

    size: float
    decimals: int | None = None


@dataclass(frozen=True)
class NumberInput:
    """Input for abbreviating a large number."""

    value: float
    decimals: int | None = None


@dataclass(frozen=True)
class CurrencyInput:
    """Input for formatting a monetary amount."""

    value: float
    currency: str
    allow_negative: bool | None = None


# --- Output Models ---


@dataclass(frozen=True)
class FormattedOutput:
    """Output containing a formatted string."""

    value: str | None
    errors: list[NumberValidationError] = field(default_factory=list)
    success: bool = True
