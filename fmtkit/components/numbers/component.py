"""
Numbers component - duration, byte size, abbreviated number and currency formatting.

Invariants:
- format_bytes(0) is "0 Bytes"
- Durations never show an hours field when hours == 0
- Currency amounts are clamped at zero unless negatives are allowed
- NGN keeps its naira-sign rendering regardless of the reporting locale
"""

from __future__ import annotations

import logging

from fmtkit.core.types import CURRENCIES

from ._impl import format_bytes, format_currency, format_duration, format_number
from .models import (
    BytesInput,
    CurrencyInput,
    DurationInput,
    FormattedOutput,
    NumberInput,
    NumberValidationError,
)
from .ports import RulesPort

logger = logging.getLogger(__name__)

DEFAULT_DECIMALS = 2
DEFAULT_LOCALE = "en-US"


def _failed(code: str, message: str, field_name: str) -> FormattedOutput:
    logger.debug("Numeric formatting rejected: %s (%s)", code, field_name)
    return FormattedOutput(
        value=None,
        errors=[NumberValidationError(code=code, message=message, field=field_name)],
        success=False,
    )


# --- Component Entry Points ---


def run_duration(inp: DurationInput) -> FormattedOutput:
    """
    Format a duration in seconds.

    Args:
        inp: Input containing the number of seconds.

    Returns:
        FormattedOutput with "HH:MM:SS" / "MM:SS" or errors.
    """
    if inp.seconds < 0:
        return _failed("negative_duration", "Duration must not be negative", "seconds")
    return FormattedOutput(value=format_duration(inp.seconds))


def run_bytes(inp: BytesInput, *, rules: RulesPort | None = None) -> FormattedOutput:
    """
    Format a byte count.

    Args:
        inp: Input containing the size and optional decimals.
        rules: Optional rules port supplying default decimals.

    Returns:
        FormattedOutput with the scaled size or errors.
    """
    if inp.size < 0:
        return _failed("negative_size", "Size must not be negative", "size")

    decimals = inp.decimals
    if decimals is None:
        decimals = rules.get_bytes_decimals() if rules else DEFAULT_DECIMALS
    return FormattedOutput(value=format_bytes(inp.size, decimals))


def run_number(inp: NumberInput, *, rules: RulesPort | None = None) -> FormattedOutput:
    """
    Abbreviate a large number with K/M/B.

    Args:
        inp: Input containing the value and optional decimals.
        rules: Optional rules port supplying default decimals.
    """
    decimals = inp.decimals
    if decimals is None:
        decimals = rules.get_number_decimals() if rules else DEFAULT_DECIMALS
    if decimals < 0:
        return _failed("invalid_decimals", "Decimals must not be negative", "decimals")
    return FormattedOutput(value=format_number(inp.value, decimals))


def run_currency(inp: CurrencyInput, *, rules: RulesPort | None = None) -> FormattedOutput:
    """
    Format a monetary amount.

    Args:
        inp: Input containing amount, currency code and negative policy.
        rules: Optional rules port supplying locales and the default
            negative policy.

    Returns:
        FormattedOutput with the currency string or errors.
    """
    if inp.currency not in CURRENCIES:
        return _failed(
            "invalid_currency",
            f"Currency must be one of: {', '.join(CURRENCIES)}",
            "currency",
        )

    allow_negative = inp.allow_negative
    if allow_negative is None:
        allow_negative = rules.get_allow_negative() if rules else False

    return FormattedOutput(
        value=format_currency(
            inp.value,
            inp.currency,
            allow_negative,
            locale=rules.get_reporting_locale() if rules else DEFAULT_LOCALE,
            naira_locale=rules.get_naira_locale() if rules else DEFAULT_LOCALE,
        )
    )
