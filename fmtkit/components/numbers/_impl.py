"""
Numeric formatting - durations, byte sizes, abbreviated numbers and currency.

Key behaviors:
- Durations render as HH:MM:SS, or MM:SS when there are no whole hours
- Byte sizes scale by powers of 1024 and drop trailing zeros ("1 KB")
- Large numbers abbreviate to K/M/B with fixed decimals
- NGN renders as a naira sign plus a grouped decimal; every other
  currency uses standard currency formatting in a fixed reporting locale
"""

from __future__ import annotations

import re

from babel.numbers import format_currency as babel_format_currency
from babel.numbers import format_decimal

from fmtkit.core.locale import babel_locale
from fmtkit.core.types import CURRENCIES

BYTE_UNITS: tuple[str, ...] = ("Bytes", "KB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB")

NAIRA_SIGN = "₦"

# A letter symbol ("CHF") touching a digit gets a no-break space, as in CLDR currency spacing
_LETTER_THEN_DIGIT = re.compile(r"([^\W\d_])(\d)")
_DIGIT_THEN_LETTER = re.compile(r"(\d)([^\W\d_])")


def _plain_number(value: float) -> str:
    """Render a number without a trailing '.0' for integral values."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_duration(seconds: float) -> str:
    """
    Format a duration in seconds as HH:MM:SS (or MM:SS below one hour).

    Example:
        >>> format_duration(3661)
        '01:01:01'
        >>> format_duration(59)
        '00:59'
    """
    if seconds < 0:
        raise ValueError(f"duration must be non-negative, got {seconds}")

    hours = int(seconds // 3600)
    minutes = int(seconds % 3600 // 60)
    secs = int(seconds % 60)

    parts = [f"{minutes:02d}", f"{secs:02d}"]
    if hours > 0:
        parts.insert(0, f"{hours:02d}")
    return ":".join(parts)


def format_bytes(size: float, decimals: int = 2) -> str:
    """
    Format a byte count with a power-of-1024 unit.

    Example:
        >>> format_bytes(123456789)
        '117.74 MB'
    """
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")
    if size == 0:
        return "0 Bytes"

    dm = max(decimals, 0)
    # floor(log1024(size)) without float log error at exact powers
    index = (int(size).bit_length() - 1) // 10 if size >= 1 else 0
    index = min(index, len(BYTE_UNITS) - 1)

    scaled = float(f"{size / 1024**index:.{dm}f}")
    return f"{_plain_number(scaled)} {BYTE_UNITS[index]}"


def format_number(value: float, decimals: int = 2) -> str:
    """
    Abbreviate large numbers with K, M or B.

    Example:
        >>> format_number(2500000)
        '2.50M'
    """
    if value < 1_000:
        return _plain_number(value)
    if value < 1_000_000:
        return f"{value / 1_000:.{decimals}f}K"
    if value < 1_000_000_000:
        return f"{value / 1_000_000:.{decimals}f}M"
    return f"{value / 1_000_000_000:.{decimals}f}B"


def format_currency(
    value: float,
    currency: str,
    allow_negative: bool = False,
    *,
    locale: str = "en-US",
    naira_locale: str = "en-US",
) -> str:
    """
    Format a monetary amount.

    Negative amounts are clamped to zero unless allow_negative is set.
    NGN bypasses currency-style formatting: it is the naira sign followed by
    the grouped decimal in naira_locale. Other codes use the standard
    currency format of the reporting locale.
    """
    if currency not in CURRENCIES:
        raise ValueError(f"Unsupported currency: {currency!r}")

    amount = value if allow_negative else max(0, value)

    if currency == "NGN":
        return NAIRA_SIGN + format_decimal(amount, locale=babel_locale(naira_locale))

    formatted = babel_format_currency(amount, currency, locale=babel_locale(locale))
    formatted = _LETTER_THEN_DIGIT.sub("\\1\u00a0\\2", formatted)
    return _DIGIT_THEN_LETTER.sub("\\1\u00a0\\2", formatted)
