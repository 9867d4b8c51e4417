"""
Locale and time zone resolution.

Locale data (month/weekday names, digit grouping, currency symbols) comes
from Babel's CLDR tables; fmtkit keeps no locale database of its own.
"""

from __future__ import annotations

from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from babel import Locale, UnknownLocaleError

from fmtkit.core.types import TIMEZONE_MAP


@lru_cache(maxsize=64)
def babel_locale(tag: str) -> Locale:
    """
    Parse a BCP 47 style tag ("en-US") into a Babel Locale.

    Raises ValueError for tags Babel does not know.
    """
    try:
        return Locale.parse(tag, sep="-")
    except (UnknownLocaleError, ValueError) as e:
        raise ValueError(f"Unknown locale: {tag!r}") from e


@lru_cache(maxsize=64)
def resolve_timezone(label: str) -> ZoneInfo:
    """
    Resolve a time zone label ("PST", "CST-China") or IANA name to a ZoneInfo.

    Raises ValueError when neither the label map nor the zone database
    knows the name.
    """
    name = TIMEZONE_MAP.get(label, label)
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValueError(f"Unknown time zone: {label!r}") from e
