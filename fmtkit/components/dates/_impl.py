"""
Date and time formatting.

Dates are rendered from locale-resolved parts (year, 2-digit month,
2-digit day, short month/weekday names) arranged by a closed set of
patterns. Times are rendered in 24h or 12h form with the locale's day
period names. Relative ("time ago") and difference strings are English only.

Key behaviors:
- A timezone converts the instant before formatting; naive datetimes are
  taken as UTC for that conversion, and formatted as-is without a timezone
- replace_format collapses every run of separators into one replacement
- format_time_ago takes "now" explicitly; the default is read at call time
- Month and year buckets in format_time_ago use 30-day months
"""

from __future__ import annotations

import math
import re
from datetime import UTC, datetime

from babel import Locale
from babel.dates import format_date as babel_format_date
from babel.dates import format_time as babel_format_time

from fmtkit.core.locale import babel_locale, resolve_timezone
from fmtkit.core.types import DATE_PATTERNS

# Babel (CLDR) patterns per time pattern; the day period trails the time in every locale
TIME_FORMATS: dict[str, str] = {
    "hh:mm": "HH:mm",
    "hh:mm:ss": "HH:mm:ss",
    "hh:mm AM/PM": "hh:mm a",
    "hh:mm:ss AM/PM": "hh:mm:ss a",
}

# Quoted literals in CLDR patterns, e.g. 'de' in Spanish dates
_QUOTED_LITERAL = re.compile(r"('(?:[^']|'')*')")
_SINGLE_DAY = re.compile(r"(?<!d)d(?!d)")

_DATE_SEPARATORS = re.compile(r"[-/, ]+")
_TIME_SEPARATORS = re.compile(r"[:/, ]+")

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600
SECONDS_PER_DAY = 86400
DAYS_PER_MONTH = 30


# --- Helpers ---


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'' if count == 1 else 's'}"


def full_date_pattern(loc: Locale) -> str:
    """The locale's full date pattern with the day of month widened to two digits."""
    parts = _QUOTED_LITERAL.split(loc.date_formats["full"].pattern)
    return "".join(
        part if i % 2 else _SINGLE_DAY.sub("dd", part) for i, part in enumerate(parts)
    )


def to_zone(value: datetime, timezone: str | None) -> datetime:
    """Convert value into the named zone (label or IANA name), if one is given."""
    if timezone is None:
        return value
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(resolve_timezone(timezone))


# --- Date / Time ---


def format_date(
    value: datetime,
    pattern: str = "yyyy-mm-dd",
    locale: str = "en-US",
    replace_format: str | None = None,
    timezone: str | None = None,
) -> str:
    """
    Format a date with one of the fixed patterns.

    Example:
        >>> format_date(datetime(2024, 3, 5), "dd-mmm")
        '05 Mar'
        >>> format_date(datetime(2024, 3, 5), replace_format="/")
        '2024/03/05'
    """
    if pattern not in DATE_PATTERNS:
        raise ValueError(f"Unsupported date pattern: {pattern!r}")

    loc = babel_locale(locale)
    day_value = to_zone(value, timezone).date()

    def part(fmt: str) -> str:
        return babel_format_date(day_value, format=fmt, locale=loc)

    year = part("y")
    month = part("MM")
    day = part("dd")

    if pattern == "yyyy-mm-dd":
        formatted = f"{year}-{month}-{day}"
    elif pattern == "yyyy/mm/dd":
        formatted = f"{year}/{month}/{day}"
    elif pattern == "dd-mm-yyyy":
        formatted = f"{day}-{month}-{year}"
    elif pattern == "mm-yyyy":
        formatted = f"{month}-{year}"
    elif pattern == "dd-mmm":
        formatted = f"{day} {part('LLL')}"
    elif pattern == "mmm-dd":
        formatted = f"{part('LLL')} {day}"
    elif pattern == "ddd-mmm-dd":
        formatted = f"{part('ccc')} {part('LLL')} {day}"
    elif pattern == "mmm-yyyy":
        formatted = f"{part('LLL')} {year}"
    else:
        formatted = part(full_date_pattern(loc))

    if replace_format is not None:
        formatted = _DATE_SEPARATORS.sub(replace_format, formatted)

    return formatted


def format_time(
    value: datetime,
    pattern: str = "hh:mm",
    locale: str = "en-US",
    replace_format: str | None = None,
    timezone: str | None = None,
) -> str:
    """
    Format the time of day with one of the fixed patterns.

    Example:
        >>> format_time(datetime(2024, 3, 5, 14, 5), "hh:mm AM/PM")
        '02:05 PM'
    """
    fmt = TIME_FORMATS.get(pattern)
    if fmt is None:
        raise ValueError(f"Unsupported time pattern: {pattern!r}")

    local = to_zone(value, timezone)
    formatted = babel_format_time(local.time(), format=fmt, locale=babel_locale(locale))

    if replace_format is not None:
        formatted = _TIME_SEPARATORS.sub(replace_format, formatted)

    return formatted


# --- Relative Time ---


def format_time_ago(past: datetime, now: datetime | None = None) -> str:
    """
    Describe how long ago an instant was ("Just now", "5 mins ago", ...).

    Args:
        past: The earlier instant.
        now: Reference instant. Defaults to the current time, aware (UTC)
            when past is aware and naive otherwise.
    """
    if now is None:
        now = datetime.now(UTC) if past.tzinfo is not None else datetime.now()

    diff = math.floor((now - past).total_seconds())

    if diff < SECONDS_PER_MINUTE:
        return "Just now"
    minutes = diff // SECONDS_PER_MINUTE
    if minutes < 60:
        return f"{_plural(minutes, 'min')} ago"
    hours = minutes // 60
    if hours < 24:
        return f"{_plural(hours, 'hr')} ago"
    days = hours // 24
    if days < 7:
        return f"{_plural(days, 'day')} ago"
    weeks = days // 7
    if weeks < 4:
        return f"{_plural(weeks, 'week')} ago"
    months = days // DAYS_PER_MONTH
    if months < 12:
        return f"{_plural(months, 'month')} ago"
    years = months // 12
    return f"{_plural(years, 'year')} ago"


def format_time_diff(start: datetime, end: datetime) -> str:
    """
    Spell out the absolute difference between two instants.

    All four units are always present.

    Example:
        >>> format_time_diff(datetime(2024, 1, 1), datetime(2024, 1, 2, 1, 1, 1))
        '1 day, 1 hr, 1 min, 1 sec'
    """
    diff = abs((end - start).total_seconds())

    days = int(diff // SECONDS_PER_DAY)
    hours = int(diff % SECONDS_PER_DAY // SECONDS_PER_HOUR)
    minutes = int(diff % SECONDS_PER_HOUR // SECONDS_PER_MINUTE)
    seconds = int(diff % SECONDS_PER_MINUTE)

    return ", ".join(
        [
            _plural(days, "day"),
            _plural(hours, "hr"),
            _plural(minutes, "min"),
            _plural(seconds, "sec"),
        ]
    )
