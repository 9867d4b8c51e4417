"""
Dates component - date, time, relative-time and time-difference formatting.

Invariants:
- Patterns, locales, timezones and replacement separators come from
  closed enumerations; anything else is reported, never formatted
- "Now" for relative time is read from the clock port at call time
- Calls share no mutable state
"""

from __future__ import annotations

import logging

from fmtkit.adapters.clock import SystemClock
from fmtkit.core.types import (
    DATE_PATTERNS,
    LOCALES,
    REPLACE_SEPARATORS,
    TIME_PATTERNS,
    TIMEZONES,
)

from ._impl import format_date, format_time, format_time_ago, format_time_diff
from .models import (
    DateOutput,
    DateValidationError,
    FormatDateInput,
    FormatTimeInput,
    TimeAgoInput,
    TimeDiffInput,
)
from .ports import ClockPort, RulesPort

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en-US"
DEFAULT_DATE_PATTERN = "yyyy-mm-dd"
DEFAULT_TIME_PATTERN = "hh:mm"


def validate_options(
    pattern: str,
    allowed_patterns: tuple[str, ...],
    locale: str,
    timezone: str | None,
    replace_format: str | None,
) -> list[DateValidationError]:
    """Check format options against the closed enumerations."""
    errors: list[DateValidationError] = []

    if pattern not in allowed_patterns:
        errors.append(
            DateValidationError(
                code="invalid_pattern",
                message=f"Pattern must be one of: {', '.join(allowed_patterns)}",
                field="pattern",
            )
        )

    if locale not in LOCALES:
        errors.append(
            DateValidationError(
                code="invalid_locale",
                message=f"Unsupported locale: {locale}",
                field="locale",
            )
        )

    if timezone is not None and timezone not in TIMEZONES:
        errors.append(
            DateValidationError(
                code="invalid_timezone",
                message=f"Unsupported timezone: {timezone}",
                field="timezone",
            )
        )

    if replace_format is not None and replace_format not in REPLACE_SEPARATORS:
        errors.append(
            DateValidationError(
                code="invalid_replace_format",
                message="Replacement must be one of '/', '-', ' ', ',', ':' or empty",
                field="replace_format",
            )
        )

    return errors


def _resolve(
    inp: FormatDateInput | FormatTimeInput,
    rules: RulesPort | None,
    default_pattern: str,
) -> tuple[str, str, str | None]:
    """Fill unset pattern/locale/timezone from rules (or library defaults)."""
    pattern = inp.pattern or default_pattern
    locale = inp.locale or (rules.get_default_locale() if rules else DEFAULT_LOCALE)
    timezone = inp.timezone
    if timezone is None and rules is not None:
        timezone = rules.get_default_timezone()
    return pattern, locale, timezone


def _failed(errors: list[DateValidationError]) -> DateOutput:
    logger.debug("Date formatting rejected: %s", [e.code for e in errors])
    return DateOutput(value=None, errors=errors, success=False)


# --- Component Entry Points ---


def run_format_date(inp: FormatDateInput, *, rules: RulesPort | None = None) -> DateOutput:
    """
    Format a date with a fixed pattern.

    Args:
        inp: Input containing the date and format options.
        rules: Optional rules port supplying defaults.

    Returns:
        DateOutput with the formatted date or errors.
    """
    default_pattern = rules.get_default_date_pattern() if rules else DEFAULT_DATE_PATTERN
    pattern, locale, timezone = _resolve(inp, rules, default_pattern)

    errors = validate_options(pattern, DATE_PATTERNS, locale, timezone, inp.replace_format)
    if errors:
        return _failed(errors)

    return DateOutput(
        value=format_date(
            inp.date,
            pattern=pattern,
            locale=locale,
            replace_format=inp.replace_format,
            timezone=timezone,
        )
    )


def run_format_time(inp: FormatTimeInput, *, rules: RulesPort | None = None) -> DateOutput:
    """
    Format a time of day with a fixed pattern.

    Args:
        inp: Input containing the date and format options.
        rules: Optional rules port supplying defaults.

    Returns:
        DateOutput with the formatted time or errors.
    """
    default_pattern = rules.get_default_time_pattern() if rules else DEFAULT_TIME_PATTERN
    pattern, locale, timezone = _resolve(inp, rules, default_pattern)

    errors = validate_options(pattern, TIME_PATTERNS, locale, timezone, inp.replace_format)
    if errors:
        return _failed(errors)

    return DateOutput(
        value=format_time(
            inp.date,
            pattern=pattern,
            locale=locale,
            replace_format=inp.replace_format,
            timezone=timezone,
        )
    )


def run_time_ago(inp: TimeAgoInput, *, clock: ClockPort | None = None) -> DateOutput:
    """
    Describe how long ago an instant was.

    Args:
        inp: Input containing the past instant.
        clock: Optional clock port; defaults to the system clock.

    Returns:
        DateOutput with the relative description.
    """
    clock = clock or SystemClock()
    now = clock.now_utc() if inp.past.tzinfo is not None else clock.now()
    return DateOutput(value=format_time_ago(inp.past, now=now))


def run_time_diff(inp: TimeDiffInput) -> DateOutput:
    """
    Spell out the difference between two instants.

    Args:
        inp: Input containing both instants.

    Returns:
        DateOutput with the "D days, H hrs, M mins, S secs" sentence or errors.
    """
    if (inp.start.tzinfo is None) != (inp.end.tzinfo is None):
        return _failed(
            [
                DateValidationError(
                    code="mixed_timezone_awareness",
                    message="Both instants must be naive or both timezone-aware",
                    field="end",
                )
            ]
        )
    return DateOutput(value=format_time_diff(inp.start, inp.end))
