"""
Dates component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

# --- Validation Error ---


@dataclass(frozen=True)
class DateValidationError:
    """Date/time formatting validation error."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class FormatDateInput:
    """
    Input for formatting a date.

    Unset pattern, locale and timezone fall back to the rules defaults.
    """

    date: datetime
    pattern: str | None = None
    locale: str | None = None
    replace_format: str | None = None
    timezone: str | None = None


@dataclass(frozen=True)
class FormatTimeInput:
    """
    Input for formatting a time of day.

    Unset pattern, locale and timezone fall back to the rules defaults.
    """

    date: datetime
    pattern: str | None = None
    locale: str | None = None
    replace_format: str | None = None
    timezone: str | None = None


@dataclass(frozen=True)
class TimeAgoInput:
    """Input for describing how long ago an instant was."""

    past: datetime


@dataclass(frozen=True)
class TimeDiffInput:
    """Input for spelling out the gap between two instants."""

    start: datetime
    end: datetime


# --- Output Models ---


@dataclass(frozen=True)
class DateOutput:
    """Output containing a formatted date/time string."""

    value: str | None
    errors: list[DateValidationError] = field(default_factory=list)
    success: bool = True
