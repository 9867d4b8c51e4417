"""
Dates component port definitions.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol


class ClockPort(Protocol):
    """Time provider interface."""

    def now(self) -> datetime:
        """Get current naive local time."""
        ...

    def now_utc(self) -> datetime:
        """Get current UTC time."""
        ...


class RulesPort(Protocol):
    """Port for date formatting rules configuration."""

    def get_default_locale(self) -> str:
        """Get the locale used when none is given."""
        ...

    def get_default_date_pattern(self) -> str:
        """Get the date pattern used when none is given."""
        ...

    def get_default_time_pattern(self) -> str:
        """Get the time pattern used when none is given."""
        ...

    def get_default_timezone(self) -> str | None:
        """Get the timezone label used when none is given."""
        ...
