"""
Dates component - date, time, relative-time and time-difference formatting.
"""

from ._impl import (
    TIME_FORMATS,
    format_date,
    format_time,
    format_time_ago,
    format_time_diff,
    to_zone,
)
from .component import (
    run_format_date,
    run_format_time,
    run_time_ago,
    run_time_diff,
    validate_options,
)
from .models import (
    DateOutput,
    DateValidationError,
    FormatDateInput,
    FormatTimeInput,
    TimeAgoInput,
    TimeDiffInput,
)
from .ports import ClockPort, RulesPort

__all__ = [
    # Entry points
    "run_format_date",
    "run_format_time",
    "run_time_ago",
    "run_time_diff",
    "validate_options",
    # Input models
    "FormatDateInput",
    "FormatTimeInput",
    "TimeAgoInput",
    "TimeDiffInput",
    # Output models
    "DateOutput",
    "DateValidationError",
    # Ports
    "ClockPort",
    "RulesPort",
    # _impl re-exports
    "TIME_FORMATS",
    "format_date",
    "format_time",
    "format_time_ago",
    "format_time_diff",
    "to_zone",
]
