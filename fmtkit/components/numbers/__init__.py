"""
Numbers component - duration, byte size, abbreviated number and currency formatting.
"""

from ._impl import (
    BYTE_UNITS,
    NAIRA_SIGN,
    format_bytes,
    format_currency,
    format_duration,
    format_number,
)
from .component import run_bytes, run_currency, run_duration, run_number
from .models import (
    BytesInput,
    CurrencyInput,
    DurationInput,
    FormattedOutput,
    NumberInput,
    NumberValidationError,
)
from .ports import RulesPort

__all__ = [
    # Entry points
    "run_bytes",
    "run_currency",
    "run_duration",
    "run_number",
    # Input models
    "BytesInput",
    "CurrencyInput",
    "DurationInput",
    "NumberInput",
    # Output models
    "FormattedOutput",
    "NumberValidationError",
    # Ports
    "RulesPort",
    # _impl re-exports
    "BYTE_UNITS",
    "NAIRA_SIGN",
    "format_bytes",
    "format_currency",
    "format_duration",
    "format_number",
]
