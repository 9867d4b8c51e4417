"""
Numbers component port definitions.
"""

from __future__ import annotations

from typing import Protocol


class RulesPort(Protocol):
    """Port for numeric formatting rules configuration."""

    def get_bytes_decimals(self) -> int:
        """Get default decimal places for byte sizes."""
        ...

    def get_number_decimals(self) -> int:
        """Get default decimal places for abbreviated numbers."""
        ...

    def get_reporting_locale(self) -> str:
        """Get the locale used for standard currency formatting."""
        ...

    def get_naira_locale(self) -> str:
        """Get the locale used to group NGN amounts."""
        ...

    def get_allow_negative(self) -> bool:
        """Check if negative currency amounts are kept by default."""
        ...
