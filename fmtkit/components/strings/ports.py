"""
Strings component port definitions.
"""

from __future__ import annotations

from typing import Protocol


class RulesPort(Protocol):
    """Port for string rules configuration."""

    def get_truncate_length(self) -> int:
        """Get the default truncation length."""
        ...

    def get_ellipsis(self) -> str:
        """Get the marker appended to truncated text."""
        ...
