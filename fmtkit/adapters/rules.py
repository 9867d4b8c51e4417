"""
Rules adapter.

Implements the RulesPort of every component over a FormatRules instance,
so a single adapter can be handed to any run_* entry point.
"""

from __future__ import annotations

from pathlib import Path

from fmtkit.rules.loader import default_rules, load_rules
from fmtkit.rules.models import FormatRules


class RulesAdapter:
    """Read-only view of FormatRules for component entry points."""

    def __init__(self, rules: FormatRules | None = None) -> None:
        self._rules = rules if rules is not None else default_rules()

    @classmethod
    def from_file(cls, path: Path) -> RulesAdapter:
        return cls(load_rules(path))

    # --- dates ---

    def get_default_locale(self) -> str:
        return self._rules.dates.default_locale

    def get_default_date_pattern(self) -> str:
        return self._rules.dates.default_date_pattern

    def get_default_time_pattern(self) -> str:
        return self._rules.dates.default_time_pattern

    def get_default_timezone(self) -> str | None:
        return self._rules.dates.default_timezone

    # --- numbers ---

    def get_bytes_decimals(self) -> int:
        return self._rules.numbers.bytes_decimals

    def get_number_decimals(self) -> int:
        return self._rules.numbers.number_decimals

    # --- currency ---

    def get_reporting_locale(self) -> str:
        return self._rules.currency.reporting_locale

    def get_naira_locale(self) -> str:
        return self._rules.currency.naira_locale

    def get_allow_negative(self) -> bool:
        return self._rules.currency.allow_negative

    # --- strings ---

    def get_truncate_length(self) -> int:
        return self._rules.strings.truncate_length

    def get_ellipsis(self) -> str:
        return self._rules.strings.ellipsis
