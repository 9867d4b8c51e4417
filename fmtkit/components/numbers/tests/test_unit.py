"""
Numbers component unit tests.

Tests for the run_* entry points and rules-driven defaults.
"""

from __future__ import annotations

import pytest

from fmtkit.adapters import RulesAdapter
from fmtkit.rules import FormatRules
from fmtkit.rules.models import CurrencyRules, NumbersRules

from .. import (
    BytesInput,
    CurrencyInput,
    DurationInput,
    NumberInput,
    run_bytes,
    run_currency,
    run_duration,
    run_number,
)


@pytest.fixture
def custom_rules() -> RulesAdapter:
    return RulesAdapter(
        FormatRules(
            numbers=NumbersRules(bytes_decimals=0, number_decimals=1),
            currency=CurrencyRules(
                reporting_locale="de-DE",
                naira_locale="de-DE",
                allow_negative=True,
            ),
        )
    )


class TestRunDuration:
    """Test duration entry point."""

    def test_duration(self) -> None:
        result = run_duration(DurationInput(seconds=3661))
        assert result.success is True
        assert result.value == "01:01:01"

    def test_negative_reported(self) -> None:
        result = run_duration(DurationInput(seconds=-5))
        assert result.success is False
        assert result.value is None
        assert result.errors[0].code == "negative_duration"


class TestRunBytes:
    """Test byte size entry point."""

    def test_default_decimals(self) -> None:
        assert run_bytes(BytesInput(size=123456789)).value == "117.74 MB"

    def test_rules_decimals(self, custom_rules: RulesAdapter) -> None:
        assert run_bytes(BytesInput(size=123456789), rules=custom_rules).value == "118 MB"

    def test_input_decimals_win(self, custom_rules: RulesAdapter) -> None:
        result = run_bytes(BytesInput(size=123456789, decimals=1), rules=custom_rules)
        assert result.value == "117.7 MB"

    def test_negative_reported(self) -> None:
        result = run_bytes(BytesInput(size=-1))
        assert result.errors[0].code == "negative_size"


class TestRunNumber:
    """Test number abbreviation entry point."""

    def test_default_decimals(self) -> None:
        assert run_number(NumberInput(value=1500)).value == "1.50K"

    def test_rules_decimals(self, custom_rules: RulesAdapter) -> None:
        assert run_number(NumberInput(value=1500), rules=custom_rules).value == "1.5K"

    def test_negative_decimals_reported(self) -> None:
        result = run_number(NumberInput(value=1500, decimals=-1))
        assert result.success is False
        assert result.errors[0].code == "invalid_decimals"


class TestRunCurrency:
    """Test currency entry point."""

    def test_usd(self) -> None:
        assert run_currency(CurrencyInput(value=1234.5, currency="USD")).value == "$1,234.50"

    def test_clamped_by_default(self) -> None:
        assert run_currency(CurrencyInput(value=-3, currency="USD")).value == "$0.00"

    def test_rules_allow_negative(self, custom_rules: RulesAdapter) -> None:
        """The rules negative policy applies when the input leaves it unset."""
        result = run_currency(CurrencyInput(value=-3, currency="NGN"), rules=custom_rules)
        assert result.value == "₦-3"

    def test_input_policy_wins(self, custom_rules: RulesAdapter) -> None:
        inp = CurrencyInput(value=-3, currency="NGN", allow_negative=False)
        assert run_currency(inp, rules=custom_rules).value == "₦0"

    def test_reporting_locale(self, custom_rules: RulesAdapter) -> None:
        """Standard currencies follow the reporting locale."""
        result = run_currency(CurrencyInput(value=1234.5, currency="EUR"), rules=custom_rules)
        assert "1.234,50" in result.value
        assert "€" in result.value

    def test_naira_locale(self, custom_rules: RulesAdapter) -> None:
        result = run_currency(CurrencyInput(value=1234567, currency="NGN"), rules=custom_rules)
        assert result.value == "₦1.234.567"

    def test_unknown_currency_reported(self) -> None:
        result = run_currency(CurrencyInput(value=1, currency="BTC"))
        assert result.success is False
        assert result.errors[0].code == "invalid_currency"
        assert result.errors[0].field == "currency"
