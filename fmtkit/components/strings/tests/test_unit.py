"""
Strings component unit tests.
"""

from __future__ import annotations

import pytest

from fmtkit.adapters import RulesAdapter
from fmtkit.rules import FormatRules
from fmtkit.rules.models import StringsRules

from .. import OPERATIONS, AnalyzeInput, TransformInput, run_analyze, run_transform


class TestRunTransform:
    """Test the named transformation entry point."""

    @pytest.mark.parametrize(
        "operation,expected",
        [
            ("slugify", "hello-big_world"),
            ("camel", "helloBigWorld"),
            ("pascal", "HelloBigWorld"),
            ("snake", "hello_big_world"),
            ("kebab", "hello-big-world"),
            ("reverse", "dlroW_giB olleH"),
            ("remove_whitespace", "HelloBig_World"),
            ("remove_special_chars", "Hello Big_World"),
        ],
    )
    def test_simple_operations(self, operation: str, expected: str) -> None:
        result = run_transform(TransformInput(text="Hello Big_World", operation=operation))
        assert result.success is True
        assert result.value == expected

    def test_capitalize_options(self) -> None:
        inp = TransformInput(text="snake_case_name", operation="capitalize", sep="_", join_sep="")
        assert run_transform(inp).value == "SnakeCaseName"

    def test_truncate_default(self) -> None:
        inp = TransformInput(text="abcdefghijklmnop", operation="truncate")
        assert run_transform(inp).value == "abcdefghij..."

    def test_truncate_rules(self) -> None:
        rules = RulesAdapter(FormatRules(strings=StringsRules(truncate_length=3, ellipsis="~")))
        inp = TransformInput(text="abcdef", operation="truncate")
        assert run_transform(inp, rules=rules).value == "abc~"

    def test_truncate_explicit_length(self) -> None:
        inp = TransformInput(text="abcdef", operation="truncate", max_len=2)
        assert run_transform(inp).value == "ab..."

    def test_truncate_negative_length(self) -> None:
        inp = TransformInput(text="abcdef", operation="truncate", max_len=-1)
        result = run_transform(inp)
        assert result.success is False
        assert result.errors[0].code == "invalid_max_len"

    def test_unknown_operation(self) -> None:
        result = run_transform(TransformInput(text="x", operation="shout"))

        assert result.success is False
        assert result.value is None
        assert result.errors[0].code == "unknown_operation"

    def test_operation_list(self) -> None:
        assert "capitalize" in OPERATIONS
        assert "truncate" in OPERATIONS
        assert "slugify" in OPERATIONS


class TestRunAnalyze:
    def test_stats(self) -> None:
        result = run_analyze(AnalyzeInput(text="Never odd or even"))
        assert result.word_count == 4
        assert result.is_palindrome is True
        assert result.length == 17
