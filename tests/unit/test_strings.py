"""
String utilities: case conversion, slugify and small text helpers.
"""

from __future__ import annotations

import re

import pytest

from fmtkit.components.strings import (
    capitalize,
    is_palindrome,
    remove_special_chars,
    remove_whitespace,
    reverse,
    slugify,
    to_camel_case,
    to_kebab_case,
    to_pascal_case,
    to_snake_case,
    truncate,
    word_count,
)


class TestCapitalize:
    def test_split_and_join(self) -> None:
        assert capitalize("hello_big_WORLD", "_", " ") == "Hello Big World"

    def test_defaults_split_on_space(self) -> None:
        assert capitalize("the QUICK fox") == "The Quick Fox"

    def test_empty_parts_survive(self) -> None:
        assert capitalize("a--b", "-", "-") == "A--B"

    def test_empty_separator_splits_characters(self) -> None:
        assert capitalize("abc", "", ".") == "A.B.C"


class TestTruncate:
    def test_short_text_unchanged(self) -> None:
        assert truncate("short") == "short"

    def test_exact_length_unchanged(self) -> None:
        assert truncate("0123456789") == "0123456789"

    def test_long_text_cut(self) -> None:
        assert truncate("0123456789abc") == "0123456789..."

    def test_custom_length_and_marker(self) -> None:
        assert truncate("hello world", 5, "…") == "hello…"


class TestSlugify:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("Hello World", "hello-world"),
            ("  Hello, World!  --Again ", "hello-world-again"),
            ("Python 3.12 Release", "python-312-release"),
            ("---", ""),
            ("Crème brûlée", "crme-brle"),
        ],
    )
    def test_slug(self, text: str, expected: str) -> None:
        assert slugify(text) == expected

    @pytest.mark.parametrize(
        "text",
        ["A  B  C", "-lead and trail-", "Ünïcödé tëxt!!", "mixed\tTABS\nand lines", "x--y"],
    )
    def test_slug_alphabet(self, text: str) -> None:
        """Only lowercase alphanumerics and single inner hyphens remain."""
        slug = slugify(text)
        assert re.fullmatch(r"([a-z0-9]+(-[a-z0-9]+)*)?", slug)


class TestCaseConversion:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("hello world", "helloWorld"),
            ("Hello big-world", "helloBigWorld"),
            ("foo_bar_baz", "fooBarBaz"),
            ("  leading space", "LeadingSpace"),
            ("already", "already"),
        ],
    )
    def test_camel(self, text: str, expected: str) -> None:
        assert to_camel_case(text) == expected

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("hello world", "HelloWorld"),
            ("hello big_world", "HelloBigWorld"),
            ("kebab-case-text", "KebabCaseText"),
            ("keep cAMEL", "KeepCAMEL"),
        ],
    )
    def test_pascal(self, text: str, expected: str) -> None:
        assert to_pascal_case(text) == expected

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("Hello Big-World!", "hello_big_world"),
            ("multiple   spaces", "multiple_spaces"),
            ("a--b", "a_b"),
        ],
    )
    def test_snake(self, text: str, expected: str) -> None:
        assert to_snake_case(text) == expected

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("Hello Big_World!", "hello-big-world"),
            ("multiple   spaces", "multiple-spaces"),
            ("a__b", "a-b"),
        ],
    )
    def test_kebab(self, text: str, expected: str) -> None:
        assert to_kebab_case(text) == expected


class TestSmallHelpers:
    def test_remove_whitespace(self) -> None:
        assert remove_whitespace(" a b\tc\nd ") == "abcd"

    def test_reverse(self) -> None:
        assert reverse("abc") == "cba"
        assert reverse("") == ""

    @pytest.mark.parametrize(
        "text,expected",
        [("", 0), ("   ", 0), ("one", 1), ("  two  words ", 2), ("a\tb\nc", 3)],
    )
    def test_word_count(self, text: str, expected: int) -> None:
        assert word_count(text) == expected

    def test_remove_special_chars(self) -> None:
        assert remove_special_chars("Hi! How's it_going? #1") == "Hi Hows it_going 1"


class TestPalindrome:
    @pytest.mark.parametrize(
        "text",
        ["racecar", "A man, a plan, a canal: Panama", "No 'x' in Nixon", "", "12321"],
    )
    def test_palindromes(self, text: str) -> None:
        assert is_palindrome(text) is True

    @pytest.mark.parametrize("text", ["hello", "ab", "12345"])
    def test_not_palindromes(self, text: str) -> None:
        assert is_palindrome(text) is False

    @pytest.mark.parametrize(
        "text", ["racecar", "hello", "Was it a car or a cat I saw?", "abc!cba", "xyz"]
    )
    def test_invariant_under_reversal(self, text: str) -> None:
        assert is_palindrome(text) == is_palindrome(reverse(text))
