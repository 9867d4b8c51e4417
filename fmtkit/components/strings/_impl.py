"""
String utilities - case conversion, slugs and small text helpers.

All functions are pure and locale-independent. "Word" characters are the
ASCII set [A-Za-z0-9_]; whitespace is Unicode whitespace.
"""

from __future__ import annotations

import re

_WORD = "A-Za-z0-9_"

_WHITESPACE_RUN = re.compile(r"\s+")
_NON_SLUG = re.compile(rf"[^{_WORD}-]")
_HYPHEN_RUN = re.compile(r"-+")
_UNDERSCORE_RUN = re.compile(r"_+")
_EDGE_HYPHENS = re.compile(r"^-+|-+$")
_CAMEL_BREAK = re.compile(r"[^a-zA-Z0-9]+(.)")
_PASCAL_START = re.compile(rf"(^[{_WORD}]|[-_\s][{_WORD}])")
_PASCAL_SEPARATOR = re.compile(r"[-_\s]")
_SPECIAL = re.compile(rf"[^{_WORD}\s]")
_NON_ALNUM = re.compile(r"[^a-z0-9]")


def capitalize(text: str, sep: str = " ", join_sep: str = " ") -> str:
    """
    Capitalize each part of text split on sep, then join with join_sep.

    Example:
        >>> capitalize("hello_big_WORLD", "_", " ")
        'Hello Big World'
    """
    lowered = text.lower()
    parts = list(lowered) if sep == "" else lowered.split(sep)
    return join_sep.join(p[:1].upper() + p[1:] for p in parts)


def truncate(text: str, max_len: int = 10, ellipsis: str = "...") -> str:
    """Cut text to max_len characters, appending ellipsis when cut."""
    if len(text) <= max_len:
        return text
    return text[:max_len] + ellipsis


def slugify(text: str) -> str:
    """
    Convert text into a URL-friendly slug.

    Example:
        >>> slugify("  Hello, World!  --Again ")
        'hello-world-again'
    """
    slug = _WHITESPACE_RUN.sub("-", text.lower().strip())
    slug = _NON_SLUG.sub("", slug)
    slug = _HYPHEN_RUN.sub("-", slug)
    return _EDGE_HYPHENS.sub("", slug)


def remove_whitespace(text: str) -> str:
    return _WHITESPACE_RUN.sub("", text)


def reverse(text: str) -> str:
    # Code point order; combining sequences are not kept together.
    return text[::-1]


def to_camel_case(text: str) -> str:
    """
    Example:
        >>> to_camel_case("Hello big-world")
        'helloBigWorld'
    """
    return _CAMEL_BREAK.sub(lambda m: m.group(1).upper(), text.lower())


def to_pascal_case(text: str) -> str:
    """
    Example:
        >>> to_pascal_case("hello big_world")
        'HelloBigWorld'
    """
    return _PASCAL_START.sub(
        lambda m: _PASCAL_SEPARATOR.sub("", m.group(0), count=1).upper(),
        text,
    )


def to_snake_case(text: str) -> str:
    """
    Example:
        >>> to_snake_case("Hello Big-World!")
        'hello_big_world'
    """
    snake = _WHITESPACE_RUN.sub("_", text.lower())
    snake = _NON_SLUG.sub("", snake)
    return _HYPHEN_RUN.sub("_", snake)


def to_kebab_case(text: str) -> str:
    """
    Example:
        >>> to_kebab_case("Hello Big_World!")
        'hello-big-world'
    """
    kebab = _WHITESPACE_RUN.sub("-", text.lower())
    kebab = _NON_SLUG.sub("", kebab)
    return _UNDERSCORE_RUN.sub("-", kebab)


def word_count(text: str) -> int:
    return len([w for w in _WHITESPACE_RUN.split(text.strip()) if w])


def remove_special_chars(text: str) -> str:
    return _SPECIAL.sub("", text)


def is_palindrome(text: str) -> bool:
    """Case-insensitive palindrome check over ASCII letters and digits."""
    clean = _NON_ALNUM.sub("", text.lower())
    return clean == clean[::-1]
