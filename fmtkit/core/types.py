"""
Shared vocabulary for fmtkit components.

Closed enumerations that define formatting behaviour. Each enumeration is
exposed as a Literal alias (for type checkers) and a tuple of permitted
values (for runtime validation).
"""

from __future__ import annotations

from typing import Literal

# --- Date / Time Patterns ---

DatePattern = Literal[
    "yyyy-mm-dd",
    "yyyy/mm/dd",
    "dd-mm-yyyy",
    "mm-yyyy",
    "dd-mmm",
    "mmm-dd",
    "ddd-mmm-dd",
    "mmm-yyyy",
    "full",
]

DATE_PATTERNS: tuple[str, ...] = (
    "yyyy-mm-dd",
    "yyyy/mm/dd",
    "dd-mm-yyyy",
    "mm-yyyy",
    "dd-mmm",
    "mmm-dd",
    "ddd-mmm-dd",
    "mmm-yyyy",
    "full",
)

TimePattern = Literal["hh:mm", "hh:mm:ss", "hh:mm AM/PM", "hh:mm:ss AM/PM"]

TIME_PATTERNS: tuple[str, ...] = ("hh:mm", "hh:mm:ss", "hh:mm AM/PM", "hh:mm:ss AM/PM")

ReplaceSeparator = Literal["/", "-", " ", ",", ":", ""]

REPLACE_SEPARATORS: tuple[str, ...] = ("/", "-", " ", ",", ":", "")


# --- Currency ---

Currency = Literal["USD", "EUR", "GBP", "JPY", "CHF", "CNY", "NGN"]

CURRENCIES: tuple[str, ...] = ("USD", "EUR", "GBP", "JPY", "CHF", "CNY", "NGN")


# --- Locales ---

LocaleTag = Literal[
    "en-US",
    "en-GB",
    "en-CA",
    "en-AU",
    "en-IN",
    "en-NZ",
    "en-ZA",
    "fr-FR",
    "fr-CA",
    "de-DE",
    "es-ES",
    "es-MX",
    "it-IT",
    "nl-NL",
    "pt-PT",
    "pt-BR",
    "ru-RU",
    "pl-PL",
    "zh-CN",
    "zh-TW",
    "ja-JP",
    "ko-KR",
    "hi-IN",
    "th-TH",
    "vi-VN",
    "ar-SA",
    "he-IL",
    "tr-TR",
    "fa-IR",
]

LOCALES: tuple[str, ...] = (
    "en-US",
    "en-GB",
    "en-CA",
    "en-AU",
    "en-IN",
    "en-NZ",
    "en-ZA",
    "fr-FR",
    "fr-CA",
    "de-DE",
    "es-ES",
    "es-MX",
    "it-IT",
    "nl-NL",
    "pt-PT",
    "pt-BR",
    "ru-RU",
    "pl-PL",
    "zh-CN",
    "zh-TW",
    "ja-JP",
    "ko-KR",
    "hi-IN",
    "th-TH",
    "vi-VN",
    "ar-SA",
    "he-IL",
    "tr-TR",
    "fa-IR",
)


# --- Time Zones ---

TimeZoneLabel = Literal[
    "UTC",
    "PST",
    "EST",
    "CST",
    "MST",
    "IST",
    "GMT",
    "CET",
    "EET",
    "JST",
    "AEST",
    "AKST",
    "HST",
    "AST",
    "NST",
    "SST",
    "CHST",
    "BST",
    "WET",
    "EAT",
    "MSK",
    "SAMT",
    "PKT",
    "ICT",
    "SGT",
    "CST-China",
    "KST",
    "AEDT",
    "NZST",
    "FJT",
    "HKT",
]

# Labels are abbreviations, not IANA names; most of them would be rejected
# by a zone database, so each is pinned to a representative IANA zone.
TIMEZONE_MAP: dict[str, str] = {
    "UTC": "UTC",
    "PST": "America/Los_Angeles",
    "EST": "America/New_York",
    "CST": "America/Chicago",
    "MST": "America/Denver",
    "IST": "Asia/Kolkata",
    "GMT": "Etc/GMT",
    "CET": "Europe/Paris",
    "EET": "Europe/Athens",
    "JST": "Asia/Tokyo",
    "AEST": "Australia/Brisbane",
    "AKST": "America/Anchorage",
    "HST": "Pacific/Honolulu",
    "AST": "America/Halifax",
    "NST": "America/St_Johns",
    "SST": "Pacific/Pago_Pago",
    "CHST": "Pacific/Guam",
    "BST": "Europe/London",
    "WET": "Europe/Lisbon",
    "EAT": "Africa/Nairobi",
    "MSK": "Europe/Moscow",
    "SAMT": "Europe/Samara",
    "PKT": "Asia/Karachi",
    "ICT": "Asia/Bangkok",
    "SGT": "Asia/Singapore",
    "CST-China": "Asia/Shanghai",
    "KST": "Asia/Seoul",
    "AEDT": "Australia/Sydney",
    "NZST": "Pacific/Auckland",
    "FJT": "Pacific/Fiji",
    "HKT": "Asia/Hong_Kong",
}

TIMEZONES: tuple[str, ...] = tuple(TIMEZONE_MAP)
