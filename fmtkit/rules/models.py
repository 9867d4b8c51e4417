from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from fmtkit.core.types import DATE_PATTERNS, LOCALES, TIME_PATTERNS, TIMEZONES


def _check_locale(value: str) -> str:
    if value not in LOCALES:
        raise ValueError(f"unsupported locale {value!r}")
    return value


class DatesRules(BaseModel):
    default_locale: str = "en-US"
    default_date_pattern: str = "yyyy-mm-dd"
    default_time_pattern: str = "hh:mm"
    default_timezone: str | None = None

    @field_validator("default_locale")
    @classmethod
    def _locale(cls, v: str) -> str:
        return _check_locale(v)

    @field_validator("default_date_pattern")
    @classmethod
    def _date_pattern(cls, v: str) -> str:
        if v not in DATE_PATTERNS:
            raise ValueError(f"unsupported date pattern {v!r}")
        return v

    @field_validator("default_time_pattern")
    @classmethod
    def _time_pattern(cls, v: str) -> str:
        if v not in TIME_PATTERNS:
            raise ValueError(f"unsupported time pattern {v!r}")
        return v

    @field_validator("default_timezone")
    @classmethod
    def _timezone(cls, v: str | None) -> str | None:
        if v is not None and v not in TIMEZONES:
            raise ValueError(f"unsupported timezone label {v!r}")
        return v


class NumbersRules(BaseModel):
    bytes_decimals: int = Field(default=2, ge=0)
    number_decimals: int = Field(default=2, ge=0)


class CurrencyRules(BaseModel):
    # Reporting locale for every currency except NGN.
    reporting_locale: str = "en-US"
    naira_locale: str = "en-US"
    allow_negative: bool = False

    @field_validator("reporting_locale", "naira_locale")
    @classmethod
    def _locale(cls, v: str) -> str:
        return _check_locale(v)


class StringsRules(BaseModel):
    truncate_length: int = Field(default=10, ge=0)
    ellipsis: str = "..."


class FormatRules(BaseModel):
    dates: DatesRules = Field(default_factory=DatesRules)
    numbers: NumbersRules = Field(default_factory=NumbersRules)
    currency: CurrencyRules = Field(default_factory=CurrencyRules)
    strings: StringsRules = Field(default_factory=StringsRules)
