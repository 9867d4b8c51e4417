from fmtkit.rules.loader import default_rules, load_rules
from fmtkit.rules.models import (
    CurrencyRules,
    DatesRules,
    FormatRules,
    NumbersRules,
    StringsRules,
)

__all__ = [
    "CurrencyRules",
    "DatesRules",
    "FormatRules",
    "NumbersRules",
    "StringsRules",
    "default_rules",
    "load_rules",
]
