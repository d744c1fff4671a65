"""
input-sanitizer — range clamping public API

File: src/input_sanitizer/clamp/__init__.py
Last updated: 2026-10-19

Purpose
- Export numeric and date/time range clamps and the date grammar table.
"""

from input_sanitizer.clamp.dates import DateClamp, to_utc
from input_sanitizer.clamp.grammars import DATE_GRAMMARS, DateGrammar, GrammarKey, lookup_grammar
from input_sanitizer.clamp.numeric import (
    INVALID_RANGE_MESSAGE,
    NEGATIVE_SIGN_MESSAGE,
    PARSE_FAILURE_MESSAGE,
    RARE_NUMERIC_TOKENS,
    NumericClamp,
    clamp_value,
    parse_decimal_text,
)

__all__ = [
    "DATE_GRAMMARS",
    "INVALID_RANGE_MESSAGE",
    "NEGATIVE_SIGN_MESSAGE",
    "PARSE_FAILURE_MESSAGE",
    "RARE_NUMERIC_TOKENS",
    "DateClamp",
    "DateGrammar",
    "GrammarKey",
    "NumericClamp",
    "clamp_value",
    "lookup_grammar",
    "parse_decimal_text",
    "to_utc",
]
