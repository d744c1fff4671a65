"""
input-sanitizer — numeric range clamping

File: src/input_sanitizer/clamp/numeric.py
Last updated: 2026-10-19

Purpose
- Parse bounded, normalized numeric text and clamp it into a caller range.

What should be included in this file
- Strict 32-bit and 64-bit integer parsing.
- Decimal parsing under one explicit grouping/decimal separator convention.
- Boolean literal parsing.

Functional requirements
- Blank input returns ``None`` without a fault.
- ``min > max`` is a fault raised before any parsing.
- Out-of-range values snap to the nearest bound; clamping never rejects.

Non-functional requirements
- No separator auto-detection; the caller names the convention.
"""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from typing import Final, TypeVar

from input_sanitizer.constants import (
    BOOLEAN_TEXT_CAP,
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    NUMERIC_TEXT_CAP,
)
from input_sanitizer.context import SanitizerComponent
from input_sanitizer.faults import FaultCategory, SanitizerViolation
from input_sanitizer.formats import SeparatorStyle
from input_sanitizer.normalizer import nfkc, reduce_to_numbers
from input_sanitizer.results import is_blank

INVALID_RANGE_MESSAGE: Final[str] = (
    "Invalid parameters: minimum value cannot be greater than the maximum value."
)
PARSE_FAILURE_MESSAGE: Final[str] = "Parse failure."
NEGATIVE_SIGN_MESSAGE: Final[str] = "Negative sign is not allowed."

# Removed case-insensitively before numeric reduction; longest tokens first.
RARE_NUMERIC_TOKENS: Final[tuple[str, ...]] = (
    "-Infinity",
    "Infinity",
    "NaN",
    "%",
    "\N{PER MILLE SIGN}",
    "+",
)

_INTEGER_RE: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")
_PARENTHESIZED_RE: Final[re.Pattern[str]] = re.compile(r"\((.*)\)")
_RARE_TOKEN_RE: Final[re.Pattern[str]] = re.compile(
    "|".join(re.escape(token) for token in RARE_NUMERIC_TOKENS), re.IGNORECASE
)
_BOOLEAN_LITERALS: Final[dict[str, bool]] = {"true": True, "false": False}

_Number = TypeVar("_Number", int, Decimal)


def _decimal_body_pattern(style: SeparatorStyle) -> re.Pattern[str]:
    group = re.escape(style.group_separator)
    point = re.escape(style.decimal_separator)
    return re.compile(rf"(?:[0-9][0-9{group}]*(?:{point}[0-9]*)?|{point}[0-9]+)")


_DECIMAL_BODY_PATTERNS: Final[dict[SeparatorStyle, re.Pattern[str]]] = {
    style: _decimal_body_pattern(style) for style in SeparatorStyle
}


def parse_decimal_text(text: str, style: SeparatorStyle) -> Decimal:
    """Parse reduced numeric text under ``style``; raise ``SanitizerViolation`` on residue."""

    working = text.strip()
    negative = False

    wrapped = _PARENTHESIZED_RE.fullmatch(working)
    if wrapped is not None:
        negative = True
        working = wrapped.group(1).strip()
    elif working.startswith("-"):
        negative = True
        working = working[1:].strip()

    body = _DECIMAL_BODY_PATTERNS[style]
    if not working or body.fullmatch(working) is None:
        raise SanitizerViolation(PARSE_FAILURE_MESSAGE)

    canonical = working.replace(style.group_separator, "").replace(style.decimal_separator, ".")
    try:
        parsed = Decimal(canonical)
    except InvalidOperation as exc:
        raise SanitizerViolation(PARSE_FAILURE_MESSAGE) from exc
    return -parsed if negative else parsed


def clamp_value(value: _Number, min_value: _Number, max_value: _Number) -> _Number:
    """Snap ``value`` into the closed interval [min_value, max_value]."""
    if value < min_value:
        return min_value
    if value > max_value:
        return max_value
    return value


class NumericClamp(SanitizerComponent):
    """Integer, decimal, and boolean parsing with hard floor/ceiling clamping."""

    category = FaultCategory.RANGE_CLAMP

    def clamp_integer(self, text: str | None, max_value: int, min_value: int) -> int | None:
        return self._clamp_whole_number(text, max_value, min_value, INT32_MIN, INT32_MAX)

    def clamp_long(self, text: str | None, max_value: int, min_value: int) -> int | None:
        return self._clamp_whole_number(text, max_value, min_value, INT64_MIN, INT64_MAX)

    def clamp_decimal(
        self,
        text: str | None,
        max_value: Decimal | int,
        min_value: Decimal | int,
        allow_negative: bool = True,
        separator_style: SeparatorStyle = SeparatorStyle.COMMA_GROUP_DOT_DECIMAL,
    ) -> Decimal | None:
        if is_blank(text):
            return None
        assert text is not None

        try:
            upper = Decimal(max_value)
            lower = Decimal(min_value)
            if lower > upper:
                raise SanitizerViolation(INVALID_RANGE_MESSAGE)
            if len(text) > NUMERIC_TEXT_CAP:
                raise SanitizerViolation(PARSE_FAILURE_MESSAGE)
            # Compatibility minus forms (U+FF0D, U+FE63) fold to "-" under NFKC.
            if not allow_negative and "-" in nfkc(text):
                raise SanitizerViolation(NEGATIVE_SIGN_MESSAGE)

            stripped = _RARE_TOKEN_RE.sub("", text)
            reduced = reduce_to_numbers(
                stripped,
                allow_spaces=True,
                allow_parens=True,
                allow_negative_sign=allow_negative,
                allow_comma_and_dot=True,
            )
            parsed = parse_decimal_text(reduced, SeparatorStyle(separator_style))
            if parsed < 0 and not allow_negative:
                raise SanitizerViolation(NEGATIVE_SIGN_MESSAGE)
        except SanitizerViolation as exc:
            self._fault(text, exc)
            return None

        return clamp_value(parsed, lower, upper)

    def parse_boolean(self, text: str | None) -> bool | None:
        """Accept ``true``/``false`` in any case; anything else is a fault."""
        if is_blank(text):
            return None
        assert text is not None

        candidate = text[:BOOLEAN_TEXT_CAP].strip().lower()
        parsed = _BOOLEAN_LITERALS.get(candidate)
        if parsed is None:
            self._fault(text, SanitizerViolation(PARSE_FAILURE_MESSAGE))
        return parsed

    def _clamp_whole_number(
        self,
        text: str | None,
        max_value: int,
        min_value: int,
        lowest: int,
        highest: int,
    ) -> int | None:
        if is_blank(text):
            return None
        assert text is not None

        try:
            if min_value > max_value:
                raise SanitizerViolation(INVALID_RANGE_MESSAGE)
            if len(text) > NUMERIC_TEXT_CAP:
                raise SanitizerViolation(PARSE_FAILURE_MESSAGE)
            candidate = nfkc(text).strip()
            if _INTEGER_RE.fullmatch(candidate) is None:
                raise SanitizerViolation(PARSE_FAILURE_MESSAGE)
            parsed = int(candidate)
            if not lowest <= parsed <= highest:
                raise SanitizerViolation(PARSE_FAILURE_MESSAGE)
        except SanitizerViolation as exc:
            self._fault(text, exc)
            return None

        return clamp_value(parsed, min_value, max_value)


__all__ = [
    "INVALID_RANGE_MESSAGE",
    "NEGATIVE_SIGN_MESSAGE",
    "PARSE_FAILURE_MESSAGE",
    "RARE_NUMERIC_TOKENS",
    "NumericClamp",
    "clamp_value",
    "parse_decimal_text",
]
