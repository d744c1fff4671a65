"""
input-sanitizer — date/time range clamping

File: src/input_sanitizer/clamp/dates.py
Last updated: 2026-10-19

Purpose
- Validate untrusted date/time text against a fixed grammar, parse it with
  exact templates, and clamp it into a caller range.

Functional requirements
- Blank input returns ``None`` without a fault.
- ``min`` later than ``max`` is a fault.
- Slash/dash/dot delimiters must be literally present before any other work.
- Comparison happens on a UTC timeline; naive values are read as UTC.
- Eager and ad hoc pattern evaluation behave identically.
"""

from __future__ import annotations

import re
from datetime import UTC, datetime
from typing import Final

from input_sanitizer.clamp.grammars import DATE_GRAMMARS, DateGrammar, lookup_grammar
from input_sanitizer.clamp.numeric import INVALID_RANGE_MESSAGE, PARSE_FAILURE_MESSAGE
from input_sanitizer.constants import SQL_SERVER_MAX_DATETIME, SQL_SERVER_MIN_DATETIME
from input_sanitizer.context import SanitizerComponent, SanitizerContext
from input_sanitizer.faults import FaultCategory, SanitizerViolation
from input_sanitizer.formats import DateDataType, DateDelimiter, RegionalFormat
from input_sanitizer.normalizer import reduce_to_datetime
from input_sanitizer.results import is_blank

_PATTERN_FLAGS: Final[int] = re.IGNORECASE


def to_utc(value: datetime) -> datetime:
    """Place ``value`` on the UTC timeline, reading naive values as UTC."""
    if value.tzinfo is None or value.utcoffset() is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


class DateClamp(SanitizerComponent):
    """Grammar-checked date/time parsing with floor/ceiling clamping."""

    category = FaultCategory.RANGE_CLAMP

    def __init__(self, context: SanitizerContext) -> None:
        super().__init__(context)
        self._compiled: dict[str, re.Pattern[str]] = {}
        if context.compile_patterns_eagerly:
            for grammar in DATE_GRAMMARS.values():
                if grammar.name not in self._compiled:
                    self._compiled[grammar.name] = re.compile(grammar.pattern, _PATTERN_FLAGS)

    def clamp_date(
        self,
        text: str | None,
        max_value: datetime,
        min_value: datetime,
        data_type: DateDataType = DateDataType.DATE,
        delimiter: DateDelimiter = DateDelimiter.FORWARD_SLASH,
        regional_format: RegionalFormat = RegionalFormat.US,
        expect_am_pm: bool = False,
    ) -> datetime | None:
        if is_blank(text):
            return None
        assert text is not None

        try:
            if to_utc(min_value) > to_utc(max_value):
                raise SanitizerViolation(INVALID_RANGE_MESSAGE)

            literal = delimiter.literal
            if literal is not None and literal not in text:
                label = delimiter.value.replace("_", " ")
                raise SanitizerViolation(f"Invalid date: missing {label} delimiter.")

            reduced = reduce_to_datetime(text, delimiter, data_type, expect_am_pm).strip()
            grammar = lookup_grammar(data_type, regional_format, delimiter, expect_am_pm)
            if grammar is None:
                raise SanitizerViolation(
                    "Unsupported date selection: "
                    f"{data_type.value}/{regional_format.value}/{delimiter.value}."
                )
            if not self._matches(grammar, reduced):
                raise SanitizerViolation(grammar.failure_message)
            parsed = _parse_with_templates(grammar, reduced)
        except SanitizerViolation as exc:
            self._fault(text, exc)
            return None

        if to_utc(parsed) < to_utc(min_value):
            return min_value
        if to_utc(parsed) > to_utc(max_value):
            return max_value
        return parsed

    def clamp_date_us_default(
        self,
        text: str | None,
        data_type: DateDataType = DateDataType.DATE,
        delimiter: DateDelimiter = DateDelimiter.FORWARD_SLASH,
        expect_am_pm: bool = False,
    ) -> datetime | None:
        """Clamp against the SQL Server ``datetime`` range using US conventions."""
        regional_format = (
            RegionalFormat.SQL_SERVER
            if data_type is DateDataType.SQL_SERVER_DATE_TIME
            else RegionalFormat.US
        )
        return self.clamp_date(
            text,
            SQL_SERVER_MAX_DATETIME,
            SQL_SERVER_MIN_DATETIME,
            data_type,
            delimiter,
            regional_format,
            expect_am_pm,
        )

    def _matches(self, grammar: DateGrammar, text: str) -> bool:
        compiled = self._compiled.get(grammar.name)
        if compiled is not None:
            return compiled.fullmatch(text) is not None
        return re.fullmatch(grammar.pattern, text, _PATTERN_FLAGS) is not None


def _parse_with_templates(grammar: DateGrammar, text: str) -> datetime:
    for template in grammar.templates:
        try:
            return datetime.strptime(text, template)
        except ValueError:
            continue
    raise SanitizerViolation(PARSE_FAILURE_MESSAGE)


__all__ = ["DateClamp", "to_utc"]
