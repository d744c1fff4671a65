"""
input-sanitizer — unit tests for date/time range clamping

File: tests/unit/clamp/test_date_clamp.py
Last updated: 2026-10-19

Purpose
- Validate grammar-checked date parsing across regional formats, delimiters,
  time precisions, and UTC forms.

What this test file should cover
- Regional field orders and every time precision parse to the right instant.
- Missing delimiters and calendar-invalid dates are faults.
- Out-of-range values snap to the nearest bound, including the SQL Server floor.
- Eager and ad hoc pattern compilation agree.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from input_sanitizer import (
    DateDataType,
    DateDelimiter,
    FaultPolicy,
    RegionalFormat,
    Sanitizer,
    SanitizerFault,
)
from input_sanitizer.clamp import DATE_GRAMMARS, INVALID_RANGE_MESSAGE, lookup_grammar, to_utc

LATEST = datetime(2100, 1, 1)
EARLIEST = datetime(1900, 1, 1)


@pytest.fixture(params=[True, False], ids=["eager", "ad_hoc"])
def sanitizer(request: pytest.FixtureRequest) -> Sanitizer:
    return Sanitizer(
        FaultPolicy.COLLECT,
        compile_patterns_eagerly=request.param,
        log_fault_events=False,
    )


def _messages(sanitizer: Sanitizer) -> list[str]:
    return [record.message for record in sanitizer.faults.values()]


@pytest.mark.parametrize(
    ("text", "regional_format", "delimiter", "expected"),
    [
        ("1/25/1970", RegionalFormat.US, DateDelimiter.FORWARD_SLASH, datetime(1970, 1, 25)),
        ("02-29-2000", RegionalFormat.US, DateDelimiter.DASH, datetime(2000, 2, 29)),
        ("26-01-1970", RegionalFormat.EURO, DateDelimiter.DASH, datetime(1970, 1, 26)),
        ("31.12.1999", RegionalFormat.EURO, DateDelimiter.DOT, datetime(1999, 12, 31)),
        ("2009.06.15", RegionalFormat.CHINA, DateDelimiter.DOT, datetime(2009, 6, 15)),
        ("2009/6/5", RegionalFormat.CHINA, DateDelimiter.FORWARD_SLASH, datetime(2009, 6, 5)),
    ],
)
def test_clamp_date_parses_regional_dates(
    sanitizer: Sanitizer,
    text: str,
    regional_format: RegionalFormat,
    delimiter: DateDelimiter,
    expected: datetime,
) -> None:
    result = sanitizer.dates.clamp_date(
        text, LATEST, EARLIEST, DateDataType.DATE, delimiter, regional_format
    )
    assert result == expected
    assert len(sanitizer.faults) == 0


@pytest.mark.parametrize(
    ("text", "data_type", "expect_am_pm", "expected"),
    [
        ("02/18/1953 15:15", DateDataType.DATE_TIME, False, datetime(1953, 2, 18, 15, 15)),
        (
            "06/08/1953 15:15:33",
            DateDataType.DATE_TIME_WITH_SECONDS,
            False,
            datetime(1953, 6, 8, 15, 15, 33),
        ),
        (
            "06/15/2009 03:05:03 PM",
            DateDataType.DATE_TIME_WITH_SECONDS,
            True,
            datetime(2009, 6, 15, 15, 5, 3),
        ),
        (
            "06/05/2009 03:05:03.003",
            DateDataType.DATE_TIME_WITH_MILLISECONDS,
            False,
            datetime(2009, 6, 5, 3, 5, 3, 3000),
        ),
        (
            "06/05/2009 03:05:03.003 PM",
            DateDataType.DATE_TIME_WITH_MILLISECONDS,
            True,
            datetime(2009, 6, 5, 15, 5, 3, 3000),
        ),
    ],
)
def test_clamp_date_parses_us_time_precisions(
    sanitizer: Sanitizer,
    text: str,
    data_type: DateDataType,
    expect_am_pm: bool,
    expected: datetime,
) -> None:
    result = sanitizer.dates.clamp_date(
        text,
        LATEST,
        EARLIEST,
        data_type,
        DateDelimiter.FORWARD_SLASH,
        RegionalFormat.US,
        expect_am_pm,
    )
    assert result == expected
    assert len(sanitizer.faults) == 0


def test_clamp_date_strips_characters_outside_the_selected_charset(
    sanitizer: Sanitizer,
) -> None:
    result = sanitizer.dates.clamp_date("1/25/1970<br>", LATEST, EARLIEST)
    assert result == datetime(1970, 1, 25)


def test_utc_with_delimiters_reads_naive_and_zulu_forms(sanitizer: Sanitizer) -> None:
    naive = sanitizer.dates.clamp_date(
        "2015-12-08T15:15:19", LATEST, EARLIEST, delimiter=DateDelimiter.UTC_WITH_DELIMITERS
    )
    assert naive == datetime(2015, 12, 8, 15, 15, 19)

    zulu = sanitizer.dates.clamp_date(
        "2015-12-08T15:15:19Z", LATEST, EARLIEST, delimiter=DateDelimiter.UTC_WITH_DELIMITERS
    )
    assert zulu == datetime(2015, 12, 8, 15, 15, 19, tzinfo=UTC)
    assert len(sanitizer.faults) == 0


def test_utc_without_delimiters(sanitizer: Sanitizer) -> None:
    result = sanitizer.dates.clamp_date(
        "20151208T151519", LATEST, EARLIEST, delimiter=DateDelimiter.UTC_WITHOUT_DELIMITERS
    )
    assert result == datetime(2015, 12, 8, 15, 15, 19)


def test_utc_with_zone_keeps_the_offset(sanitizer: Sanitizer) -> None:
    result = sanitizer.dates.clamp_date(
        "2020-06-10T22:03:15-05:00",
        LATEST,
        EARLIEST,
        delimiter=DateDelimiter.UTC_WITH_DELIMITERS_AND_ZONE,
    )
    assert result is not None
    assert result.utcoffset() == timedelta(hours=-5)
    assert to_utc(result) == datetime(2020, 6, 11, 3, 3, 15, tzinfo=UTC)


def test_us_default_clamps_to_sql_server_floor(sanitizer: Sanitizer) -> None:
    result = sanitizer.dates.clamp_date_us_default(
        "1700-01-25 16:01:36.000", DateDataType.SQL_SERVER_DATE_TIME, DateDelimiter.DASH
    )
    assert result == datetime(1753, 1, 1)
    assert len(sanitizer.faults) == 0


def test_us_default_accepts_dates_inside_the_sql_server_range(sanitizer: Sanitizer) -> None:
    assert sanitizer.dates.clamp_date_us_default("12/31/1999") == datetime(1999, 12, 31)


def test_out_of_range_dates_snap_to_bounds(sanitizer: Sanitizer) -> None:
    floor = datetime(2000, 1, 1)
    ceiling = datetime(2010, 1, 1)
    assert sanitizer.dates.clamp_date("1/1/1990", ceiling, floor) == floor
    assert sanitizer.dates.clamp_date("1/1/2020", ceiling, floor) == ceiling
    assert sanitizer.dates.clamp_date("1/1/2005", ceiling, floor) == datetime(2005, 1, 1)


def test_missing_delimiter_is_a_fault(sanitizer: Sanitizer) -> None:
    assert sanitizer.dates.clamp_date("01-25-1970", LATEST, EARLIEST) is None
    assert _messages(sanitizer) == ["Invalid date: missing forward slash delimiter."]


@pytest.mark.parametrize("text", ["02/30/2020", "02/29/2019", "13/01/2020", "1/25/19701"])
def test_calendar_invalid_dates_fail_the_grammar(sanitizer: Sanitizer, text: str) -> None:
    assert sanitizer.dates.clamp_date(text, LATEST, EARLIEST) is None
    assert _messages(sanitizer) == ["Fails to match date grammar in US format mm/dd/yyyy."]


def test_inverted_range_is_a_fault(sanitizer: Sanitizer) -> None:
    assert sanitizer.dates.clamp_date("1/25/1970", EARLIEST, LATEST) is None
    assert _messages(sanitizer) == [INVALID_RANGE_MESSAGE]


def test_unsupported_selection_is_a_fault(sanitizer: Sanitizer) -> None:
    result = sanitizer.dates.clamp_date(
        "1/25/1970 10:00",
        LATEST,
        EARLIEST,
        DateDataType.DATE_TIME,
        DateDelimiter.FORWARD_SLASH,
        RegionalFormat.EURO,
    )
    assert result is None
    (message,) = _messages(sanitizer)
    assert message.startswith("Unsupported date selection")


def test_hour_minute_times_have_no_am_pm_grammar(sanitizer: Sanitizer) -> None:
    result = sanitizer.dates.clamp_date(
        "02/18/1953 10:30 PM",
        LATEST,
        EARLIEST,
        DateDataType.DATE_TIME,
        DateDelimiter.FORWARD_SLASH,
        RegionalFormat.US,
        expect_am_pm=True,
    )
    assert result is None
    assert _messages(sanitizer) == ["Unsupported date selection: date_time/us/forward_slash."]
    assert (
        lookup_grammar(
            DateDataType.DATE_TIME, RegionalFormat.US, DateDelimiter.FORWARD_SLASH, True
        )
        is None
    )


@pytest.mark.parametrize("value", [None, "", "   "])
def test_blank_dates_are_skipped(sanitizer: Sanitizer, value: str | None) -> None:
    assert sanitizer.dates.clamp_date(value, LATEST, EARLIEST) is None
    assert sanitizer.dates.clamp_date_us_default(value) is None
    assert len(sanitizer.faults) == 0


def test_throw_policy_raises_with_range_clamp_category() -> None:
    sanitizer = Sanitizer(FaultPolicy.THROW, log_fault_events=False)
    with pytest.raises(SanitizerFault) as excinfo:
        sanitizer.dates.clamp_date("02/30/2020", LATEST, EARLIEST)
    assert excinfo.value.snippet == "02302020"
    assert excinfo.value.category.title == "RangeClamp"


def test_grammar_table_resolves_utc_selections_independently_of_format() -> None:
    utc = lookup_grammar(
        DateDataType.DATE_TIME, RegionalFormat.NONE, DateDelimiter.UTC_WITH_DELIMITERS, True
    )
    assert utc is not None
    assert utc.name == "utc_with_delimiters"
    assert (
        lookup_grammar(DateDataType.DATE, RegionalFormat.NONE, DateDelimiter.DASH, False) is None
    )
    assert len({grammar.name for grammar in DATE_GRAMMARS.values()}) > 20
