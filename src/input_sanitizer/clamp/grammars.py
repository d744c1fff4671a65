"""
input-sanitizer — date/time grammar table

File: src/input_sanitizer/clamp/grammars.py
Last updated: 2026-10-19

Purpose
- Map each supported (data type, regional format, delimiter, AM/PM) selection to
  a data-only grammar descriptor: a full-match regular expression plus the
  ``strptime`` templates tried in order.

What should be included in this file
- Calendar-correct grammars (days per month, leap years with century rules) for
  bare dates.
- Shape-only grammars for date-times; the exact-format parse decides the rest.

Functional requirements
- The table is built once at import time.
- Unsupported selections resolve to ``None``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from input_sanitizer.formats import DateDataType, DateDelimiter, RegionalFormat

# OWASP validation regex repository: mm/dd/yyyy with leap years.
US_DATE_PATTERN: Final[str] = (
    r"^(?:(?:(?:0?[13578]|1[02])(\/|-|\.)31)\1|(?:(?:0?[1,3-9]|1[0-2])(\/|-|\.)(?:29|30)\2))"
    r"(?:(?:1[6-9]|[2-9]\d)?\d{2})$"
    r"|^(?:0?2(\/|-|\.)29\3(?:(?:(?:1[6-9]|[2-9]\d)?(?:0[48]|[2468][048]|[13579][26])"
    r"|(?:(?:16|[2468][048]|[3579][26])00))))$"
    r"|^(?:(?:0?[1-9])|(?:1[0-2]))(\/|-|\.)(?:0?[1-9]|1\d|2[0-8])\4(?:(?:1[6-9]|[2-9]\d)?\d{2})$"
)

# dd/mm/yyyy with leap years and the Gregorian switch-over gaps excluded.
EURO_DATE_PATTERN: Final[str] = (
    r"^(?=\d)(?!(?:(?:0?[5-9]|1[0-4])(?:\.|-|\/)10(?:\.|-|\/)(?:1582))"
    r"|(?:(?:0?[3-9]|1[0-3])(?:\.|-|\/)0?9(?:\.|-|\/)(?:1752)))"
    r"(31(?!(?:\.|-|\/)(?:0?[2469]|11))|30(?!(?:\.|-|\/)0?2)"
    r"|(?:29(?:(?!(?:\.|-|\/)0?2(?:\.|-|\/))|(?=\D0?2\D(?:(?!000[04]"
    r"|(?:(?:1[^0-6]|[2468][^048]|[3579][^26])00))(?:(?:(?:\d\d)(?:[02468][048]|[13579][26])"
    r"(?!\x20BC))|(?:00(?:42|3[0369]|2[147]|1[258]|09)\x20BC))))))|2[0-8]|1\d|0?[1-9])"
    r"([-.\/])(1[012]|(?:0?[1-9]))\2"
    r"((?=(?:00(?:4[0-5]|[0-3]?\d)\x20BC)|(?:\d{4}(?:$|(?=\x20\d)\x20)))\d{4})$"
)

# yyyy/mm/dd with leap years.
_YEAR_FIRST_DATE: Final[str] = (
    r"(?:(?:(?:(?:(?:1[6-9]|[2-9]\d)?(?:0[48]|[2468][048]|[13579][26])"
    r"|(?:(?:16|[2468][048]|[3579][26])00)))(\/|-|\.)(?:0?2\1(?:29)))"
    r"|(?:(?:(?:1[6-9]|[2-9]\d)?\d{2})(\/|-|\.)(?:(?:(?:0?[13578]|1[02])\2(?:31))"
    r"|(?:(?:0?[1,3-9]|1[0-2])\2(29|30))|(?:(?:0?[1-9])|(?:1[0-2]))\2(?:0?[1-9]|1\d|2[0-8]))))"
)
CHINA_DATE_PATTERN: Final[str] = rf"^{_YEAR_FIRST_DATE}$"
SQL_SERVER_DATE_TIME_PATTERN: Final[str] = (
    rf"^{_YEAR_FIRST_DATE} ([0-2]?[0-9]\:[0-6][0-9]\:[0-6][0-9]\.[0-9]{{3}})$"
)

_US_DATE_PREFIX: Final[str] = r"^([0-1]?)([0-9])(\/|-|\.)([0-3]?)([0-9])(\/|-|\.)"
US_DATE_TIME_PATTERN: Final[str] = (
    rf"{_US_DATE_PREFIX}([0-2])([0-9])([0-9])([0-9]) ([0-2][0-9]\:[0-6][0-9])$"
)
US_DATE_TIME_SECONDS_PATTERN: Final[str] = (
    rf"{_US_DATE_PREFIX}([0-2])([0-9])([0-9])([0-9]) ([0-2]?[0-9]\:[0-6][0-9]\:[0-6][0-9])$"
)
US_DATE_TIME_SECONDS_AM_PM_PATTERN: Final[str] = (
    rf"{_US_DATE_PREFIX}([0-2])([0-9])([0-9])([0-9]) "
    r"([0-2]?[0-9]\:[0-6][0-9]\:[0-6][0-9]) ([A|P]M)$"
)
US_DATE_TIME_MILLISECONDS_PATTERN: Final[str] = (
    rf"{_US_DATE_PREFIX}([0-2])([0-9]{{3}}) ([0-2]?[0-9]\:[0-6][0-9]\:[0-6][0-9]\.[0-9]{{3}})$"
)
US_DATE_TIME_MILLISECONDS_AM_PM_PATTERN: Final[str] = (
    rf"{_US_DATE_PREFIX}([0-2])([0-9]{{3}}) "
    r"([0-2]?[0-9]\:[0-6][0-9]\:[0-6][0-9]\.[0-9]{3}) ([A|P]M)$"
)

UTC_WITH_DELIMITERS_PATTERN: Final[str] = (
    r"^[0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}:[0-9]{2}Z?$"
)
UTC_WITH_DELIMITERS_AND_ZONE_PATTERN: Final[str] = (
    r"^[0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}:[0-9]{2}(?:\-|\+)([0-9]{2}:[0-9]{2})Z?$"
)
UTC_WITHOUT_DELIMITERS_PATTERN: Final[str] = r"^[0-9]{4}[0-9]{2}[0-9]{2}T[0-9]{2}[0-9]{2}[0-9]{2}$"


@dataclass(frozen=True, slots=True)
class GrammarKey:
    """Selector tuple; UTC delimiters use ``None`` for data type and format."""

    data_type: DateDataType | None
    regional_format: RegionalFormat | None
    delimiter: DateDelimiter
    expect_am_pm: bool

    @classmethod
    def for_selection(
        cls,
        data_type: DateDataType,
        regional_format: RegionalFormat,
        delimiter: DateDelimiter,
        expect_am_pm: bool,
    ) -> GrammarKey:
        if delimiter.is_utc:
            return cls(None, None, delimiter, False)
        return cls(data_type, regional_format, delimiter, expect_am_pm)


@dataclass(frozen=True, slots=True)
class DateGrammar:
    """Full-match pattern text plus ordered ``strptime`` templates."""

    name: str
    pattern: str
    templates: tuple[str, ...]
    failure_message: str


_SEPARATED_DELIMITERS: Final[tuple[DateDelimiter, ...]] = (
    DateDelimiter.FORWARD_SLASH,
    DateDelimiter.DASH,
    DateDelimiter.DOT,
)


def _separated_grammars() -> dict[GrammarKey, DateGrammar]:
    table: dict[GrammarKey, DateGrammar] = {}

    def register(
        data_type: DateDataType,
        regional_format: RegionalFormat,
        delimiter: DateDelimiter,
        grammar: DateGrammar,
        *,
        am_pm: tuple[bool, ...],
    ) -> None:
        for flag in am_pm:
            table[GrammarKey(data_type, regional_format, delimiter, flag)] = grammar

    both = (False, True)
    for delimiter in _SEPARATED_DELIMITERS:
        d = delimiter.literal
        register(
            DateDataType.DATE,
            RegionalFormat.US,
            delimiter,
            DateGrammar(
                name=f"us_date_{delimiter.value}",
                pattern=US_DATE_PATTERN,
                templates=(f"%m{d}%d{d}%Y", f"%m{d}%d{d}%y"),
                failure_message="Fails to match date grammar in US format mm/dd/yyyy.",
            ),
            am_pm=both,
        )
        register(
            DateDataType.DATE,
            RegionalFormat.EURO,
            delimiter,
            DateGrammar(
                name=f"euro_date_{delimiter.value}",
                pattern=EURO_DATE_PATTERN,
                templates=(f"%d{d}%m{d}%Y",),
                failure_message="Fails to match date grammar in Euro format dd/mm/yyyy.",
            ),
            am_pm=both,
        )
        register(
            DateDataType.DATE,
            RegionalFormat.CHINA,
            delimiter,
            DateGrammar(
                name=f"china_date_{delimiter.value}",
                pattern=CHINA_DATE_PATTERN,
                templates=(f"%Y{d}%m{d}%d", f"%y{d}%m{d}%d"),
                failure_message="Fails to match date grammar in China format yyyy/mm/dd.",
            ),
            am_pm=both,
        )
        register(
            DateDataType.DATE_TIME,
            RegionalFormat.US,
            delimiter,
            DateGrammar(
                name=f"us_date_time_{delimiter.value}",
                pattern=US_DATE_TIME_PATTERN,
                templates=(f"%m{d}%d{d}%Y %H:%M",),
                failure_message="Fails to match date grammar in US format with hh:mm.",
            ),
            am_pm=(False,),
        )
        register(
            DateDataType.DATE_TIME_WITH_SECONDS,
            RegionalFormat.US,
            delimiter,
            DateGrammar(
                name=f"us_date_time_seconds_{delimiter.value}",
                pattern=US_DATE_TIME_SECONDS_PATTERN,
                templates=(f"%m{d}%d{d}%Y %H:%M:%S",),
                failure_message="Fails to match date grammar in US format with hh:mm:ss.",
            ),
            am_pm=(False,),
        )
        register(
            DateDataType.DATE_TIME_WITH_SECONDS,
            RegionalFormat.US,
            delimiter,
            DateGrammar(
                name=f"us_date_time_seconds_am_pm_{delimiter.value}",
                pattern=US_DATE_TIME_SECONDS_AM_PM_PATTERN,
                templates=(f"%m{d}%d{d}%Y %I:%M:%S %p",),
                failure_message="Fails to match date grammar in US format with hh:mm:ss AM/PM.",
            ),
            am_pm=(True,),
        )
        register(
            DateDataType.DATE_TIME_WITH_MILLISECONDS,
            RegionalFormat.US,
            delimiter,
            DateGrammar(
                name=f"us_date_time_milliseconds_{delimiter.value}",
                pattern=US_DATE_TIME_MILLISECONDS_PATTERN,
                templates=(f"%m{d}%d{d}%Y %H:%M:%S.%f",),
                failure_message="Fails to match date grammar in US format with hh:mm:ss.fff.",
            ),
            am_pm=(False,),
        )
        register(
            DateDataType.DATE_TIME_WITH_MILLISECONDS,
            RegionalFormat.US,
            delimiter,
            DateGrammar(
                name=f"us_date_time_milliseconds_am_pm_{delimiter.value}",
                pattern=US_DATE_TIME_MILLISECONDS_AM_PM_PATTERN,
                templates=(f"%m{d}%d{d}%Y %I:%M:%S.%f %p",),
                failure_message=(
                    "Fails to match date grammar in US format with hh:mm:ss.fff AM/PM."
                ),
            ),
            am_pm=(True,),
        )
        register(
            DateDataType.SQL_SERVER_DATE_TIME,
            RegionalFormat.SQL_SERVER,
            delimiter,
            DateGrammar(
                name=f"sql_server_date_time_{delimiter.value}",
                pattern=SQL_SERVER_DATE_TIME_PATTERN,
                templates=(f"%Y{d}%m{d}%d %H:%M:%S.%f",),
                failure_message="Fails to match date grammar in SQL Server format.",
            ),
            am_pm=both,
        )
    return table


def _utc_grammars() -> dict[GrammarKey, DateGrammar]:
    return {
        GrammarKey(None, None, DateDelimiter.UTC_WITH_DELIMITERS, False): DateGrammar(
            name="utc_with_delimiters",
            pattern=UTC_WITH_DELIMITERS_PATTERN,
            templates=("%Y-%m-%dT%H:%M:%S", "%Y-%m-%dT%H:%M:%S%z"),
            failure_message="Invalid date: format fails to match UTC with delimiters.",
        ),
        GrammarKey(None, None, DateDelimiter.UTC_WITHOUT_DELIMITERS, False): DateGrammar(
            name="utc_without_delimiters",
            pattern=UTC_WITHOUT_DELIMITERS_PATTERN,
            templates=("%Y%m%dT%H%M%S",),
            failure_message="Invalid date: format fails to match UTC without delimiters.",
        ),
        GrammarKey(None, None, DateDelimiter.UTC_WITH_DELIMITERS_AND_ZONE, False): DateGrammar(
            name="utc_with_delimiters_and_zone",
            pattern=UTC_WITH_DELIMITERS_AND_ZONE_PATTERN,
            templates=("%Y-%m-%dT%H:%M:%S%z",),
            failure_message="Invalid date: format fails to match UTC with delimiters and zone.",
        ),
    }


DATE_GRAMMARS: Final[dict[GrammarKey, DateGrammar]] = {
    **_separated_grammars(),
    **_utc_grammars(),
}


def lookup_grammar(
    data_type: DateDataType,
    regional_format: RegionalFormat,
    delimiter: DateDelimiter,
    expect_am_pm: bool,
) -> DateGrammar | None:
    key = GrammarKey.for_selection(data_type, regional_format, delimiter, expect_am_pm)
    return DATE_GRAMMARS.get(key)


__all__ = [
    "DATE_GRAMMARS",
    "DateGrammar",
    "GrammarKey",
    "lookup_grammar",
]
