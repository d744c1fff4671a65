"""Selector enumerations shared by normalization, clamping, and comparison."""

from __future__ import annotations

from enum import StrEnum


class DateDataType(StrEnum):
    DATE = "date"
    DATE_TIME = "date_time"
    DATE_TIME_WITH_SECONDS = "date_time_with_seconds"
    DATE_TIME_WITH_MILLISECONDS = "date_time_with_milliseconds"
    SQL_SERVER_DATE_TIME = "sql_server_date_time"

    @property
    def has_time(self) -> bool:
        return self is not DateDataType.DATE


class DateDelimiter(StrEnum):
    FORWARD_SLASH = "forward_slash"
    DASH = "dash"
    DOT = "dot"
    UTC_WITH_DELIMITERS = "utc_with_delimiters"
    UTC_WITHOUT_DELIMITERS = "utc_without_delimiters"
    UTC_WITH_DELIMITERS_AND_ZONE = "utc_with_delimiters_and_zone"

    @property
    def is_utc(self) -> bool:
        return self.value.startswith("utc_")

    @property
    def literal(self) -> str | None:
        """Delimiter character that must appear in the raw text, if any."""
        return _DELIMITER_LITERALS.get(self)


_DELIMITER_LITERALS: dict[DateDelimiter, str] = {
    DateDelimiter.FORWARD_SLASH: "/",
    DateDelimiter.DASH: "-",
    DateDelimiter.DOT: ".",
}


class RegionalFormat(StrEnum):
    """Field order and locale convention for date parsing."""

    US = "us"
    EURO = "euro"
    CHINA = "china"
    SQL_SERVER = "sql_server"
    NONE = "none"


class SeparatorStyle(StrEnum):
    """Grouping / decimal separator convention for decimal parsing."""

    COMMA_GROUP_DOT_DECIMAL = "comma_dot"
    DOT_GROUP_COMMA_DECIMAL = "dot_comma"
    SPACE_GROUP_DOT_DECIMAL = "space_dot"
    SPACE_GROUP_COMMA_DECIMAL = "space_comma"

    @property
    def group_separator(self) -> str:
        if self is SeparatorStyle.COMMA_GROUP_DOT_DECIMAL:
            return ","
        if self is SeparatorStyle.DOT_GROUP_COMMA_DECIMAL:
            return "."
        return " "

    @property
    def decimal_separator(self) -> str:
        return "," if self.value.endswith("_comma") else "."


class CompareMode(StrEnum):
    """Normalization applied to a subject before allow-list comparison."""

    ASCII = "ascii"
    UNICODE = "unicode"


__all__ = [
    "CompareMode",
    "DateDataType",
    "DateDelimiter",
    "RegionalFormat",
    "SeparatorStyle",
]
