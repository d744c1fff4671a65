"""Stable constants shared across sanitizer components."""

from __future__ import annotations

from datetime import datetime
from typing import Final

# Schema version for persisted configuration.
CONFIG_SCHEMA_VERSION: Final[int] = 1

# Snippet caps per fault category (characters kept from the offending value).
LENGTH_BOUND_SNIPPET_CAP: Final[int] = 5
NORMALIZE_SNIPPET_CAP: Final[int] = 5
RANGE_CLAMP_SNIPPET_CAP: Final[int] = 33
LIST_COMPARE_SNIPPET_CAP: Final[int] = 10
FILENAME_VALIDATE_SNIPPET_CAP: Final[int] = 15

# Longest literal date/time format supported by the date grammars.
DATETIME_TEXT_CAP: Final[int] = 33
# Numeric text longer than this cannot be a supported value.
NUMERIC_TEXT_CAP: Final[int] = 33
BOOLEAN_TEXT_CAP: Final[int] = 5

INT32_MIN: Final[int] = -(2**31)
INT32_MAX: Final[int] = 2**31 - 1
INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1

# SQL Server ``datetime`` range.
SQL_SERVER_MIN_DATETIME: Final[datetime] = datetime(1753, 1, 1)
SQL_SERVER_MAX_DATETIME: Final[datetime] = datetime(9999, 12, 31, 23, 59, 59, 997000)

__all__ = [
    "BOOLEAN_TEXT_CAP",
    "CONFIG_SCHEMA_VERSION",
    "DATETIME_TEXT_CAP",
    "FILENAME_VALIDATE_SNIPPET_CAP",
    "INT32_MAX",
    "INT32_MIN",
    "INT64_MAX",
    "INT64_MIN",
    "LENGTH_BOUND_SNIPPET_CAP",
    "LIST_COMPARE_SNIPPET_CAP",
    "NORMALIZE_SNIPPET_CAP",
    "NUMERIC_TEXT_CAP",
    "RANGE_CLAMP_SNIPPET_CAP",
    "SQL_SERVER_MAX_DATETIME",
    "SQL_SERVER_MIN_DATETIME",
]
