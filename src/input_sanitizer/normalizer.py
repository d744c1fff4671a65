"""
input-sanitizer — Unicode normalization and character-set reduction

File: src/input_sanitizer/normalizer.py
Last updated: 2026-10-19

Purpose
- Reduce untrusted text to a canonical, narrow character set before it is
  compared, parsed, or stored.

What should be included in this file
- NFKC normalization with non-spacing mark removal.
- ASCII-only reduction with a fixed Latin diacritic folding table.
- Numeric and date/time character-set reductions.
- Malformed byte sequence detection.

Functional requirements
- Every reduction is idempotent.
- Blank input maps to ``None`` without a fault.

Non-functional requirements
- Pure character filtering; lossy by construction.
"""

from __future__ import annotations

import unicodedata
from functools import lru_cache
from typing import Final

from input_sanitizer.constants import DATETIME_TEXT_CAP
from input_sanitizer.context import SanitizerComponent
from input_sanitizer.faults import FaultCategory
from input_sanitizer.formats import DateDataType, DateDelimiter
from input_sanitizer.results import is_blank

UNICODE_REPLACEMENT_CHAR: Final[str] = "\ufffd"

_PLAIN_ASCII: Final[str] = (
    "AaEeIiOoUu"  # grave
    "AaEeIiOoUuYy"  # acute
    "AaEeIiOoUuYy"  # circumflex
    "AaOoNn"  # tilde
    "AaEeIiOoUuYy"  # umlaut
    "AaUu"  # ring
    "Cc"  # cedilla
    "OoUu"  # double acute
)
_ACCENTED: Final[str] = (
    "ÀàÈèÌìÒòÙù"
    "ÁáÉéÍíÓóÚúÝý"
    "ÂâÊêÎîÔôÛûŶŷ"
    "ÃãÕõÑñ"
    "ÄäËëÏïÖöÜüŸÿ"
    "ÅåŮů"
    "Çç"
    "ŐőŰű"
)
_DIACRITIC_FOLD: Final[dict[int, int]] = str.maketrans(_ACCENTED, _PLAIN_ASCII)

_DIGITS: Final[frozenset[str]] = frozenset("0123456789")
_UTC_TOKENS: Final[frozenset[str]] = frozenset({"T", "Z", ":", "+", "-", " "})
_AM_PM_LETTERS: Final[frozenset[str]] = frozenset("APMapm ")


def nfkc(value: str) -> str:
    return unicodedata.normalize("NFKC", value)


def normalize_unicode_text(value: str) -> str:
    """NFKC, then drop non-spacing combining marks (category ``Mn``).

    Dropping a mark can unblock a composition between its neighbours, so the
    result is recomposed once more.
    """
    stripped = "".join(char for char in nfkc(value) if unicodedata.category(char) != "Mn")
    return nfkc(stripped)


def fold_to_ascii(value: str) -> str:
    """NFKC, fold known diacritics, then keep printable ASCII (0x20..0x7E) only."""
    folded = nfkc(value).translate(_DIACRITIC_FOLD)
    return "".join(char for char in folded if 0x20 <= ord(char) <= 0x7E)


def reduce_to_numbers(
    value: str,
    *,
    allow_spaces: bool = False,
    allow_parens: bool = False,
    allow_negative_sign: bool = False,
    allow_comma_and_dot: bool = False,
) -> str:
    allowed = set(_DIGITS)
    if allow_spaces:
        allowed.add(" ")
    if allow_parens:
        allowed.update("()")
    if allow_negative_sign:
        allowed.add("-")
    if allow_comma_and_dot:
        allowed.update(",.")
    return "".join(char for char in fold_to_ascii(value) if char in allowed)


@lru_cache(maxsize=64)
def datetime_charset(
    delimiter: DateDelimiter, data_type: DateDataType, allow_am_pm: bool
) -> frozenset[str]:
    """Characters retained by the date/time reduction for one selector combination."""
    allowed = set(_DIGITS)
    if delimiter.is_utc:
        allowed.update(_UTC_TOKENS)
    elif delimiter.literal is not None:
        allowed.add(delimiter.literal)

    if data_type is DateDataType.SQL_SERVER_DATE_TIME:
        allowed.update("-:. ")
    elif data_type.has_time:
        allowed.update(": ")
        if data_type is DateDataType.DATE_TIME_WITH_MILLISECONDS:
            allowed.add(".")

    if allow_am_pm:
        allowed.update(_AM_PM_LETTERS)
    return frozenset(allowed)


def reduce_to_datetime(
    value: str,
    delimiter: DateDelimiter,
    data_type: DateDataType,
    allow_am_pm: bool = False,
) -> str:
    allowed = datetime_charset(delimiter, data_type, allow_am_pm)
    bounded = value[:DATETIME_TEXT_CAP]
    return "".join(char for char in nfkc(bounded) if char in allowed)


def contains_malformed_bytes(raw: bytes, *, as_ascii: bool = False) -> bool:
    encoding = "ascii" if as_ascii else "utf-8"
    decoded = bytes(raw).decode(encoding, errors="replace")
    return UNICODE_REPLACEMENT_CHAR in decoded


class Normalizer(SanitizerComponent):
    """Fault-reporting front end over the pure reduction helpers."""

    category = FaultCategory.NORMALIZE

    def normalize_unicode(self, value: str | None) -> str | None:
        if is_blank(value):
            return None
        assert value is not None
        try:
            return normalize_unicode_text(value)
        except (UnicodeError, ValueError) as exc:
            self._fault(value, exc)
            return None

    def to_ascii_only(self, value: str | None) -> str | None:
        if is_blank(value):
            return None
        assert value is not None
        try:
            return fold_to_ascii(value)
        except (UnicodeError, ValueError) as exc:
            self._fault(value, exc)
            return None

    def to_ascii_numbers_only(
        self,
        value: str | None,
        allow_spaces: bool = False,
        allow_parens: bool = False,
        allow_negative_sign: bool = False,
        allow_comma_and_dot: bool = False,
    ) -> str | None:
        if is_blank(value):
            return None
        assert value is not None
        try:
            return reduce_to_numbers(
                value,
                allow_spaces=allow_spaces,
                allow_parens=allow_parens,
                allow_negative_sign=allow_negative_sign,
                allow_comma_and_dot=allow_comma_and_dot,
            )
        except (UnicodeError, ValueError) as exc:
            self._fault(value, exc)
            return None

    def to_ascii_datetime_only(
        self,
        value: str | None,
        delimiter: DateDelimiter,
        data_type: DateDataType,
        allow_am_pm: bool = False,
    ) -> str | None:
        if is_blank(value):
            return None
        assert value is not None
        try:
            return reduce_to_datetime(value, delimiter, data_type, allow_am_pm)
        except (UnicodeError, ValueError) as exc:
            self._fault(value, exc)
            return None

    def detect_malformed_bytes(self, raw: bytes | None, as_ascii: bool = False) -> bool:
        """True iff ``raw`` is not a valid byte sequence in the chosen encoding."""
        if not raw:
            return False
        return contains_malformed_bytes(raw, as_ascii=as_ascii)


__all__ = [
    "UNICODE_REPLACEMENT_CHAR",
    "Normalizer",
    "contains_malformed_bytes",
    "datetime_charset",
    "fold_to_ascii",
    "nfkc",
    "normalize_unicode_text",
    "reduce_to_datetime",
    "reduce_to_numbers",
]
