"""
input-sanitizer — built-in restricted token lists

File: src/input_sanitizer/lists/tokens.py
Last updated: 2026-10-19

Purpose
- Fixed literal lists stripped by the restricted-list review and the filename
  validator.

What should be included in this file
- Dangerous control, format, and whitespace characters, both as real code points
  and as their backslash-escape spellings.
- Format-string specifiers, hex/octal escape spellings, and template openers.

Non-functional requirements
- Data only; order matters because stripping runs token by token.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Final


def _unique(tokens: Iterable[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(tokens))


COMMON_MALICIOUS_TOKENS: Final[tuple[str, ...]] = _unique(
    (
        # Escape spellings as they appear in hostile payloads.
        "\\x0",
        "\\0",
        "\\u00A0",
        "\\u2B7E",
        "\\u000A",
        "\\u000D",
        "\\u2B7F",
        "\\u200B",
        "\\u2009",
        "\\u007F",
        "\\u0000",
        "\\u202E",
        "\\u200F",
        "% 00",
        "%00",
        # The characters themselves.
        "\x00",
        "\N{NO-BREAK SPACE}",
        "\u2b7e",
        "\n",
        "\r",
        "\u2b7f",
        "\N{ZERO WIDTH SPACE}",
        "\N{THIN SPACE}",
        "\x7f",
        "\N{RIGHT-TO-LEFT OVERRIDE}",
        "\N{RIGHT-TO-LEFT MARK}",
        "\N{REPLACEMENT CHARACTER}",
    )
)

HEX_ESCAPE_TOKENS: Final[tuple[str, ...]] = _unique(
    (
        # Format-string specifiers.
        "%%",
        "%p",
        "%d",
        "%c",
        "%u",
        "%x",
        "%s",
        "%n",
        # Hex and octal escape spellings.
        "\\x",
        "\\\\x",
        "0o",
        "\\\\0",
        "\\\\1",
        "\\0",
        "\\1",
        "\\\\c",
        "\\c",
        "\\\\3",
        "\\3",
        # Quote and control escape spellings.
        "\\'",
        '\\"',
        "\\a",
        "\\t",
        "\\n",
        "\\r",
        "\\v",
        "\\b",
        "\\f",
        "{{",
        # Real characters.
        "\x00",
        "'",
        '""',
        "\a",
        "\t",
        "\n",
        "\r",
        "\v",
        "\b",
        "\f",
    )
)

FILENAME_MALICIOUS_MARKERS: Final[tuple[str, ...]] = (
    "\x00",
    "\N{NO-BREAK SPACE}",
    "\u2b7e",
    "\n",
    "\r",
    "\u2b7f",
    "\N{ZERO WIDTH SPACE}",
    "\N{THIN SPACE}",
    "\x7f",
    "\N{RIGHT-TO-LEFT OVERRIDE}",
    "\N{LEFT-TO-RIGHT OVERRIDE}",
    "\N{RIGHT-TO-LEFT MARK}",
    "\N{LEFT-TO-RIGHT MARK}",
    "% 00",
    "%00",
)

__all__ = ["COMMON_MALICIOUS_TOKENS", "FILENAME_MALICIOUS_MARKERS", "HEX_ESCAPE_TOKENS"]
