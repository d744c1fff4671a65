"""
input-sanitizer — list comparison public API

File: src/input_sanitizer/lists/__init__.py
Last updated: 2026-10-19

Purpose
- Export the allow-list comparator, the restricted-list reviewer, and the
  built-in token lists.
"""

from input_sanitizer.lists.allow_list import EMPTY_REFERENCE_MESSAGE, MISMATCH_MESSAGE, AllowList
from input_sanitizer.lists.restricted_list import (
    COMBINED_HIT_MESSAGE,
    COMMON_HIT_MESSAGE,
    EMPTY_RESTRICTED_LIST_MESSAGE,
    RESTRICTED_HIT_MESSAGE,
    RestrictedList,
    strip_tokens_ignore_case,
)
from input_sanitizer.lists.tokens import (
    COMMON_MALICIOUS_TOKENS,
    FILENAME_MALICIOUS_MARKERS,
    HEX_ESCAPE_TOKENS,
)

__all__ = [
    "COMBINED_HIT_MESSAGE",
    "COMMON_HIT_MESSAGE",
    "COMMON_MALICIOUS_TOKENS",
    "EMPTY_REFERENCE_MESSAGE",
    "EMPTY_RESTRICTED_LIST_MESSAGE",
    "FILENAME_MALICIOUS_MARKERS",
    "HEX_ESCAPE_TOKENS",
    "MISMATCH_MESSAGE",
    "RESTRICTED_HIT_MESSAGE",
    "AllowList",
    "RestrictedList",
    "strip_tokens_ignore_case",
]
