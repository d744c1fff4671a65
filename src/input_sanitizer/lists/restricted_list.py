"""
input-sanitizer — restricted-list review

File: src/input_sanitizer/lists/restricted_list.py
Last updated: 2026-10-19

Purpose
- Strip restricted tokens from an untrusted subject and fault when any were found.

What should be included in this file
- Case-insensitive token stripping over a bounded, normalized copy.
- Optional built-in common-malicious and hex/escape token lists.

Functional requirements
- Blank subjects are skipped; an empty restricted list is a fault.
- Any stripping is a finding: the call faults once with a message naming the
  lists that hit, and under the collect policy returns the cleansed text.
- Built-in hex/escape tokens are stripped before caller values.

Non-functional requirements
- Fail-open with cleansing: this is monitoring, not a substitute for allow-lists.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from typing import Final

from input_sanitizer.bounding import LengthBounder
from input_sanitizer.context import SanitizerComponent, SanitizerContext
from input_sanitizer.faults import FaultCategory, SanitizerViolation
from input_sanitizer.lists.tokens import COMMON_MALICIOUS_TOKENS, HEX_ESCAPE_TOKENS
from input_sanitizer.normalizer import fold_to_ascii, normalize_unicode_text
from input_sanitizer.results import CheckOutcome, CheckResult, is_blank

EMPTY_RESTRICTED_LIST_MESSAGE: Final[str] = "Restricted-list values cannot be null or empty."
RESTRICTED_HIT_MESSAGE: Final[str] = "Subject contains a restricted-list value."
COMMON_HIT_MESSAGE: Final[str] = "Subject contains a common malicious character."
COMBINED_HIT_MESSAGE: Final[str] = (
    "Subject contains a common malicious character and a restricted-list value."
)


def strip_tokens_ignore_case(value: str, tokens: Iterable[str]) -> str:
    """Remove every occurrence of each token in order, ignoring case."""
    for token in tokens:
        if not token:
            continue
        value = re.sub(re.escape(token), "", value, flags=re.IGNORECASE)
    return value


class RestrictedList(SanitizerComponent):
    """Review subjects against restricted values and built-in token lists."""

    category = FaultCategory.LIST_COMPARE

    def __init__(self, context: SanitizerContext, bounder: LengthBounder | None = None) -> None:
        super().__init__(context)
        self._bounder = bounder if bounder is not None else LengthBounder(context)

    def review_ignore_case(
        self,
        subject: str | None,
        restricted_values: Sequence[str] | None,
        length_limit: int,
        *,
        check_common_chars: bool = False,
        check_hex_escapes: bool = False,
    ) -> CheckResult:
        if is_blank(subject):
            return CheckResult.skipped_blank()
        assert subject is not None

        if not restricted_values:
            self._fault(subject, SanitizerViolation(EMPTY_RESTRICTED_LIST_MESSAGE))
            return CheckResult(outcome=CheckOutcome.REJECTED, value=subject)

        bounded = self._bounder.bound(subject, length_limit)
        if bounded is None:
            return CheckResult(outcome=CheckOutcome.REJECTED, value=subject)

        current = bounded
        common_hit = False
        if check_common_chars:
            normalized = normalize_unicode_text(bounded)
            stripped = strip_tokens_ignore_case(normalized, COMMON_MALICIOUS_TOKENS)
            if len(stripped) < len(normalized):
                common_hit = True
                current = stripped

        tokens: list[str] = []
        if check_hex_escapes:
            tokens.extend(HEX_ESCAPE_TOKENS)
        tokens.extend(restricted_values)

        restricted_hit = False
        reduced = fold_to_ascii(self._bounder.bound(current, length_limit) or "")
        stripped = strip_tokens_ignore_case(reduced, tokens)
        if len(stripped) < len(reduced):
            restricted_hit = True
            current = stripped

        if not (common_hit or restricted_hit):
            return CheckResult(outcome=CheckOutcome.ACCEPTED, value=bounded)

        if common_hit and restricted_hit:
            message = COMBINED_HIT_MESSAGE
        elif restricted_hit:
            message = RESTRICTED_HIT_MESSAGE
        else:
            message = COMMON_HIT_MESSAGE
        self._fault(current, SanitizerViolation(message))
        return CheckResult(outcome=CheckOutcome.REJECTED, value=current)


__all__ = [
    "COMBINED_HIT_MESSAGE",
    "COMMON_HIT_MESSAGE",
    "EMPTY_RESTRICTED_LIST_MESSAGE",
    "RESTRICTED_HIT_MESSAGE",
    "RestrictedList",
    "strip_tokens_ignore_case",
]
