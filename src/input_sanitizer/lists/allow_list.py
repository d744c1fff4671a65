"""
input-sanitizer — allow-list comparisons

File: src/input_sanitizer/lists/allow_list.py
Last updated: 2026-10-19

Purpose
- Accept an untrusted subject only when it matches a caller-supplied reference.

What should be included in this file
- Exact, prefix, and suffix comparisons, each with a case-insensitive variant.
- ASCII and Unicode comparison modes.

Functional requirements
- Blank subjects are skipped, never faulted.
- A mismatch always faults; under the collect policy it yields ``REJECTED``.
- Case-insensitive ``equals`` replaces the subject with the reference casing.

Non-functional requirements
- The subject is bounded before it is normalized.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Final

from input_sanitizer.bounding import LengthBounder
from input_sanitizer.context import SanitizerComponent, SanitizerContext
from input_sanitizer.faults import FaultCategory, SanitizerViolation
from input_sanitizer.formats import CompareMode
from input_sanitizer.normalizer import fold_to_ascii, nfkc
from input_sanitizer.results import CheckOutcome, CheckResult, is_blank

EMPTY_REFERENCE_MESSAGE: Final[str] = "Allowed-list value cannot be null or empty."
MISMATCH_MESSAGE: Final[str] = "Subject does not match the allowed-list value."

_Predicate = Callable[[str, str], bool]


class AllowList(SanitizerComponent):
    """Compare bounded, normalized subjects against one allowed reference value."""

    category = FaultCategory.LIST_COMPARE

    def __init__(self, context: SanitizerContext, bounder: LengthBounder | None = None) -> None:
        super().__init__(context)
        self._bounder = bounder if bounder is not None else LengthBounder(context)

    def equals(
        self,
        subject: str | None,
        reference: str | None,
        length_limit: int,
        mode: CompareMode = CompareMode.ASCII,
    ) -> CheckResult:
        return self._compare(subject, reference, length_limit, mode, str.__eq__, False, True)

    def equals_ignore_case(
        self,
        subject: str | None,
        reference: str | None,
        length_limit: int,
        mode: CompareMode = CompareMode.ASCII,
    ) -> CheckResult:
        return self._compare(subject, reference, length_limit, mode, str.__eq__, True, True)

    def starts_with(
        self,
        subject: str | None,
        reference: str | None,
        length_limit: int,
        mode: CompareMode = CompareMode.ASCII,
    ) -> CheckResult:
        return self._compare(subject, reference, length_limit, mode, str.startswith, False, False)

    def starts_with_ignore_case(
        self,
        subject: str | None,
        reference: str | None,
        length_limit: int,
        mode: CompareMode = CompareMode.ASCII,
    ) -> CheckResult:
        return self._compare(subject, reference, length_limit, mode, str.startswith, True, False)

    def ends_with(
        self,
        subject: str | None,
        reference: str | None,
        length_limit: int,
        mode: CompareMode = CompareMode.ASCII,
    ) -> CheckResult:
        return self._compare(subject, reference, length_limit, mode, str.endswith, False, False)

    def ends_with_ignore_case(
        self,
        subject: str | None,
        reference: str | None,
        length_limit: int,
        mode: CompareMode = CompareMode.ASCII,
    ) -> CheckResult:
        return self._compare(subject, reference, length_limit, mode, str.endswith, True, False)

    def _compare(
        self,
        subject: str | None,
        reference: str | None,
        length_limit: int,
        mode: CompareMode,
        predicate: _Predicate,
        ignore_case: bool,
        replace_with_reference: bool,
    ) -> CheckResult:
        if is_blank(subject):
            return CheckResult.skipped_blank()
        assert subject is not None

        if not reference:
            self._fault(subject, SanitizerViolation(EMPTY_REFERENCE_MESSAGE))
            return CheckResult(outcome=CheckOutcome.REJECTED, value=subject)

        bounded = self._bounder.bound(subject, length_limit)
        if bounded is None:
            # Negative cap, already reported by the bounder.
            return CheckResult(outcome=CheckOutcome.REJECTED, value=subject)

        mode = CompareMode(mode)
        normalized = _normalize(bounded, mode)
        left, right = normalized, reference
        if ignore_case:
            left, right = _fold_case(left, mode), _fold_case(right, mode)

        if not predicate(left, right):
            self._fault(subject, SanitizerViolation(MISMATCH_MESSAGE))
            return CheckResult(outcome=CheckOutcome.REJECTED, value=subject)

        value = reference if replace_with_reference else normalized
        return CheckResult(outcome=CheckOutcome.ACCEPTED, value=value)


def _normalize(value: str, mode: CompareMode) -> str:
    if mode is CompareMode.UNICODE:
        return nfkc(value)
    return fold_to_ascii(value)


def _fold_case(value: str, mode: CompareMode) -> str:
    if mode is CompareMode.UNICODE:
        return value.casefold()
    return value.lower()


__all__ = ["EMPTY_REFERENCE_MESSAGE", "MISMATCH_MESSAGE", "AllowList"]
