"""Explicit three-way outcome for sanitizer checks."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class CheckOutcome(StrEnum):
    """Result of a comparison check.

    ``SKIPPED_BLANK`` means the subject was empty or whitespace and no check ran;
    it is a no-op success and is never a fault.
    """

    ACCEPTED = "accepted"
    REJECTED = "rejected"
    SKIPPED_BLANK = "skipped_blank"


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Outcome plus the subject value after the check (possibly replaced)."""

    outcome: CheckOutcome
    value: str | None

    @property
    def accepted(self) -> bool:
        return self.outcome is CheckOutcome.ACCEPTED

    @property
    def rejected(self) -> bool:
        return self.outcome is CheckOutcome.REJECTED

    @property
    def skipped(self) -> bool:
        return self.outcome is CheckOutcome.SKIPPED_BLANK

    @classmethod
    def skipped_blank(cls) -> CheckResult:
        return cls(outcome=CheckOutcome.SKIPPED_BLANK, value=None)


def is_blank(value: str | None) -> bool:
    """True for ``None``, empty, or whitespace-only strings."""
    return value is None or not value.strip()


__all__ = ["CheckOutcome", "CheckResult", "is_blank"]
