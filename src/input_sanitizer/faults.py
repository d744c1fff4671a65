"""
input-sanitizer — fault policy, fault records, and the fault sink

File: src/input_sanitizer/faults.py
Last updated: 2026-10-19

Purpose
- Single point where a failed sanitizer step is either raised or recorded.

What should be included in this file
- Fault policy and category enumerations with per-category snippet caps.
- Immutable fault records keyed by prefixed ULID.
- Typed public fault and the internal violation raised at check points.

Functional requirements
- Throw policy raises a typed fault chained to the original cause.
- Collect policy appends exactly one record and returns normally.
- Never both raise and record for the same failure.

Non-functional requirements
- Snippets stay short and log-safe; raw values are never logged.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType
from typing import Any, Final

import structlog

from input_sanitizer.constants import (
    FILENAME_VALIDATE_SNIPPET_CAP,
    LENGTH_BOUND_SNIPPET_CAP,
    LIST_COMPARE_SNIPPET_CAP,
    NORMALIZE_SNIPPET_CAP,
    RANGE_CLAMP_SNIPPET_CAP,
)
from input_sanitizer.ids import generate_fault_id

# Printable ASCII minus characters that confuse log parsers or URL-ish sinks.
_SNIPPET_EXCLUDED: Final[frozenset[str]] = frozenset({"%", "/", "@", "\\"})


class FaultPolicy(StrEnum):
    """Whether a failed validation step aborts the caller or is recorded."""

    THROW = "throw"
    COLLECT = "collect"


class FaultCategory(StrEnum):
    """Operation kind that produced a fault."""

    LENGTH_BOUND = "length_bound"
    NORMALIZE = "normalize"
    RANGE_CLAMP = "range_clamp"
    LIST_COMPARE = "list_compare"
    FILENAME_VALIDATE = "filename_validate"

    @property
    def snippet_cap(self) -> int:
        return _SNIPPET_CAPS[self]

    @property
    def title(self) -> str:
        return "".join(part.capitalize() for part in self.value.split("_"))


_SNIPPET_CAPS: Final[dict[FaultCategory, int]] = {
    FaultCategory.LENGTH_BOUND: LENGTH_BOUND_SNIPPET_CAP,
    FaultCategory.NORMALIZE: NORMALIZE_SNIPPET_CAP,
    FaultCategory.RANGE_CLAMP: RANGE_CLAMP_SNIPPET_CAP,
    FaultCategory.LIST_COMPARE: LIST_COMPARE_SNIPPET_CAP,
    FaultCategory.FILENAME_VALIDATE: FILENAME_VALIDATE_SNIPPET_CAP,
}


@dataclass(frozen=True, slots=True)
class FaultRecord:
    """One recorded fault. ``snippet`` never exceeds the category cap."""

    id: str
    category: FaultCategory
    snippet: str
    message: str

    def render(self) -> str:
        return f"{self.category.title}: {self.snippet} Exception: {self.message}"

    def to_dict(self) -> dict[str, str]:
        return {
            "id": self.id,
            "category": self.category.value,
            "snippet": self.snippet,
            "message": self.message,
        }


class SanitizerViolation(ValueError):
    """Raised at a check point inside an operation; always routed to the sink."""


class SanitizerFault(RuntimeError):
    """Raised under the throw policy when a sanitizer operation fails."""

    def __init__(
        self,
        *,
        fault_id: str,
        category: FaultCategory,
        snippet: str,
        cause: BaseException,
    ) -> None:
        self.fault_id = fault_id
        self.category = category
        self.snippet = snippet
        self.cause = cause
        super().__init__(f"{category.title}: {snippet} Exception: {cause}")


def make_snippet(raw_value: str | bytes | None, category: FaultCategory) -> str:
    """Truncate ``raw_value`` to the category cap and drop log-unsafe characters."""

    if raw_value is None:
        return ""
    if isinstance(raw_value, (bytes, bytearray)):
        text = bytes(raw_value).decode("ascii", errors="ignore")
    else:
        text = raw_value
    truncated = text[: category.snippet_cap]
    return "".join(
        char for char in truncated if 32 <= ord(char) <= 126 and char not in _SNIPPET_EXCLUDED
    )


class FaultSink:
    """
    Route sanitizer failures according to a fixed fault policy.

    Under ``THROW`` every report raises ``SanitizerFault``; under ``COLLECT``
    every report appends one ``FaultRecord``. The log is owned by this sink
    and is never shared between sanitizer instances.
    """

    def __init__(
        self,
        policy: FaultPolicy = FaultPolicy.THROW,
        *,
        logger: Any | None = None,
        log_events: bool = True,
    ) -> None:
        self._policy = FaultPolicy(policy)
        self._records: dict[str, FaultRecord] = {}
        self._logger = logger if logger is not None else structlog.get_logger(__name__)
        self._log_events = log_events

    @property
    def policy(self) -> FaultPolicy:
        return self._policy

    @property
    def faults(self) -> Mapping[str, FaultRecord]:
        return MappingProxyType(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def records_for(self, category: FaultCategory) -> tuple[FaultRecord, ...]:
        return tuple(record for record in self._records.values() if record.category is category)

    def clear(self) -> None:
        """Drop every record; the log may hold fragments of sensitive input."""
        self._records.clear()

    def report(
        self,
        category: FaultCategory,
        raw_value: str | bytes | None,
        cause: BaseException,
    ) -> None:
        fault_id = generate_fault_id()
        snippet = make_snippet(raw_value, category)
        self._log_fault(fault_id, category, snippet)

        if self._policy is FaultPolicy.THROW:
            raise SanitizerFault(
                fault_id=fault_id,
                category=category,
                snippet=snippet,
                cause=cause,
            ) from cause

        self._records[fault_id] = FaultRecord(
            id=fault_id,
            category=category,
            snippet=snippet,
            message=str(cause),
        )

    def _log_fault(self, fault_id: str, category: FaultCategory, snippet: str) -> None:
        if not self._log_events:
            return
        self._logger.warning(
            "sanitizer_fault",
            fault_id=fault_id,
            category=category.value,
            policy=self._policy.value,
            snippet=snippet,
        )


__all__ = [
    "FaultCategory",
    "FaultPolicy",
    "FaultRecord",
    "FaultSink",
    "SanitizerFault",
    "SanitizerViolation",
    "make_snippet",
]
