"""
input-sanitizer — shared sanitizer context

File: src/input_sanitizer/context.py
Last updated: 2026-10-19

Purpose
- Hold the fault policy, fault log, and pattern-compilation flag shared by every
  component of one sanitizer instance.

Functional requirements
- Components hold a back-reference to the context, never a copy.
- Independent sanitizer instances own independent contexts.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar

from input_sanitizer.faults import FaultCategory, FaultPolicy, FaultRecord, FaultSink


class SanitizerContext:
    """Per-instance state shared read-mostly by sanitizer components."""

    __slots__ = ("_compile_patterns_eagerly", "_sink")

    def __init__(
        self,
        policy: FaultPolicy = FaultPolicy.THROW,
        *,
        compile_patterns_eagerly: bool = True,
        logger: Any | None = None,
        log_fault_events: bool = True,
    ) -> None:
        self._sink = FaultSink(policy, logger=logger, log_events=log_fault_events)
        self._compile_patterns_eagerly = bool(compile_patterns_eagerly)

    @property
    def policy(self) -> FaultPolicy:
        return self._sink.policy

    @property
    def sink(self) -> FaultSink:
        return self._sink

    @property
    def compile_patterns_eagerly(self) -> bool:
        return self._compile_patterns_eagerly

    @property
    def faults(self) -> Mapping[str, FaultRecord]:
        return self._sink.faults

    def report(
        self,
        category: FaultCategory,
        raw_value: str | bytes | None,
        cause: BaseException,
    ) -> None:
        self._sink.report(category, raw_value, cause)


class SanitizerComponent:
    """Base for components that report faults under one category."""

    category: ClassVar[FaultCategory]

    def __init__(self, context: SanitizerContext) -> None:
        self._context = context

    @property
    def context(self) -> SanitizerContext:
        return self._context

    def _fault(self, raw_value: str | bytes | None, cause: BaseException) -> None:
        self._context.report(self.category, raw_value, cause)


__all__ = ["SanitizerComponent", "SanitizerContext"]
