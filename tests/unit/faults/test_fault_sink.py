"""
input-sanitizer — unit tests for the fault sink

File: tests/unit/faults/test_fault_sink.py
Last updated: 2026-10-19

Purpose
- Validate throw/collect routing, snippet truncation, and fault event logging.

What this test file should cover
- Throw raises a typed fault chained to the cause and records nothing.
- Collect records exactly one fault per report and returns normally.
- Snippets honor per-category caps and drop log-unsafe characters.
- Logged fault events carry the snippet, never the raw value.

Functional requirements
- Offline only.
"""

from __future__ import annotations

import pytest

from input_sanitizer.faults import (
    FaultCategory,
    FaultPolicy,
    FaultSink,
    SanitizerFault,
    SanitizerViolation,
    make_snippet,
)
from input_sanitizer.ids import FAULT_ID_PREFIX, generate_fault_id, validate_fault_id


class _RecordingLogger:
    def __init__(self) -> None:
        self.calls: list[tuple[str, dict[str, object]]] = []

    def warning(self, event: str, **fields: object) -> None:
        self.calls.append((event, fields))


def _zero_bytes(size: int) -> bytes:
    return b"\x00" * size


def test_throw_policy_raises_typed_fault_chained_to_cause() -> None:
    sink = FaultSink(FaultPolicy.THROW, logger=_RecordingLogger())
    cause = SanitizerViolation("Parse failure.")

    with pytest.raises(SanitizerFault) as excinfo:
        sink.report(FaultCategory.RANGE_CLAMP, "12x4", cause)

    fault = excinfo.value
    assert fault.__cause__ is cause
    assert fault.cause is cause
    assert fault.category is FaultCategory.RANGE_CLAMP
    assert fault.snippet == "12x4"
    assert str(fault) == "RangeClamp: 12x4 Exception: Parse failure."
    validate_fault_id(fault.fault_id)
    assert len(sink) == 0


def test_collect_policy_appends_exactly_one_record_per_report() -> None:
    sink = FaultSink(FaultPolicy.COLLECT, logger=_RecordingLogger())

    sink.report(FaultCategory.LIST_COMPARE, "first", SanitizerViolation("one"))
    sink.report(FaultCategory.FILENAME_VALIDATE, "second", SanitizerViolation("two"))

    assert len(sink) == 2
    records = list(sink.faults.values())
    assert [record.message for record in records] == ["one", "two"]
    for fault_id, record in sink.faults.items():
        assert fault_id == record.id
        assert fault_id.startswith(f"{FAULT_ID_PREFIX}-")
    assert sink.records_for(FaultCategory.LIST_COMPARE)[0].snippet == "first"
    assert records[1].render() == "FilenameValidate: second Exception: two"


def test_fault_log_is_read_only_view_and_clear_empties_it() -> None:
    sink = FaultSink(FaultPolicy.COLLECT, logger=_RecordingLogger())
    sink.report(FaultCategory.NORMALIZE, "abc", SanitizerViolation("bad"))

    view = sink.faults
    with pytest.raises(TypeError):
        view["x"] = None  # type: ignore[index]

    sink.clear()
    assert len(sink) == 0
    assert len(view) == 0


@pytest.mark.parametrize(
    ("category", "cap"),
    [
        (FaultCategory.LENGTH_BOUND, 5),
        (FaultCategory.NORMALIZE, 5),
        (FaultCategory.LIST_COMPARE, 10),
        (FaultCategory.FILENAME_VALIDATE, 15),
        (FaultCategory.RANGE_CLAMP, 33),
    ],
)
def test_snippet_never_exceeds_category_cap(category: FaultCategory, cap: int) -> None:
    raw = "x" * 200
    snippet = make_snippet(raw, category)
    assert snippet == "x" * cap
    assert category.snippet_cap == cap


def test_snippet_drops_unsafe_characters_after_truncation() -> None:
    assert make_snippet("ab%/@\\cdefghij", FaultCategory.LIST_COMPARE) == "abcdef"
    assert make_snippet("a\x00b\nc", FaultCategory.RANGE_CLAMP) == "abc"
    assert make_snippet(b"12\xff34", FaultCategory.RANGE_CLAMP) == "1234"
    assert make_snippet(None, FaultCategory.NORMALIZE) == ""


def test_fault_event_logs_snippet_but_not_raw_value() -> None:
    logger = _RecordingLogger()
    sink = FaultSink(FaultPolicy.COLLECT, logger=logger)

    sink.report(FaultCategory.LENGTH_BOUND, "hunter2-password", SanitizerViolation("bad"))

    assert len(logger.calls) == 1
    event, fields = logger.calls[0]
    assert event == "sanitizer_fault"
    assert fields["snippet"] == "hunte"
    assert fields["category"] == "length_bound"
    assert fields["policy"] == "collect"
    assert "hunter2-password" not in repr(fields)


def test_fault_events_can_be_silenced() -> None:
    logger = _RecordingLogger()
    sink = FaultSink(FaultPolicy.COLLECT, logger=logger, log_events=False)

    sink.report(FaultCategory.NORMALIZE, "abc", SanitizerViolation("bad"))

    assert logger.calls == []
    assert len(sink) == 1


def test_fault_ids_are_prefixed_ulids() -> None:
    fault_id = generate_fault_id(timestamp_ms=0, randbytes=_zero_bytes)
    assert fault_id == f"{FAULT_ID_PREFIX}-" + "0" * 26
    validate_fault_id(fault_id)

    with pytest.raises(ValueError, match="expected prefix"):
        validate_fault_id("run-" + "0" * 26)
    with pytest.raises(ValueError, match="invalid ULID part"):
        validate_fault_id(f"{FAULT_ID_PREFIX}-" + "0" * 25)


def test_category_titles_are_pascal_case() -> None:
    assert FaultCategory.RANGE_CLAMP.title == "RangeClamp"
    assert FaultCategory.FILENAME_VALIDATE.title == "FilenameValidate"
    assert FaultCategory.LENGTH_BOUND.title == "LengthBound"
