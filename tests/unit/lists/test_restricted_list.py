"""
input-sanitizer — unit tests for restricted-list review

File: tests/unit/lists/test_restricted_list.py
Last updated: 2026-10-19

Purpose
- Validate case-insensitive stripping of restricted values and the built-in
  malicious-character and hex-escape token lists.

What this test file should cover
- Clean subjects pass unchanged.
- Hits report one fault and return the cleansed value.
- The fault message names which lists were hit.
"""

from __future__ import annotations

import pytest

from input_sanitizer import CheckOutcome, FaultPolicy, Sanitizer, SanitizerFault
from input_sanitizer.lists import (
    COMBINED_HIT_MESSAGE,
    COMMON_HIT_MESSAGE,
    COMMON_MALICIOUS_TOKENS,
    EMPTY_RESTRICTED_LIST_MESSAGE,
    HEX_ESCAPE_TOKENS,
    RESTRICTED_HIT_MESSAGE,
    strip_tokens_ignore_case,
)

HEX_PAYLOAD = r"\x6a\x61\x76\x61\x73\x63\x72\x69\x70\x74\x3a\x61\x6c\x65\x72\x74\x281337\x29"
SCRIPT_VALUES = ["javascript: alert(1337)", "javascript", "alert"]


@pytest.fixture
def sanitizer() -> Sanitizer:
    return Sanitizer(FaultPolicy.COLLECT, log_fault_events=False)


def _messages(sanitizer: Sanitizer) -> list[str]:
    return [record.message for record in sanitizer.faults.values()]


def test_clean_subject_is_accepted_unchanged(sanitizer: Sanitizer) -> None:
    result = sanitizer.restricted_list.review_ignore_case("hello world", ["drop"], 50)
    assert result.outcome is CheckOutcome.ACCEPTED
    assert result.value == "hello world"
    assert len(sanitizer.faults) == 0


def test_restricted_values_are_stripped_ignoring_case(sanitizer: Sanitizer) -> None:
    result = sanitizer.restricted_list.review_ignore_case(
        "<SCRIPT>alert(1)</script>", ["<script>", "</script>"], 100
    )
    assert result.rejected
    assert result.value == "alert(1)"
    assert _messages(sanitizer) == [RESTRICTED_HIT_MESSAGE]


def test_hex_payload_passes_without_builtin_checks(sanitizer: Sanitizer) -> None:
    result = sanitizer.restricted_list.review_ignore_case(HEX_PAYLOAD, SCRIPT_VALUES, 225)
    assert result.accepted
    assert result.value == HEX_PAYLOAD


def test_hex_escapes_are_stripped_when_enabled(sanitizer: Sanitizer) -> None:
    result = sanitizer.restricted_list.review_ignore_case(
        HEX_PAYLOAD,
        SCRIPT_VALUES,
        225,
        check_common_chars=True,
        check_hex_escapes=True,
    )
    assert result.rejected
    assert result.value == "6a6176617363726970743a616c65727428133729"
    assert _messages(sanitizer) == [RESTRICTED_HIT_MESSAGE]


def test_escaped_control_sequence_as_restricted_value(sanitizer: Sanitizer) -> None:
    result = sanitizer.restricted_list.review_ignore_case(
        r"\\cmy%pURL%00.biz", [r"\\c"], 225
    )
    assert result.rejected
    assert result.value == "my%pURL%00.biz"
    assert _messages(sanitizer) == [RESTRICTED_HIT_MESSAGE]


def test_common_and_restricted_hits_are_reported_together(sanitizer: Sanitizer) -> None:
    result = sanitizer.restricted_list.review_ignore_case(
        r"\\cmy%pURL%00.biz",
        [r"\c"],
        225,
        check_common_chars=True,
        check_hex_escapes=True,
    )
    assert result.rejected
    assert result.value == "myURL.biz"
    assert _messages(sanitizer) == [COMBINED_HIT_MESSAGE]


def test_common_character_hit_alone(sanitizer: Sanitizer) -> None:
    result = sanitizer.restricted_list.review_ignore_case(
        "abc\N{ZERO WIDTH SPACE}def", ["zzz"], 50, check_common_chars=True
    )
    assert result.rejected
    assert result.value == "abcdef"
    assert _messages(sanitizer) == [COMMON_HIT_MESSAGE]


@pytest.mark.parametrize(
    "marker",
    ["\u2b7e", "\u2b7f", "\N{RIGHT-TO-LEFT MARK}", "\N{REPLACEMENT CHARACTER}"],
    ids=["horizontal_tab_key", "vertical_tab_key", "rtl_mark", "replacement"],
)
def test_common_list_strips_tab_key_and_direction_markers(
    sanitizer: Sanitizer, marker: str
) -> None:
    result = sanitizer.restricted_list.review_ignore_case(
        f"ab{marker}cd", ["zzz"], 50, check_common_chars=True
    )
    assert result.rejected
    assert result.value == "abcd"
    assert _messages(sanitizer) == [COMMON_HIT_MESSAGE]


def test_subject_is_bounded_before_review(sanitizer: Sanitizer) -> None:
    result = sanitizer.restricted_list.review_ignore_case("safe text DROP TABLE", ["drop"], 9)
    assert result.accepted
    assert result.value == "safe text"


@pytest.mark.parametrize("restricted", [None, []])
def test_empty_restricted_list_is_a_fault(
    sanitizer: Sanitizer, restricted: list[str] | None
) -> None:
    result = sanitizer.restricted_list.review_ignore_case("subject", restricted, 10)
    assert result.rejected
    assert _messages(sanitizer) == [EMPTY_RESTRICTED_LIST_MESSAGE]


def test_blank_subject_is_skipped(sanitizer: Sanitizer) -> None:
    result = sanitizer.restricted_list.review_ignore_case("   ", ["x"], 10)
    assert result.skipped
    assert len(sanitizer.faults) == 0


def test_hit_raises_under_throw() -> None:
    sanitizer = Sanitizer(FaultPolicy.THROW, log_fault_events=False)
    with pytest.raises(SanitizerFault) as excinfo:
        sanitizer.restricted_list.review_ignore_case("DROP TABLE users", ["drop table"], 50)
    assert str(excinfo.value.cause) == RESTRICTED_HIT_MESSAGE
    assert len(sanitizer.faults) == 0


def test_strip_tokens_ignore_case_runs_in_order() -> None:
    assert strip_tokens_ignore_case("aXbxc", ["x"]) == "abc"
    assert strip_tokens_ignore_case("abcabc", ["", "bc", "a"]) == ""
    assert strip_tokens_ignore_case("a.b*c", [".", "*"]) == "abc"


def test_builtin_token_lists_have_no_duplicates() -> None:
    assert len(set(COMMON_MALICIOUS_TOKENS)) == len(COMMON_MALICIOUS_TOKENS)
    assert len(set(HEX_ESCAPE_TOKENS)) == len(HEX_ESCAPE_TOKENS)
    assert "%00" in COMMON_MALICIOUS_TOKENS
    assert "\N{RIGHT-TO-LEFT OVERRIDE}" in COMMON_MALICIOUS_TOKENS
    assert {"\u2b7e", "\u2b7f"} <= set(COMMON_MALICIOUS_TOKENS)
    assert "%n" in HEX_ESCAPE_TOKENS
