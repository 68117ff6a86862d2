"""Tests for splitting strings into text and number segments."""

from __future__ import annotations

import pytest

from natorder.core import (
    NaturalOrderTypeError,
    Segment,
    SegmentKind,
    iter_segments,
    join_segments,
    split_segments,
)

TEXT = SegmentKind.TEXT
NUMBER = SegmentKind.NUMBER


def test_empty_string_has_no_segments() -> None:
    assert split_segments("") == ()


def test_digits_only_is_one_number() -> None:
    assert split_segments("12345") == (Segment(NUMBER, "12345"),)


def test_letters_only_is_one_text() -> None:
    assert split_segments("abc def") == (Segment(TEXT, "abc def"),)


def test_alternating_runs() -> None:
    segments = split_segments("x12z034")
    assert [(s.kind, s.text) for s in segments] == [
        (TEXT, "x"),
        (NUMBER, "12"),
        (TEXT, "z"),
        (NUMBER, "034"),
    ]


def test_leading_number_run() -> None:
    segments = split_segments("12a")
    assert [s.kind for s in segments] == [NUMBER, TEXT]


def test_runs_are_maximal() -> None:
    segments = split_segments("ab-_12 34")
    assert [s.text for s in segments] == ["ab-_", "12", " ", "34"]


@pytest.mark.parametrize(
    "text",
    ["", "a", "1", "a1b2c3", "007bond", "v1.2.10-rc3", "  12  ", "ünï1cödé22", "１２3"],
)
def test_segments_rebuild_the_input(text: str) -> None:
    segments = split_segments(text)
    assert join_segments(segments) == text
    assert "".join(str(s) for s in segments) == text
    assert all(s.text for s in segments)


def test_kinds_alternate() -> None:
    kinds = [s.kind for s in split_segments("a1b22c333d")]
    assert all(first is not second for first, second in zip(kinds, kinds[1:]))


def test_non_ascii_digits_are_text() -> None:
    # Full-width, superscript and Arabic-Indic digits.
    assert split_segments("１２") == (Segment(TEXT, "１２"),)
    assert split_segments("x²") == (Segment(TEXT, "x²"),)
    assert split_segments("a٣4") == (Segment(TEXT, "a٣"), Segment(NUMBER, "4"))


def test_number_value_ignores_leading_zeros() -> None:
    assert Segment(NUMBER, "007").value == "7"
    assert Segment(NUMBER, "000").value == "0"
    assert Segment(NUMBER, "120").value == "120"
    assert Segment(TEXT, "abc").value is None


def test_very_long_digit_run_is_kept_whole() -> None:
    digits = "9" * 10_000
    (segment,) = split_segments(digits)
    assert segment.is_number
    assert segment.value == digits


def test_iter_segments_is_lazy() -> None:
    iterator = iter_segments("a1b2")
    assert next(iterator) == Segment(TEXT, "a")
    assert next(iterator) == Segment(NUMBER, "1")


@pytest.mark.parametrize("value", [None, 12, b"a1", ["a"]])
def test_non_string_input_is_rejected(value: object) -> None:
    with pytest.raises(NaturalOrderTypeError):
        iter_segments(value)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        split_segments(value)  # type: ignore[arg-type]
