"""Testes da canonicalizacao de horarios HH:MM."""

from __future__ import annotations

import pytest

from app.services.time_canonicalizer import (
    TimeOfDay,
    canonicalize_time,
    ensure_time,
    is_valid_time_of_day,
)


def test_colon_pads_hour_and_minute() -> None:
    assert canonicalize_time("9:5") == "09:05"


def test_colon_already_canonical() -> None:
    assert canonicalize_time("09:30") == "09:30"


def test_colon_with_seconds_keeps_hour_and_minute() -> None:
    assert canonicalize_time("14:30:00") == "14:30"


def test_colon_oversized_fragments_are_sliced() -> None:
    # hora: dois ultimos caracteres; minuto: dois primeiros
    assert canonicalize_time("123:456") == "23:45"


def test_colon_empty_minutes() -> None:
    assert canonicalize_time("9:") == "09:00"


def test_surrounding_whitespace_is_ignored() -> None:
    assert canonicalize_time("  7:15  ") == "07:15"


def test_one_digit_is_hour() -> None:
    assert canonicalize_time("9") == "09:00"


def test_two_digits_are_hour() -> None:
    assert canonicalize_time("14") == "14:00"


def test_three_digits_split_one_and_two() -> None:
    assert canonicalize_time("930") == "09:30"


def test_four_digits_split_two_and_two() -> None:
    assert canonicalize_time("1430") == "14:30"


def test_extra_digits_are_discarded() -> None:
    assert canonicalize_time("143059") == "14:30"


def test_non_digits_are_stripped_without_colon() -> None:
    assert canonicalize_time("14h30") == "14:30"
    assert canonicalize_time("8h") == "08:00"


def test_out_of_range_is_not_corrected() -> None:
    assert canonicalize_time("99:99") == "99:99"
    assert canonicalize_time("2575") == "25:75"


@pytest.mark.parametrize("value", ["", "   ", None, 930, 9.5, ["09:30"], "abc", "h"])
def test_unusable_input_returns_none(value: object) -> None:
    assert canonicalize_time(value) is None


@pytest.mark.parametrize("value", ["09:30", "9:5", "930", "14", "1430", "99:99", "00:00"])
def test_canonicalization_is_idempotent(value: str) -> None:
    once = canonicalize_time(value)
    assert canonicalize_time(once) == once


def test_ensure_time_returns_canonical_when_possible() -> None:
    assert ensure_time("930") == "09:30"


def test_ensure_time_falls_back_to_trimmed_text() -> None:
    assert ensure_time("  a definir  ") == "a definir"


@pytest.mark.parametrize("value", [None, "", "   ", 42, object()])
def test_ensure_time_never_returns_none(value: object) -> None:
    result = ensure_time(value)
    assert isinstance(result, str)
    assert result == ""


def test_is_valid_time_of_day() -> None:
    assert is_valid_time_of_day("23:59") is True
    assert is_valid_time_of_day("930") is True
    assert is_valid_time_of_day("24:00") is False
    assert is_valid_time_of_day("12:60") is False
    assert is_valid_time_of_day("ab:cd") is False
    assert is_valid_time_of_day(None) is False


def test_time_of_day_parse_and_str() -> None:
    parsed = TimeOfDay.parse("7:5")
    assert parsed == TimeOfDay(hour=7, minute=5)
    assert str(parsed) == "07:05"


def test_time_of_day_rejects_out_of_range() -> None:
    with pytest.raises(ValueError, match="fora da faixa"):
        TimeOfDay(hour=24, minute=0)


def test_only_ascii_digits_are_regrouped() -> None:
    assert canonicalize_time("١٢٣٠") is None
    assert ensure_time("١٢٣٠") == "١٢٣٠"


def test_time_of_day_rejects_non_ascii_digits() -> None:
    assert TimeOfDay.parse("١٢:٣٠") is None
    assert is_valid_time_of_day("١٢:٣٠") is False
