"""Testes do relogio no fuso da agenda."""

from __future__ import annotations

from datetime import UTC, date, datetime
from zoneinfo import ZoneInfo

import pytest

from app.services.clock import format_date, local_now, parse_datetime, to_local

SAO_PAULO = ZoneInfo("America/Sao_Paulo")


def test_naive_gets_agenda_zone() -> None:
    assert to_local(datetime(2026, 3, 10, 9, 0)).tzinfo == SAO_PAULO


def test_aware_is_converted() -> None:
    converted = to_local(datetime(2026, 3, 10, 12, 0, tzinfo=UTC))
    assert converted.hour == 9
    assert converted.tzinfo == SAO_PAULO


def test_local_now_is_aware() -> None:
    assert local_now().tzinfo is not None


def test_local_now_respects_injected_value() -> None:
    fixed = datetime(2026, 3, 10, 12, 0, tzinfo=SAO_PAULO)
    assert local_now(fixed) == fixed


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("2026-03-10", datetime(2026, 3, 10, tzinfo=SAO_PAULO)),
        ("2026-03-10T12:00:00Z", datetime(2026, 3, 10, 9, 0, tzinfo=SAO_PAULO)),
        (date(2026, 3, 10), datetime(2026, 3, 10, tzinfo=SAO_PAULO)),
    ],
)
def test_parse_datetime(value: object, expected: datetime) -> None:
    assert parse_datetime(value) == expected


@pytest.mark.parametrize("value", [None, "", "   ", "10/03/2026", 123])
def test_parse_datetime_invalid(value: object) -> None:
    assert parse_datetime(value) is None


def test_format_date_pt_br() -> None:
    assert format_date(datetime(2026, 3, 5)) == "05/03/2026"


@pytest.mark.parametrize(
    "value",
    [
        "0001-01-01T00:00:00Z",
        "9999-12-31T23:00:00-12:00",
        datetime(1, 1, 1, tzinfo=UTC),
    ],
)
def test_parse_datetime_outside_local_calendar(value: object) -> None:
    assert parse_datetime(value) is None
