"""Testes do correlation_id por contexto."""

from __future__ import annotations

from app.observability import get_correlation_id, reset_correlation_id, set_correlation_id


def test_default_is_empty() -> None:
    assert get_correlation_id() == ""


def test_set_and_reset() -> None:
    token = set_correlation_id("req-42")
    try:
        assert get_correlation_id() == "req-42"
    finally:
        reset_correlation_id(token)
    assert get_correlation_id() == ""


def test_generates_uuid_when_missing() -> None:
    token = set_correlation_id()
    try:
        assert len(get_correlation_id()) == 36
    finally:
        reset_correlation_id(token)
