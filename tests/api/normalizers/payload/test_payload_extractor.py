"""Testes do normalizer de envelopes de resposta do backend."""

from __future__ import annotations

import logging

import pytest

from api.normalizers.payload import normalize, normalize_records


@pytest.mark.parametrize(
    "payload",
    [None, {}, 42, "texto", 3.5, True, {"data": {"rows": "nao-lista"}}, {"data": None}],
)
def test_normalize_always_returns_list(payload: object) -> None:
    assert normalize(payload) == []


def test_normalize_bare_list_is_returned_as_is() -> None:
    payload = [1, 2, 3]
    result = normalize(payload)
    assert result == [1, 2, 3]
    assert result is payload


def test_normalize_data_list() -> None:
    assert normalize({"data": [1]}) == [1]


def test_normalize_rows_list() -> None:
    assert normalize({"rows": [1, 2]}) == [1, 2]


def test_normalize_nested_data_rows() -> None:
    assert normalize({"data": {"rows": [9]}}) == [9]


def test_normalize_unknown_shape_is_empty() -> None:
    assert normalize({"foo": 1}) == []


def test_normalize_data_wins_over_rows() -> None:
    assert normalize({"data": ["d"], "rows": ["r"]}) == ["d"]


def test_normalize_rows_wins_over_nested_rows() -> None:
    assert normalize({"data": {"rows": ["n"]}, "rows": ["r"]}) == ["r"]


def test_normalize_named_field_only_when_requested() -> None:
    payload = {"agendas": [{"id": 1}]}
    assert normalize(payload) == []
    assert normalize(payload, fields=("agendas",)) == [{"id": 1}]


def test_normalize_named_field_after_standard_envelopes() -> None:
    payload = {"agendas": ["a"], "rows": ["r"]}
    assert normalize(payload, fields=("agendas",)) == ["r"]


def test_normalize_tuple_becomes_list() -> None:
    assert normalize((1, 2)) == [1, 2]


def test_normalize_preserves_order() -> None:
    rows = [{"id": 3}, {"id": 1}, {"id": 2}]
    assert [row["id"] for row in normalize({"data": rows})] == [3, 1, 2]


def test_normalize_logs_only_payload_type(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="api.normalizers.payload.extractor"):
        normalize({"segredo": "cpf 123"})
    record = next(r for r in caplog.records if r.getMessage() == "payload_envelope_unrecognized")
    assert record.payload_type == "dict"
    assert "cpf" not in caplog.text


def test_normalize_records_drops_non_objects() -> None:
    payload = {"rows": [{"id": 1}, "lixo", None, {"id": 2}]}
    assert normalize_records(payload) == [{"id": 1}, {"id": 2}]


def test_normalize_records_returns_copies() -> None:
    original = {"id": 1}
    records = normalize_records([original])
    records[0]["id"] = 99
    assert original["id"] == 1
