"""Leitura tolerante de campos de registros do backend."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime

from app.services.clock import local_now, parse_datetime


def text_field(row: Mapping[str, object], key: str) -> str | None:
    """Texto sem espacos nas pontas; None para ausente/vazio/nao-texto."""
    value = row.get(key)
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return None


def id_field(row: Mapping[str, object]) -> str | None:
    """Identificador como texto (o backend alterna entre int e str)."""
    value = row.get("id")
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, str)):
        text = str(value).strip()
        return text or None
    return None


def flag_field(row: Mapping[str, object], key: str) -> bool | None:
    """Booleano de flags persistidas como bool, 0/1 ou "true"/"1"."""
    value = row.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value == 1
    if isinstance(value, str):
        return value.strip().lower() in {"true", "1"}
    return None


def day_field(row: Mapping[str, object], key: str, *, now: datetime | None = None) -> datetime:
    """Data do registro; texto invalido ou ausente cai no instante atual."""
    parsed = parse_datetime(row.get(key))
    return parsed if parsed is not None else local_now(now)
