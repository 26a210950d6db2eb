"""Extrator da lista canônica de registros de um payload bruto.

O backend responde de formas diferentes conforme o endpoint: lista
direta, `{data}`, `{rows}` ou `{data: {rows}}` vindo da camada de
paginação. Todas as telas usam `normalize` em vez de repetir a cadeia
de verificações.

Não faz validação de negócio - apenas extração estrutural.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

logger = logging.getLogger(__name__)

_COMPONENT = "payload_normalizer"


def _as_list(value: Any) -> list[Any] | None:
    """Retorna `value` como lista quando for array JSON, senão None."""
    if isinstance(value, list):
        return value
    if isinstance(value, tuple):
        return list(value)
    return None


def normalize(payload: Any, *, fields: Iterable[str] = ()) -> list[Any]:
    """Extrai a lista de registros de `payload`.

    Ordem (primeira que casar vence):
        1. payload é lista
        2. payload["data"] é lista
        3. payload["rows"] é lista
        4. payload["data"]["rows"] é lista
        5. payload[campo] é lista, para cada campo em `fields`
        6. lista vazia

    A lista devolvida pode ser a mesma do payload; trate como somente leitura.

    Args:
        payload: Valor JSON já decodificado, de formato desconhecido.
        fields: Campos nomeados aceitos pela tela chamadora (ex: "agendas").

    Returns:
        Lista de registros, possivelmente vazia. Nunca None.
    """
    direct = _as_list(payload)
    if direct is not None:
        return direct

    if not isinstance(payload, Mapping):
        _log_unrecognized(payload)
        return []

    data = payload.get("data")
    for candidate in (data, payload.get("rows")):
        found = _as_list(candidate)
        if found is not None:
            return found

    if isinstance(data, Mapping):
        nested = _as_list(data.get("rows"))
        if nested is not None:
            return nested

    for field in fields:
        named = _as_list(payload.get(field))
        if named is not None:
            return named

    _log_unrecognized(payload)
    return []


def normalize_records(payload: Any, *, fields: Iterable[str] = ()) -> list[dict[str, Any]]:
    """Como `normalize`, mantendo apenas itens que são objetos JSON."""
    rows = normalize(payload, fields=fields)
    records = [dict(row) for row in rows if isinstance(row, Mapping)]
    skipped = len(rows) - len(records)
    if skipped:
        logger.debug(
            "payload_rows_skipped",
            extra={"component": _COMPONENT, "skipped": skipped, "total": len(rows)},
        )
    return records


def _log_unrecognized(payload: Any) -> None:
    # Apenas o tipo: o conteúdo pode ter dados de clientes.
    logger.debug(
        "payload_envelope_unrecognized",
        extra={"component": _COMPONENT, "payload_type": type(payload).__name__},
    )
