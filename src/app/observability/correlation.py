"""correlation_id por contexto de execução.

A camada que chama o núcleo (ex: handler de requisição da página)
define o id; o filtro de logging o lê em cada registro.

    token = set_correlation_id(request_id)
    try:
        build_tasks(payload)
    finally:
        reset_correlation_id(token)
"""

from __future__ import annotations

import uuid
from contextvars import ContextVar, Token

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id corrente ou string vazia."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id; sem valor, gera um UUID v4."""
    return _correlation_id.set(correlation_id or str(uuid.uuid4()))


def reset_correlation_id(token: Token[str]) -> None:
    """Restaura o valor anterior a `set_correlation_id`."""
    _correlation_id.reset(token)
