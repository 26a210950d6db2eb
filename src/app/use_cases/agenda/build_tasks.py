"""Monta a lista de tarefas a partir da resposta de /api/tarefas.

O status e derivado aqui, no momento da leitura: a mesma resposta
processada mais tarde pode trazer tarefas que passaram a `atrasada`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Any

from api.normalizers.payload import normalize_records
from app.domain.agenda import TaskView
from app.services.status_derivation import (
    TaskSummary,
    derive_task_status,
    resolve_task_schedule,
    summarize_tasks,
)
from app.services.time_canonicalizer import canonicalize_time
from app.use_cases.agenda._row_helpers import flag_field, id_field, text_field

logger = logging.getLogger(__name__)


def map_task(row: Mapping[str, Any], *, now: datetime | None = None) -> TaskView:
    """Converte um registro de tarefa em TaskView com status atual."""
    all_day = bool(flag_field(row, "dia_inteiro"))
    raw_time = row.get("hora")
    scheduled_at = resolve_task_schedule(row.get("data"), raw_time, all_day=all_day)
    return TaskView(
        id=id_field(row),
        title=text_field(row, "titulo") or "(sem título)",
        description=text_field(row, "descricao") or "",
        scheduled_at=scheduled_at,
        time=canonicalize_time(raw_time),
        all_day=all_day,
        status=derive_task_status(_is_active(row), scheduled_at, now=now),
    )


def build_tasks(payload: Any, *, now: datetime | None = None) -> list[TaskView]:
    """Normaliza o payload e deriva o status de cada tarefa."""
    tasks = [map_task(row, now=now) for row in normalize_records(payload)]
    logger.debug(
        "tasks_built",
        extra={"component": "tarefas", "action": "build_tasks", "count": len(tasks)},
    )
    return tasks


def build_task_summary(tasks: Iterable[TaskView]) -> TaskSummary:
    """Contadores pendentes/atrasadas/resolvidas da lista exibida."""
    return summarize_tasks(task.status for task in tasks)


def _is_active(row: Mapping[str, Any]) -> bool:
    # `concluido` (tela de tarefas) tem prioridade sobre `ativo` (fluxos)
    concluded = flag_field(row, "concluido")
    if concluded is not None:
        return not concluded
    active = flag_field(row, "ativo")
    return True if active is None else active
