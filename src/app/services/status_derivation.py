"""Derivacao de status de agendamentos e tarefas.

Agendamentos: o backend persiste codigo numerico (0-3), codigo em texto
ou o proprio rotulo; qualquer outra coisa vira `agendado`.

Tarefas: apenas a flag de ativa/concluida e persistida. `atrasada` e
recalculada contra o relogio a cada chamada, nunca cacheada nem gravada.
"""

from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import TYPE_CHECKING

from app.services.clock import local_now, parse_datetime, to_local
from app.services.time_canonicalizer import TimeOfDay
from fsm.states import (
    APPOINTMENT_STATUS_BY_CODE,
    DEFAULT_APPOINTMENT_STATUS,
    DEFAULT_TASK_STATUS,
    AppointmentStatus,
    TaskStatus,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

_DATE_SEPARATOR = re.compile(r"[T\s]")


def derive_appointment_status(value: object) -> AppointmentStatus:
    """Decodifica o status persistido de um agendamento.

    Ordem: codigo numerico 0-3 (int, float inteiro ou texto numerico),
    rotulo canonico, e por fim `agendado`.
    """
    code = _status_code(value)
    if code is not None and code in APPOINTMENT_STATUS_BY_CODE:
        return APPOINTMENT_STATUS_BY_CODE[code]

    if isinstance(value, str):
        try:
            return AppointmentStatus(value)
        except ValueError:
            pass

    return DEFAULT_APPOINTMENT_STATUS


def derive_task_status(
    active: object,
    scheduled_at: datetime | None,
    *,
    now: datetime | None = None,
) -> TaskStatus:
    """Status da tarefa no instante `now` (relogio atual quando omitido).

    A flag tem prioridade: tarefa inativa e sempre `resolvida`, mesmo
    com horario futuro. Sem horario, a tarefa nunca fica atrasada.
    """
    if not active:
        return TaskStatus.RESOLVIDA
    scheduled = parse_datetime(scheduled_at)
    if scheduled is not None and scheduled < local_now(now):
        return TaskStatus.ATRASADA
    return DEFAULT_TASK_STATUS


def resolve_task_schedule(
    date_value: object,
    time_value: object = None,
    *,
    all_day: bool = False,
) -> datetime | None:
    """Monta o instante agendado de uma tarefa a partir de data e hora.

    A data vale ate o primeiro `T`/espaco ("2026-03-10T00:00:00.000Z" ->
    2026-03-10). Sem hora, ou em tarefa de dia inteiro, usa meia-noite.
    Hora fora da faixa tambem cai em meia-noite.
    """
    day = _parse_day(date_value)
    if day is None:
        return None

    moment = time.min
    if not all_day:
        parsed = TimeOfDay.parse(time_value)
        if parsed is not None:
            moment = time(hour=parsed.hour, minute=parsed.minute)

    return to_local(datetime.combine(day, moment))


@dataclass(frozen=True, slots=True)
class TaskSummary:
    """Contadores exibidos no topo da tela de tarefas."""

    pendentes: int = 0
    atrasadas: int = 0
    resolvidas: int = 0

    @property
    def total(self) -> int:
        return self.pendentes + self.atrasadas + self.resolvidas


def summarize_tasks(statuses: Iterable[TaskStatus]) -> TaskSummary:
    """Conta tarefas por status."""
    counts = Counter(statuses)
    return TaskSummary(
        pendentes=counts[TaskStatus.PENDENTE],
        atrasadas=counts[TaskStatus.ATRASADA],
        resolvidas=counts[TaskStatus.RESOLVIDA],
    )


def _status_code(value: object) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
        return int(number) if number.is_integer() else None
    return None


def _parse_day(value: object) -> date | None:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    head = _DATE_SEPARATOR.split(value.strip(), maxsplit=1)[0]
    try:
        return date.fromisoformat(head)
    except ValueError:
        return None
