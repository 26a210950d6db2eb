"""Monta a agenda a partir da resposta de /api/agendas."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from api.normalizers.payload import normalize_records
from app.domain.agenda import AppointmentView
from app.services.status_derivation import derive_appointment_status
from app.services.time_canonicalizer import canonicalize_time, ensure_time
from app.use_cases.agenda._row_helpers import day_field, id_field, text_field
from config.settings import get_agenda_settings

logger = logging.getLogger(__name__)

# Campo nomeado usado pelo endpoint de agendas em algumas versoes do backend
_AGENDA_FIELDS = ("agendas",)


def map_appointment(row: Mapping[str, Any], *, now: datetime | None = None) -> AppointmentView:
    """Converte um registro de agenda em AppointmentView.

    Sem `hora_inicio`, o inicio exibido e o horario padrao da agenda
    (AGENDA_DEFAULT_START_TIME).
    """
    return AppointmentView(
        id=id_field(row),
        title=text_field(row, "titulo") or "(sem título)",
        description=text_field(row, "descricao"),
        status=derive_appointment_status(row.get("status")),
        date=day_field(row, "data", now=now),
        start_time=ensure_time(row.get("hora_inicio")) or get_agenda_settings().default_start_time,
        end_time=canonicalize_time(row.get("hora_fim")),
        client_name=text_field(row, "cliente"),
        location=text_field(row, "local"),
    )


def sort_appointments(items: list[AppointmentView]) -> list[AppointmentView]:
    """Ordena por dia e, no mesmo dia, por horario de inicio."""
    return sorted(items, key=lambda item: (item.date, item.start_time))


def build_appointments(payload: Any, *, now: datetime | None = None) -> list[AppointmentView]:
    """Normaliza o payload e devolve a agenda ordenada."""
    rows = normalize_records(payload, fields=_AGENDA_FIELDS)
    appointments = [map_appointment(row, now=now) for row in rows]
    logger.debug(
        "appointments_built",
        extra={"component": "agenda", "action": "build_appointments", "count": len(appointments)},
    )
    return sort_appointments(appointments)
