"""Serviços de aplicação.

Rotinas puras sobre dados já buscados e o relógio (sem IO direto):
canonicalização de horários, derivação de status e recorrência de cobrança.
"""

from app.services.billing_recurrence import (
    BillingEstimate,
    Cadence,
    estimate_next_billing,
    next_occurrence,
    next_occurrence_date,
)
from app.services.status_derivation import (
    TaskSummary,
    derive_appointment_status,
    derive_task_status,
    resolve_task_schedule,
    summarize_tasks,
)
from app.services.time_canonicalizer import (
    TimeOfDay,
    canonicalize_time,
    ensure_time,
    is_valid_time_of_day,
)

__all__ = [
    "BillingEstimate",
    "Cadence",
    "TaskSummary",
    "TimeOfDay",
    "canonicalize_time",
    "derive_appointment_status",
    "derive_task_status",
    "ensure_time",
    "estimate_next_billing",
    "is_valid_time_of_day",
    "next_occurrence",
    "next_occurrence_date",
    "resolve_task_schedule",
    "summarize_tasks",
]
