"""
Módulo FSM — status de agendamentos e tarefas.

Estrutura:
    - states/: Taxonomias (AppointmentStatus, TaskStatus)
    - transitions/: Transições observáveis do status de tarefas

A derivação dos status a partir dos dados persistidos fica em
app.services.status_derivation.
"""

from fsm.states import (
    APPOINTMENT_STATUS_LABELS,
    TASK_STATUS_LABELS,
    AppointmentStatus,
    TaskStatus,
    is_terminal_appointment,
    is_terminal_task,
)
from fsm.transitions import (
    VALID_TASK_TRANSITIONS,
    is_task_transition_valid,
    validate_task_transition_map,
)

__all__ = [
    "APPOINTMENT_STATUS_LABELS",
    "TASK_STATUS_LABELS",
    "VALID_TASK_TRANSITIONS",
    "AppointmentStatus",
    "TaskStatus",
    "is_task_transition_valid",
    "is_terminal_appointment",
    "is_terminal_task",
    "validate_task_transition_map",
]
