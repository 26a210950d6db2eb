"""
Exports públicos do módulo fsm/states.

Taxonomias de status de agendamentos e tarefas.
"""

from fsm.states.appointment import (
    APPOINTMENT_STATUS_BY_CODE,
    APPOINTMENT_STATUS_LABELS,
    DEFAULT_APPOINTMENT_STATUS,
    TERMINAL_APPOINTMENT_STATUSES,
    AppointmentStatus,
    is_terminal_appointment,
)
from fsm.states.task import (
    DEFAULT_TASK_STATUS,
    TASK_STATUS_LABELS,
    TERMINAL_TASK_STATUSES,
    TaskStatus,
    is_terminal_task,
)

__all__ = [
    "APPOINTMENT_STATUS_BY_CODE",
    "APPOINTMENT_STATUS_LABELS",
    "DEFAULT_APPOINTMENT_STATUS",
    "DEFAULT_TASK_STATUS",
    "TASK_STATUS_LABELS",
    "TERMINAL_APPOINTMENT_STATUSES",
    "TERMINAL_TASK_STATUSES",
    "AppointmentStatus",
    "TaskStatus",
    "is_terminal_appointment",
    "is_terminal_task",
]
