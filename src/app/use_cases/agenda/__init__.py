"""Use cases de leitura das telas de agenda e tarefas."""

from .build_appointments import build_appointments, map_appointment, sort_appointments
from .build_tasks import build_task_summary, build_tasks, map_task

__all__ = [
    "build_appointments",
    "build_task_summary",
    "build_tasks",
    "map_appointment",
    "map_task",
    "sort_appointments",
]
