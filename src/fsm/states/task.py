"""
Status de tarefas do escritório.

Apenas a conclusão é persistida (flag `concluido`/`ativo`).
"Atrasada" é uma visão sobre o relógio: a mesma tarefa passa de
PENDENTE para ATRASADA sem nenhuma escrita. Nunca persistir o status
derivado.

Transições:
    PENDENTE -> ATRASADA   (horário agendado ficou no passado)
    PENDENTE -> RESOLVIDA  (flag de ativa desligada)
    ATRASADA -> RESOLVIDA  (flag de ativa desligada)
"""

from enum import StrEnum


class TaskStatus(StrEnum):
    """Status de uma tarefa observado em um instante."""

    PENDENTE = "pendente"
    ATRASADA = "atrasada"
    RESOLVIDA = "resolvida"

    def __str__(self) -> str:
        return self.value


TASK_STATUS_LABELS: dict[TaskStatus, str] = {
    TaskStatus.PENDENTE: "Pendente",
    TaskStatus.ATRASADA: "Atrasada",
    TaskStatus.RESOLVIDA: "Resolvida",
}

# Resolvida independe do relógio
TERMINAL_TASK_STATUSES: frozenset[TaskStatus] = frozenset({TaskStatus.RESOLVIDA})

DEFAULT_TASK_STATUS: TaskStatus = TaskStatus.PENDENTE


def is_terminal_task(status: TaskStatus) -> bool:
    """True quando a tarefa está resolvida."""
    return status in TERMINAL_TASK_STATUSES
