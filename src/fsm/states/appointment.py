"""
Status canônicos de agendamentos (agenda do escritório).

O backend persiste o status como código numérico ou como rótulo;
as transições (iniciar, concluir, cancelar) são sempre explícitas
via backend. O cliente apenas decodifica.
"""

from enum import StrEnum


class AppointmentStatus(StrEnum):
    """
    Status de um agendamento.

    Códigos persistidos:
        - 0: CANCELADO
        - 1: AGENDADO
        - 2: EM_CURSO
        - 3: CONCLUIDO
    """

    CANCELADO = "cancelado"
    AGENDADO = "agendado"
    EM_CURSO = "em_curso"
    CONCLUIDO = "concluido"

    def __str__(self) -> str:
        return self.value


APPOINTMENT_STATUS_BY_CODE: dict[int, AppointmentStatus] = {
    0: AppointmentStatus.CANCELADO,
    1: AppointmentStatus.AGENDADO,
    2: AppointmentStatus.EM_CURSO,
    3: AppointmentStatus.CONCLUIDO,
}

APPOINTMENT_STATUS_LABELS: dict[AppointmentStatus, str] = {
    AppointmentStatus.AGENDADO: "Agendado",
    AppointmentStatus.EM_CURSO: "Em curso",
    AppointmentStatus.CONCLUIDO: "Concluído",
    AppointmentStatus.CANCELADO: "Cancelado",
}

# Agendamento encerrado não volta para a agenda ativa
TERMINAL_APPOINTMENT_STATUSES: frozenset[AppointmentStatus] = frozenset({
    AppointmentStatus.CANCELADO,
    AppointmentStatus.CONCLUIDO,
})

# Status assumido quando o dado persistido não é reconhecido
DEFAULT_APPOINTMENT_STATUS: AppointmentStatus = AppointmentStatus.AGENDADO


def is_terminal_appointment(status: AppointmentStatus) -> bool:
    """True para cancelado/concluido."""
    return status in TERMINAL_APPOINTMENT_STATUSES
