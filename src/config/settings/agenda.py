"""Settings de agenda, tarefas e cobranca recorrente.

Centralizar a leitura de env aqui evita que cada tela/caso de uso
decida sozinho timezone, formato de data e limite de recorrencia.
"""

from __future__ import annotations

import os
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, ConfigDict, Field


class AgendaSettings(BaseModel):
    """Configuracoes usadas pelas rotinas temporais do CRM."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    agenda_timezone: str = Field(
        default="America/Sao_Paulo",
        description="Timezone usada para interpretar datas sem offset.",
    )
    date_display_format: str = Field(
        default="%d/%m/%Y",
        description="Formato de exibicao de datas (pt-BR).",
    )
    recurrence_max_iterations: int = Field(
        default=1000,
        ge=1,
        description="Limite de incrementos ao buscar a proxima cobranca.",
    )
    default_start_time: str = Field(
        default="09:00",
        description="Horario de inicio exibido quando o registro nao traz hora_inicio.",
    )

    @property
    def zone(self) -> ZoneInfo:
        """Retorna a ZoneInfo da agenda."""
        return ZoneInfo(self.agenda_timezone)

    def validation_errors(self) -> list[str]:
        """Valida configuracoes de agenda.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []

        try:
            ZoneInfo(self.agenda_timezone)
        except (ZoneInfoNotFoundError, ValueError):
            errors.append(f"AGENDA_TIMEZONE invalido: {self.agenda_timezone}")

        if "%" not in self.date_display_format:
            errors.append("DATE_DISPLAY_FORMAT deve conter diretivas strftime")

        start = self.default_start_time
        if len(start) != 5 or start[2] != ":" or not (start[:2] + start[3:]).isdigit():
            errors.append(f"AGENDA_DEFAULT_START_TIME fora do formato HH:MM: {start}")

        return errors


def _load_agenda_from_env() -> AgendaSettings:
    """Carrega AgendaSettings a partir de variaveis de ambiente."""
    return AgendaSettings(
        agenda_timezone=os.getenv("AGENDA_TIMEZONE", "America/Sao_Paulo"),
        date_display_format=os.getenv("DATE_DISPLAY_FORMAT", "%d/%m/%Y"),
        recurrence_max_iterations=int(os.getenv("RECURRENCE_MAX_ITERATIONS", "1000")),
        default_start_time=os.getenv("AGENDA_DEFAULT_START_TIME", "09:00"),
    )


@lru_cache(maxsize=1)
def get_agenda_settings() -> AgendaSettings:
    """Retorna instancia cacheada de AgendaSettings."""
    return _load_agenda_from_env()


__all__ = ["AgendaSettings", "get_agenda_settings"]
