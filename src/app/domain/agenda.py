"""Modelos de dominio para as telas de agenda e tarefas.

Sao projecoes de leitura: montadas a cada busca a partir do payload
do backend e nunca gravadas de volta (o status derivado em especial).
"""

from __future__ import annotations

from datetime import datetime  # noqa: TC003 - usado em runtime pelo schema do Pydantic

from pydantic import BaseModel, ConfigDict, Field

from fsm.states import (  # noqa: TC001 - usado em runtime pelo schema do Pydantic
    AppointmentStatus,
    TaskStatus,
)


class AppointmentView(BaseModel):
    """Agendamento pronto para exibicao na agenda."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: str | None = Field(default=None, description="Identificador no backend.")
    title: str = Field(default="(sem título)", description="Titulo do compromisso.")
    description: str | None = Field(default=None, description="Descricao livre.")
    status: AppointmentStatus = Field(..., description="Status decodificado.")
    date: datetime = Field(..., description="Dia do compromisso (meia-noite local).")
    start_time: str = Field(..., description="Horario de inicio (HH:MM, melhor esforco).")
    end_time: str | None = Field(default=None, description="Horario de fim (HH:MM).")
    client_name: str | None = Field(default=None, description="Nome do cliente.")
    location: str | None = Field(default=None, description="Local do encontro.")


class TaskView(BaseModel):
    """Tarefa pronta para exibicao na lista de tarefas."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: str | None = Field(default=None, description="Identificador no backend.")
    title: str = Field(default="(sem título)", description="Titulo da tarefa.")
    description: str = Field(default="", description="Descricao livre.")
    scheduled_at: datetime | None = Field(
        default=None,
        description="Instante agendado; None quando a data nao pode ser lida.",
    )
    time: str | None = Field(default=None, description="Horario exibido (HH:MM).")
    all_day: bool = Field(default=False, description="Tarefa de dia inteiro.")
    status: TaskStatus = Field(..., description="Status derivado no momento da leitura.")


__all__ = ["AppointmentView", "TaskView"]
