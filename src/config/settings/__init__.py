"""Agregador de settings do CRM juridico.

Re-exporta as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Agenda / tarefas / cobranca
from config.settings.agenda import (
    AgendaSettings,
    get_agenda_settings,
)

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

__all__ = [
    "AgendaSettings",
    "BaseSettings",
    "Environment",
    "get_agenda_settings",
    "get_base_settings",
]
