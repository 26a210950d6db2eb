"""Relogio e datas no fuso da agenda.

Datas sem offset vindas do backend ("2026-03-10", "2026-03-10T14:00")
sao interpretadas no fuso configurado (AGENDA_TIMEZONE), o que permite
comparar qualquer valor com `now` sem misturar naive/aware.
"""

from __future__ import annotations

from datetime import date, datetime, time

from config.settings import get_agenda_settings


def local_now(now: datetime | None = None) -> datetime:
    """Retorna `now` (ou o relogio atual) no fuso da agenda."""
    if now is None:
        return datetime.now(tz=get_agenda_settings().zone)
    return to_local(now)


def to_local(value: datetime) -> datetime:
    """Anexa o fuso da agenda a datas naive; converte as demais."""
    zone = get_agenda_settings().zone
    if value.tzinfo is None:
        return value.replace(tzinfo=zone)
    return value.astimezone(zone)


def parse_datetime(value: object) -> datetime | None:
    """Converte datetime/date/texto ISO em datetime local; None se invalido.

    Datas nos extremos do calendario (ano 1, ano 9999) que nao cabem no
    fuso da agenda apos a conversao tambem retornam None.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, time.min)
    elif isinstance(value, str) and value.strip():
        try:
            parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError:
            return None
    else:
        return None

    try:
        return to_local(parsed)
    except OverflowError:
        return None


def format_date(value: datetime) -> str:
    """Formata a data no padrao de exibicao configurado (pt-BR)."""
    return value.strftime(get_agenda_settings().date_display_format)
