"""Proxima cobranca de planos recorrentes (mensal/anual).

O valor e apenas informativo na tela "Meu plano": quando nao for possivel
calcular (cadencia ausente, data invalida, limite de iteracoes esgotado)
retorna None e a tela exibe "—".

A ocorrencia k e sempre `ancora + k * incremento` meses, com o dia
limitado ao tamanho do mes (31/01 -> 28/02 -> 31/03), sem deriva.
"""

from __future__ import annotations

import calendar
import logging
import math
import re
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

from app.services.clock import format_date, local_now, parse_datetime
from config.logging import log_fallback
from config.settings import get_agenda_settings

logger = logging.getLogger(__name__)

_COMPONENT = "billing_recurrence"
_AMOUNT_CHARS = re.compile(r"[^\d,.\-]")


class Cadence(StrEnum):
    """Cadencia de cobranca de um plano."""

    MENSAL = "mensal"
    ANUAL = "anual"
    NENHUMA = "nenhuma"


_INCREMENT_MONTHS: dict[Cadence, int] = {
    Cadence.MENSAL: 1,
    Cadence.ANUAL: 12,
}


def next_occurrence_date(
    cadence: Cadence | str | None,
    anchor: object = None,
    *,
    now: datetime | None = None,
    max_iterations: int | None = None,
) -> datetime | None:
    """Primeira ocorrencia estritamente posterior a `now`.

    Args:
        cadence: "mensal", "anual", "nenhuma" ou None.
        anchor: Data de referencia (datetime, date ou texto ISO). Sem ancora,
            conta a partir de `now`.
        now: Instante de comparacao (relogio atual quando omitido).
        max_iterations: Limite de incrementos (padrao: settings). Zero ou
            negativo nao permite nenhum incremento.

    Returns:
        datetime da proxima ocorrencia ou None quando nao aplicavel.
    """
    increment = _increment_for(cadence)
    if increment is None:
        return None

    current = local_now(now)
    if anchor is None:
        base = current
    else:
        base = parse_datetime(anchor)
        if base is None:
            logger.debug(
                "billing_anchor_invalid",
                extra={"component": _COMPONENT, "anchor_type": type(anchor).__name__},
            )
            return None

    if max_iterations is None:
        limit = get_agenda_settings().recurrence_max_iterations
    else:
        limit = max(max_iterations, 0)
    candidate = base
    iterations = 0
    while candidate <= current:
        if iterations >= limit:
            log_fallback(logger, _COMPONENT, reason="max_iterations_exhausted")
            return None
        iterations += 1
        shifted = _add_months(base, increment * iterations)
        if shifted is None:
            log_fallback(logger, _COMPONENT, reason="date_overflow")
            return None
        candidate = shifted

    return candidate


def next_occurrence(
    cadence: Cadence | str | None,
    anchor: object = None,
    *,
    now: datetime | None = None,
    max_iterations: int | None = None,
) -> str | None:
    """Como `next_occurrence_date`, formatado para exibicao (dd/mm/aaaa)."""
    result = next_occurrence_date(cadence, anchor, now=now, max_iterations=max_iterations)
    return format_date(result) if result is not None else None


def resolve_cadence(monthly_amount: float | None, annual_amount: float | None) -> Cadence:
    """Cadencia de cobranca pelo(s) preco(s) cadastrados no plano.

    Com os dois precos o cliente ainda escolhe a modalidade, entao nao ha
    ciclo definido.
    """
    has_monthly = monthly_amount is not None
    has_annual = annual_amount is not None
    if has_monthly and not has_annual:
        return Cadence.MENSAL
    if has_annual and not has_monthly:
        return Cadence.ANUAL
    return Cadence.NENHUMA


def cadence_label(monthly_amount: float | None, annual_amount: float | None) -> str:
    """Rotulo da modalidade exibido junto da proxima cobranca."""
    has_monthly = monthly_amount is not None
    has_annual = annual_amount is not None
    if has_monthly and has_annual:
        return "Mensal ou anual"
    if has_monthly:
        return "Mensal"
    if has_annual:
        return "Anual"
    return "Sob consulta"


def parse_amount(value: object) -> float | None:
    """Converte preco numerico ou em texto pt-BR ("R$ 1.234,56") para float."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
        return number if math.isfinite(number) else None
    if not isinstance(value, str):
        return None

    sanitized = _AMOUNT_CHARS.sub("", value.strip())
    if not sanitized:
        return None
    if "," in sanitized:
        # pt-BR: ponto separa milhar, virgula separa decimais
        sanitized = sanitized.replace(".", "").replace(",", ".")
    elif sanitized.count(".") > 1:
        sanitized = sanitized.replace(".", "")
    try:
        return float(sanitized)
    except ValueError:
        return None


@dataclass(frozen=True, slots=True)
class BillingEstimate:
    """Resumo de cobranca exibido para o plano atual."""

    cadence: Cadence
    cadence_label: str
    next_billing: str | None


def estimate_next_billing(
    plan: Mapping[str, object] | None,
    *,
    now: datetime | None = None,
) -> BillingEstimate:
    """Estima a proxima cobranca de um registro bruto de plano.

    Campos lidos (o backend alterna entre snake_case e camelCase):
    valor_mensal/valorMensal/preco_mensal/precoMensal,
    valor_anual/valorAnual/preco_anual/precoAnual,
    datacadastro/data_cadastro.
    """
    if not plan:
        return BillingEstimate(Cadence.NENHUMA, "Sob consulta", None)

    monthly = parse_amount(
        _first_present(plan, "valor_mensal", "valorMensal", "preco_mensal", "precoMensal")
    )
    annual = parse_amount(
        _first_present(plan, "valor_anual", "valorAnual", "preco_anual", "precoAnual")
    )
    cadence = resolve_cadence(monthly, annual)
    label = cadence_label(monthly, annual)

    anchor = _first_present(plan, "datacadastro", "data_cadastro")
    if anchor is None:
        return BillingEstimate(cadence, label, None)

    return BillingEstimate(cadence, label, next_occurrence(cadence, anchor, now=now))


def _increment_for(cadence: Cadence | str | None) -> int | None:
    if cadence is None:
        return None
    try:
        return _INCREMENT_MONTHS.get(Cadence(str(cadence).strip().lower()))
    except ValueError:
        logger.debug(
            "billing_cadence_unknown",
            extra={"component": _COMPONENT, "cadence": str(cadence)[:20]},
        )
        return None


def _add_months(value: datetime, months: int) -> datetime | None:
    total = value.month - 1 + months
    year = value.year + total // 12
    month = total % 12 + 1
    if year > datetime.max.year:
        return None
    day = min(value.day, calendar.monthrange(year, month)[1])
    return value.replace(year=year, month=month, day=day)


def _first_present(record: Mapping[str, object], *keys: str) -> object:
    for key in keys:
        value = record.get(key)
        if value is not None:
            return value
    return None
