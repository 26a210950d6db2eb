"""Canonicalizacao deterministica de horarios para HH:MM.

Usada ao exibir horarios vindos do backend e ao enviar horarios
digitados pelo usuario. Apenas reagrupa digitos:
- "9:5"  -> "09:05"
- "930"  -> "09:30"
- "14"   -> "14:00"
- "1430h" -> "14:30"

Nao ha validacao de faixa ("99:99" continua "99:99"); dados legados
fora da faixa precisam continuar exibiveis. Quem quiser sinalizar
valores invalidos usa `is_valid_time_of_day`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_NON_DIGITS = re.compile(r"\D", re.ASCII)


def canonicalize_time(value: object) -> str | None:
    """Retorna o horario em HH:MM ou None quando nao ha o que aproveitar."""
    if not isinstance(value, str):
        return None
    trimmed = value.strip()
    if not trimmed:
        return None

    parts = trimmed.split(":")
    if len(parts) >= 2:
        return _join(parts[0].rjust(2, "0")[-2:], parts[1].rjust(2, "0")[:2])

    digits = _NON_DIGITS.sub("", trimmed)
    if not digits:
        return None

    if len(digits) <= 2:
        hours, minutes = digits, "00"
    elif len(digits) == 3:
        hours, minutes = digits[:1], digits[1:]
    else:
        hours, minutes = digits[:2], digits[2:4]

    return _join(hours.rjust(2, "0")[-2:], minutes.ljust(2, "0")[:2])


def ensure_time(value: object) -> str:
    """Como `canonicalize_time`, mas nunca retorna None.

    Sem forma canonica, devolve o texto original sem espacos nas pontas
    (exibicao "melhor esforco") ou string vazia para nao-strings.
    """
    canonical = canonicalize_time(value)
    if canonical is not None:
        return canonical
    return value.strip() if isinstance(value, str) else ""


def is_valid_time_of_day(value: object) -> bool:
    """True quando a forma canonica tem hora 0-23 e minuto 0-59."""
    return TimeOfDay.parse(value) is not None


@dataclass(frozen=True, slots=True)
class TimeOfDay:
    """Horario do dia ja validado (hora 0-23, minuto 0-59)."""

    hour: int
    minute: int

    def __post_init__(self) -> None:
        if not 0 <= self.hour <= 23 or not 0 <= self.minute <= 59:
            raise ValueError(f"horario fora da faixa: {self.hour}:{self.minute}")

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"

    @classmethod
    def parse(cls, value: object) -> TimeOfDay | None:
        """Canonicaliza e valida; None quando nao for um horario real."""
        canonical = canonicalize_time(value)
        if canonical is None:
            return None
        hours, minutes = canonical.split(":", 1)
        if not _is_ascii_number(hours) or not _is_ascii_number(minutes):
            return None
        hour, minute = int(hours), int(minutes)
        if hour > 23 or minute > 59:
            return None
        return cls(hour=hour, minute=minute)


def _join(hours: str, minutes: str) -> str:
    return f"{hours}:{minutes}"


def _is_ascii_number(text: str) -> bool:
    return text.isascii() and text.isdigit()
