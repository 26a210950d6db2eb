"""Formatter JSON com campos fixos.

Exemplo de saída:
    {"asctime": "2026-10-19 10:30:00,123", "level": "DEBUG",
     "logger": "api.normalizers.payload.extractor",
     "message": "payload_envelope_unrecognized",
     "correlation_id": "abc-123", "service": "crm_juridico",
     "payload_type": "dict"}
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria JsonFormatter com os campos obrigatórios renomeados."""
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)
