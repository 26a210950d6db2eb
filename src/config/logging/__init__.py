"""Logging estruturado (JSON) do núcleo do CRM.

Uso:
    import logging

    from config.logging import configure_logging

    configure_logging(level="INFO", service_name="crm_juridico")

    logger = logging.getLogger(__name__)
    logger.debug("payload_envelope_unrecognized", extra={"payload_type": "dict"})

Todo registro carrega correlation_id, service, level, logger e message.
Nunca registrar conteúdo de payloads (dados de clientes).
"""

from config.logging.config import configure_logging, log_fallback
from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "log_fallback",
]
