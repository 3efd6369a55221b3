"""Logging estruturado (JSON) do cliente WhatsApp Business.

Cada log carrega: asctime, level, logger, message, correlation_id e
service, além do contexto passado em `extra`. Tokens Bearer são
mascarados antes da formatação.
"""

from whatsapp_business.config.logging.config import (
    build_json_handler,
    configure_logging,
    get_logger,
)
from whatsapp_business.config.logging.filters import (
    REDACTED,
    CorrelationIdFilter,
    SecretRedactionFilter,
    redact_secrets,
)
from whatsapp_business.config.logging.formatters import (
    FIELD_RENAME_MAP,
    LOG_FIELDS,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "LOG_FIELDS",
    "REDACTED",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "SecretRedactionFilter",
    "build_json_handler",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "redact_secrets",
]
