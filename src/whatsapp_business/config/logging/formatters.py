"""Formatter JSON dos logs do cliente WhatsApp.

Todo record sai como um objeto JSON com os campos base abaixo, na ordem
de LOG_FIELDS, seguidos dos campos passados via `extra`
(status_code, endpoint, error_type...).
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Campos base, na ordem em que aparecem no JSON
LOG_FIELDS: tuple[str, ...] = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

REQUIRED_LOG_FIELDS = frozenset(LOG_FIELDS)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}

ISO_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


def create_json_formatter() -> JsonFormatter:
    """Cria o JsonFormatter usado por configure_logging.

    Exemplo de output:
        {"asctime": "2026-10-19T10:30:00+0000", "level": "WARNING",
         "logger": "whatsapp_business.api.connectors.whatsapp.meta_logging",
         "message": "whatsapp_api_error", "correlation_id": "abc-123",
         "service": "whatsapp_business", "status_code": 401}
    """
    return JsonFormatter(
        " ".join(f"%({name})s" for name in LOG_FIELDS),
        datefmt=ISO_DATE_FORMAT,
        rename_fields=FIELD_RENAME_MAP,
        json_ensure_ascii=False,
    )
