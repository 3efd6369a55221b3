"""Eventos de log das trocas HTTP com a Graph API.

Só metadados da troca (método, host+path, status, código Meta):
nunca headers, corpo, telefone ou texto da mensagem.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from whatsapp_business.utils.errors import ApiError

logger = logging.getLogger(__name__)

EVENT_API_ERROR = "whatsapp_api_error"
EVENT_TRANSPORT_ERROR = "whatsapp_transport_error"
EVENT_API_SUCCESS = "whatsapp_api_success"


def _emit(level: int, event: str, method: str, endpoint: str, **fields: Any) -> None:
    logger.log(level, event, extra={"method": method, "endpoint": endpoint, **fields})


def log_api_error(error: ApiError, method: str, endpoint: str) -> None:
    """WARNING com status e classificação do erro retornado pela API."""
    _emit(
        logging.WARNING,
        EVENT_API_ERROR,
        method,
        endpoint,
        status_code=error.status_code,
        error_type=error.error_type,
        error_code=error.error_code,
        is_retryable=error.is_retryable,
    )


def log_transport_error(exc: BaseException, method: str, endpoint: str) -> None:
    # Sem str(exc): a mensagem pode conter a URL assinada
    _emit(logging.ERROR, EVENT_TRANSPORT_ERROR, method, endpoint, error_type=type(exc).__name__)


def log_success(method: str, endpoint: str, status_code: int) -> None:
    _emit(logging.DEBUG, EVENT_API_SUCCESS, method, endpoint, status_code=status_code)
