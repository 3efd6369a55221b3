"""Filters aplicados ao handler JSON.

- CorrelationIdFilter: adiciona `correlation_id` e `service` ao record
- SecretRedactionFilter: troca o valor de `Bearer <token>` por [REDACTED]
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

REDACTED = "[REDACTED]"

_BEARER_PATTERN = re.compile(r"(Bearer\s+)[^\s'\",]+", re.IGNORECASE)


def _no_correlation_id() -> str:
    return ""


class CorrelationIdFilter(logging.Filter):
    """Enriquece o record; nunca descarta.

    Um correlation_id passado em `extra` tem prioridade sobre o getter.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._correlation_id_getter = correlation_id_getter or _no_correlation_id

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "correlation_id", None):
            record.correlation_id = self._correlation_id_getter()
        record.service = self._service_name
        return True


class SecretRedactionFilter(logging.Filter):
    """Mascara tokens Bearer na mensagem já interpolada."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = redact_secrets(message)
        if redacted != message:
            # Mensagem final congelada: args já foram aplicados
            record.msg = redacted
            record.args = None
        return True


def redact_secrets(text: str) -> str:
    """Substitui o valor de qualquer `Bearer <token>` por [REDACTED].

    >>> redact_secrets("Authorization: Bearer abc123")
    'Authorization: Bearer [REDACTED]'
    """
    return _BEARER_PATTERN.sub(rf"\g<1>{REDACTED}", text)
