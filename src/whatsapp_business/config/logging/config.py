"""Instalação do logging JSON para aplicações que usam o cliente.

A biblioteca só chama logging.getLogger(__name__) e, sem configuração,
fica silenciosa (NullHandler no logger raiz do pacote). Quem quiser
logs estruturados chama configure_logging uma vez no startup:

    from whatsapp_business.app.observability import get_correlation_id
    from whatsapp_business.config.logging import configure_logging

    configure_logging("INFO", "minha_app", get_correlation_id)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TextIO

from whatsapp_business.config.logging.filters import (
    CorrelationIdFilter,
    SecretRedactionFilter,
)
from whatsapp_business.config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "whatsapp_business"
LIBRARY_LOGGER_NAME = "whatsapp_business"


def _normalize_level(level: str) -> str:
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )
    return level_upper


def build_json_handler(
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
    stream: TextIO | None = None,
) -> logging.Handler:
    """Cria StreamHandler com formatter JSON, correlation_id e máscara de tokens."""
    handler = logging.StreamHandler(stream)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))
    handler.addFilter(SecretRedactionFilter())
    return handler


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
    stream: TextIO | None = None,
) -> None:
    """Configura o root logger com um único handler JSON.

    Args:
        level: DEBUG, INFO, WARNING, ERROR ou CRITICAL (case-insensitive).
        service_name: Valor do campo `service` em cada log.
        correlation_id_getter: Retorna o correlation_id do contexto atual.
        stream: Destino dos logs. Usa sys.stderr se None.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_name = _normalize_level(level)

    handler = build_json_handler(service_name, correlation_id_getter, stream)
    handler.setLevel(level_name)

    root = logging.getLogger()
    root.setLevel(level_name)
    # Substituir handlers existentes para evitar duplicação
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
