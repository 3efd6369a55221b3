"""correlation_id por contexto (ContextVar), lido pelo CorrelationIdFilter.

Uso típico ao redor de uma chamada ao cliente:

    with correlation_scope(request_id) as correlation_id:
        await service.send_text_message(to, text)
"""

from __future__ import annotations

import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token

_correlation_id: ContextVar[str] = ContextVar("whatsapp_correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id ativo, ou "" fora de qualquer escopo."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Ativa um correlation_id (UUID4 novo se None) e retorna o token de reset."""
    return _correlation_id.set(correlation_id or str(uuid.uuid4()))


def reset_correlation_id(token: Token[str]) -> None:
    _correlation_id.reset(token)


@contextmanager
def correlation_scope(correlation_id: str | None = None) -> Iterator[str]:
    """Ativa um correlation_id durante o bloco e restaura o anterior na saída."""
    token = set_correlation_id(correlation_id)
    try:
        yield _correlation_id.get()
    finally:
        reset_correlation_id(token)
