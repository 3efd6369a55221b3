"""Erros e helpers de parsing para API Meta/WhatsApp."""

from __future__ import annotations

import json
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from whatsapp_business.api.connectors.whatsapp.models import ErrorEnvelope

UNKNOWN_ERROR_TYPE = "unknown"
UNKNOWN_ERROR_MESSAGE = "Unknown API error"

_PERMANENT_STATUS_CODES = frozenset({400, 401, 403, 404, 413})
_PERMANENT_TYPES = frozenset({"OAuthException", "InvalidRequest"})
# error.code da Meta para limite de taxa
_RATE_LIMIT_META_CODES = frozenset({4, 80007, 130429, 131048, 131056})


def is_permanent_error(
    status_code: int,
    error_type: str,
    meta_code: int | None = None,
) -> bool:
    """Classifica erro como permanente ou transitório.

    Args:
        status_code: Status HTTP da resposta
        error_type: `error.type` do envelope Meta
        meta_code: `error.code` do envelope Meta, se houver

    Erros permanentes: status 400, 401, 403, 404, 413 ou tipo
    OAuthException/InvalidRequest. Códigos Meta de rate limit são sempre
    transitórios, mesmo com status 4xx.
    """
    if meta_code in _RATE_LIMIT_META_CODES:
        return False
    if status_code in _PERMANENT_STATUS_CODES:
        return True
    return error_type in _PERMANENT_TYPES


def parse_error_envelope(status_code: int, response_text: str) -> dict[str, Any]:
    """Extrai o envelope de erro de uma resposta não-2xx.

    Args:
        status_code: Status HTTP da resposta
        response_text: Corpo bruto da resposta

    Returns:
        O envelope parseado, se casar com o formato da Meta; senão um
        envelope sintetizado {"error": {"message", "type": "unknown", "code"}}.
    """
    try:
        parsed = json.loads(response_text)
    except ValueError:
        parsed = None

    if isinstance(parsed, dict):
        try:
            ErrorEnvelope.model_validate(parsed)
        except PydanticValidationError:
            pass
        else:
            return parsed

    return {
        "error": {
            "message": response_text or UNKNOWN_ERROR_MESSAGE,
            "type": UNKNOWN_ERROR_TYPE,
            "code": status_code,
        }
    }
