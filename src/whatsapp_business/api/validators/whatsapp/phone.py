"""Validador de número de telefone do destinatário."""

from __future__ import annotations

from whatsapp_business.api.validators.whatsapp.limits import (
    PHONE_NUMBER_ERROR,
    PHONE_NUMBER_PATTERN,
)
from whatsapp_business.utils.errors import ValidationError


def is_valid_phone_number(phone_number: str) -> bool:
    """Retorna True se o número casa integralmente com o padrão internacional."""
    return PHONE_NUMBER_PATTERN.fullmatch(phone_number) is not None


def validate_phone_number(phone_number: str) -> str:
    """Valida número no formato [+][país][área][número].

    Args:
        phone_number: Número informado pelo chamador

    Returns:
        O mesmo número, inalterado

    Raises:
        ValidationError: Se o formato for inválido (inclui string vazia)
    """
    if not is_valid_phone_number(phone_number):
        raise ValidationError(PHONE_NUMBER_ERROR, details={"value": phone_number})
    return phone_number
