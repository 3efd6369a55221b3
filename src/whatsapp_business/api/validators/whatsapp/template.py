"""Validadores de identificação de templates (nome e idioma)."""

from __future__ import annotations

from whatsapp_business.api.validators.whatsapp.limits import (
    LANGUAGE_CODE_ERROR,
    LANGUAGE_CODE_PATTERN,
    MAX_TEMPLATE_NAME_LENGTH,
    TEMPLATE_NAME_ERROR,
    TEMPLATE_NAME_PATTERN,
)
from whatsapp_business.utils.errors import ValidationError


def is_valid_template_name(template_name: str) -> bool:
    """Nome em minúsculas, dígitos e `_`, segmentos separados por `.`."""
    return (
        len(template_name) <= MAX_TEMPLATE_NAME_LENGTH
        and TEMPLATE_NAME_PATTERN.fullmatch(template_name) is not None
    )


def validate_template_name(template_name: str) -> str:
    """Valida nome de template.

    Args:
        template_name: Nome do template (ex: order_confirmation.v2)

    Returns:
        O mesmo nome, inalterado

    Raises:
        ValidationError: Se o nome não casa com o padrão ou excede 512 caracteres
    """
    if not is_valid_template_name(template_name):
        raise ValidationError(TEMPLATE_NAME_ERROR, details={"value": template_name})
    return template_name


def is_valid_language_code(language_code: str) -> bool:
    """Código no formato xx_YY (ex: en_US, pt_BR)."""
    return LANGUAGE_CODE_PATTERN.fullmatch(language_code) is not None


def validate_language_code(language_code: str) -> str:
    """Valida código de idioma do template.

    Raises:
        ValidationError: Se não estiver no formato xx_YY
    """
    if not is_valid_language_code(language_code):
        raise ValidationError(LANGUAGE_CODE_ERROR, details={"value": language_code})
    return language_code
