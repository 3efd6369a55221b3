"""Validadores para texto de mensagens e legendas."""

from whatsapp_business.api.validators.whatsapp.limits import (
    MAX_TEXT_LENGTH,
    MESSAGE_TEXT_ERROR,
    MIN_TEXT_LENGTH,
)
from whatsapp_business.utils.errors import ValidationError


def is_valid_message_text(text: str) -> bool:
    return MIN_TEXT_LENGTH <= len(text) <= MAX_TEXT_LENGTH


def validate_message_text(text: str) -> str:
    """Valida tamanho do texto (1 a 4096 caracteres).

    Raises:
        ValidationError: Se texto vazio ou excede limite
    """
    if not is_valid_message_text(text):
        raise ValidationError(
            MESSAGE_TEXT_ERROR,
            details={"value": text, "length": len(text)},
        )
    return text
