"""Base comum a todos os payloads de envio."""

from __future__ import annotations

from typing import Any

from whatsapp_business.api.validators.whatsapp import validate_phone_number
from whatsapp_business.app.constants.whatsapp import (
    MESSAGING_PRODUCT,
    MessageType,
    RecipientType,
)
from whatsapp_business.utils.errors import ValidationError


def validate_recipient(to: str) -> str:
    """Valida o destinatário e reempacota a falha com contexto do campo.

    Raises:
        ValidationError: "Invalid recipient phone number" com details
            {"phoneNumber": to, "error": <mensagem do validador>}
    """
    try:
        return validate_phone_number(to)
    except ValidationError as exc:
        raise ValidationError(
            "Invalid recipient phone number",
            details={"phoneNumber": to, "error": exc.message},
        ) from exc


def build_base_payload(to: str, message_type: MessageType) -> dict[str, Any]:
    """Constrói os campos comuns do payload.

    Args:
        to: Destinatário já validado
        message_type: Tipo de mensagem

    Returns:
        Campos base conforme API Meta
    """
    return {
        "messaging_product": MESSAGING_PRODUCT,
        "recipient_type": RecipientType.INDIVIDUAL.value,
        "to": to,
        "type": message_type.value,
    }
