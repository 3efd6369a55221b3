"""Builder para mensagens de texto."""

from __future__ import annotations

from typing import Any

from whatsapp_business.api.payload_builders.whatsapp.base import (
    build_base_payload,
    validate_recipient,
)
from whatsapp_business.api.validators.whatsapp import validate_message_text
from whatsapp_business.app.constants.whatsapp import MessageType
from whatsapp_business.utils.errors import ValidationError


def build_text_message(
    to: str,
    text: str,
    preview_url: bool = False,
) -> dict[str, Any]:
    """Constrói payload para mensagem de texto.

    Valida destinatário e depois texto; a primeira falha interrompe.

    Args:
        to: Número do destinatário
        text: Corpo da mensagem (1 a 4096 caracteres)
        preview_url: Se a API deve gerar preview de links

    Returns:
        Payload de texto conforme API Meta

    Raises:
        ValidationError: Se destinatário ou texto inválidos
    """
    valid_to = validate_recipient(to)

    try:
        valid_text = validate_message_text(text)
    except ValidationError as exc:
        raise ValidationError(
            "Invalid message text",
            details={"text": text, "error": exc.message},
        ) from exc

    payload = build_base_payload(valid_to, MessageType.TEXT)
    payload["text"] = {
        "body": valid_text,
        "preview_url": preview_url,
    }
    return payload
