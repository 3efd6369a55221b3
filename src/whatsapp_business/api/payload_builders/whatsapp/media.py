"""Builder para mensagens de mídia (imagem)."""

from __future__ import annotations

from typing import Any

from whatsapp_business.api.payload_builders.whatsapp.base import (
    build_base_payload,
    validate_recipient,
)
from whatsapp_business.api.validators.whatsapp import validate_message_text
from whatsapp_business.app.constants.whatsapp import MessageType
from whatsapp_business.utils.errors import ValidationError


def build_image_message(
    to: str,
    media_id_or_url: str,
    caption: str | None = None,
) -> dict[str, Any]:
    """Constrói payload para mensagem de imagem.

    A chave `caption` só aparece quando uma legenda é informada. Legenda
    vazia é rejeitada pela mesma regra do texto de mensagem.

    Args:
        to: Número do destinatário
        media_id_or_url: ID retornado pelo upload (ou URL da mídia)
        caption: Legenda opcional

    Returns:
        Payload de imagem conforme API Meta

    Raises:
        ValidationError: Se destinatário ou legenda inválidos
    """
    valid_to = validate_recipient(to)

    image: dict[str, Any] = {"id": media_id_or_url}
    if caption is not None:
        try:
            image["caption"] = validate_message_text(caption)
        except ValidationError as exc:
            raise ValidationError(
                "Invalid caption text",
                details={"caption": caption, "error": exc.message},
            ) from exc

    payload = build_base_payload(valid_to, MessageType.IMAGE)
    payload["image"] = image
    return payload
