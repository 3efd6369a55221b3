"""Serviço de alto nível sobre o cliente HTTP do WhatsApp.

Expõe as quatro operações com resultados simplificados, sem os
detalhes de envelope da Graph API.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from whatsapp_business.api.connectors.whatsapp.webhook import verify_webhook_challenge

if TYPE_CHECKING:
    from whatsapp_business.api.connectors.whatsapp.http_client import WhatsAppHttpClient

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SentMessage:
    """Mensagem aceita pela API."""

    message_id: str


@dataclass(frozen=True, slots=True)
class UploadedMedia:
    """Mídia armazenada na Graph API."""

    media_id: str


@dataclass(frozen=True, slots=True)
class MediaDetails:
    """Metadados de mídia para download posterior.

    Atributos:
        id: Media id
        mime_type: MIME type informado pela API
        size: Tamanho em bytes
        url: URL temporária (exige Authorization para baixar)
    """

    id: str
    mime_type: str
    size: int
    url: str


class WhatsAppService:
    """Fachada com as operações de envio e mídia.

    Erros (ValidationError, ApiError) propagam sem alteração.
    """

    def __init__(self, client: WhatsAppHttpClient) -> None:
        self._client = client

    @property
    def client(self) -> WhatsAppHttpClient:
        return self._client

    async def send_text_message(self, phone_number: str, message: str) -> SentMessage:
        response = await self._client.send_text_message(phone_number, message)
        logger.info("whatsapp_message_sent", extra={"message_id": response.message_id})
        return SentMessage(message_id=response.message_id)

    async def send_image_message(
        self,
        phone_number: str,
        media_id_or_url: str,
        caption: str | None = None,
    ) -> SentMessage:
        response = await self._client.send_image_message(phone_number, media_id_or_url, caption)
        logger.info("whatsapp_message_sent", extra={"message_id": response.message_id})
        return SentMessage(message_id=response.message_id)

    async def upload_media(self, file: bytes, mime_type: str) -> UploadedMedia:
        response = await self._client.upload_media(file, mime_type)
        return UploadedMedia(media_id=response.id)

    async def get_media_info(self, media_id: str) -> MediaDetails:
        response = await self._client.get_media_info(media_id)
        return MediaDetails(
            id=response.id,
            mime_type=response.mime_type,
            size=response.file_size,
            url=response.url,
        )

    async def download_media(self, url: str) -> bytes:
        return await self._client.download_media(url)

    def verify_webhook(
        self,
        hub_mode: str | None,
        hub_verify_token: str | None,
        hub_challenge: str | None,
    ) -> str:
        """Responde ao handshake do webhook usando o token configurado."""
        return verify_webhook_challenge(
            hub_mode,
            hub_verify_token,
            hub_challenge,
            self._client.settings.webhook_verify_token,
        )
