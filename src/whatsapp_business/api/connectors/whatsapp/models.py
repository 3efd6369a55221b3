"""Modelos de resposta da Graph API (WhatsApp Cloud).

Respostas 2xx são validadas contra estes modelos; formato divergente
vira ApiError no cliente HTTP.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class _GraphModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow")


class ContactInfo(_GraphModel):
    """Contato resolvido pela API para o destinatário."""

    input: str
    wa_id: str


class MessageInfo(_GraphModel):
    """Identificador da mensagem aceita (wamid)."""

    id: str


class MessageResponse(_GraphModel):
    """Resposta de POST /{phone_number_id}/messages."""

    messaging_product: Literal["whatsapp"]
    contacts: list[ContactInfo]
    messages: list[MessageInfo] = Field(min_length=1)

    @property
    def message_id(self) -> str:
        """ID da primeira (e normalmente única) mensagem aceita."""
        return self.messages[0].id


class MediaUploadResponse(_GraphModel):
    """Resposta de POST /{phone_number_id}/media."""

    id: str


class MediaInfoResponse(_GraphModel):
    """Resposta de GET /{media_id}."""

    messaging_product: Literal["whatsapp"]
    url: str
    mime_type: str
    sha256: str
    file_size: int
    id: str


class ErrorDetail(_GraphModel):
    """Conteúdo de `error` no envelope de erro da Meta."""

    message: str
    type: str
    code: int
    error_subcode: int | None = None
    fbtrace_id: str | None = None


class ErrorEnvelope(_GraphModel):
    """Envelope padrão de erro: {"error": {...}}."""

    error: ErrorDetail
