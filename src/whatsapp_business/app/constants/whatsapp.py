"""Enums e constantes de domínio para mensagens WhatsApp."""

from __future__ import annotations

from enum import StrEnum

MESSAGING_PRODUCT = "whatsapp"


class MessageType(StrEnum):
    """Tipos de conteúdo suportados pelos builders de payload."""

    TEXT = "text"
    IMAGE = "image"


class RecipientType(StrEnum):
    """Tipos de destinatário aceitos pela API Meta/WhatsApp."""

    INDIVIDUAL = "individual"
