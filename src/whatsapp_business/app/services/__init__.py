"""Serviços de aplicação."""

from whatsapp_business.app.services.whatsapp_service import (
    MediaDetails,
    SentMessage,
    UploadedMedia,
    WhatsAppService,
)

__all__ = [
    "MediaDetails",
    "SentMessage",
    "UploadedMedia",
    "WhatsAppService",
]
