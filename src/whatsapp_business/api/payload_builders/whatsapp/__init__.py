"""Builders de payload para API Meta/WhatsApp.

Builders são transformações puras: validam os campos na ordem
(destinatário primeiro) e devolvem um dict novo a cada chamada.
"""

from whatsapp_business.api.payload_builders.whatsapp.base import (
    build_base_payload,
    validate_recipient,
)
from whatsapp_business.api.payload_builders.whatsapp.media import build_image_message
from whatsapp_business.api.payload_builders.whatsapp.text import build_text_message

__all__ = [
    "build_base_payload",
    "build_image_message",
    "build_text_message",
    "validate_recipient",
]
