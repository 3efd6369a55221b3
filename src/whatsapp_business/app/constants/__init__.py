"""Constantes de domínio."""

from whatsapp_business.app.constants.whatsapp import (
    MESSAGING_PRODUCT,
    MessageType,
    RecipientType,
)

__all__ = [
    "MESSAGING_PRODUCT",
    "MessageType",
    "RecipientType",
]
