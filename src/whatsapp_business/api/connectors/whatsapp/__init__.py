"""Conector WhatsApp - adapter de borda para Meta Graph API.

Este módulo é o único ponto de IO do cliente.
Responsabilidades:
- HTTP client para Graph API (mensagens e mídia)
- Modelos de resposta e envelope de erro
- Handshake de verificação de webhook
"""

from .http_base import HttpClient, HttpClientConfig
from .http_client import WhatsAppHttpClient, create_whatsapp_http_client
from .meta_errors import is_permanent_error, parse_error_envelope
from .models import (
    ContactInfo,
    ErrorDetail,
    ErrorEnvelope,
    MediaInfoResponse,
    MediaUploadResponse,
    MessageInfo,
    MessageResponse,
)
from .webhook import WebhookChallengeError, verify_webhook_challenge, verify_webhook_query

__all__ = [
    "ContactInfo",
    "ErrorDetail",
    "ErrorEnvelope",
    "HttpClient",
    "HttpClientConfig",
    "MediaInfoResponse",
    "MediaUploadResponse",
    "MessageInfo",
    "MessageResponse",
    "WebhookChallengeError",
    "WhatsAppHttpClient",
    "create_whatsapp_http_client",
    "is_permanent_error",
    "parse_error_envelope",
    "verify_webhook_challenge",
    "verify_webhook_query",
]
