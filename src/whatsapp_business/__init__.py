"""Cliente tipado para a WhatsApp Business (Cloud) API.

Uso:
    from whatsapp_business import create_whatsapp_service

    service = create_whatsapp_service()  # WHATSAPP_* do ambiente
    sent = await service.send_text_message("5215551234567", "Hello")
"""

import logging

from whatsapp_business.api.connectors.whatsapp import (
    MediaInfoResponse,
    MediaUploadResponse,
    MessageResponse,
    WebhookChallengeError,
    WhatsAppHttpClient,
    create_whatsapp_http_client,
    verify_webhook_challenge,
)
from whatsapp_business.api.payload_builders.whatsapp import (
    build_image_message,
    build_text_message,
)
from whatsapp_business.api.validators.whatsapp import (
    validate_language_code,
    validate_message_text,
    validate_phone_number,
    validate_template_name,
)
from whatsapp_business.app.bootstrap import (
    create_whatsapp_service,
    create_whatsapp_service_from_overrides,
)
from whatsapp_business.app.services import (
    MediaDetails,
    SentMessage,
    UploadedMedia,
    WhatsAppService,
)
from whatsapp_business.config.settings import (
    WhatsAppSettings,
    get_whatsapp_settings,
    resolve_whatsapp_settings,
)
from whatsapp_business.utils.errors import (
    ApiError,
    ConfigurationError,
    ValidationError,
    WhatsAppClientError,
)

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ApiError",
    "ConfigurationError",
    "MediaDetails",
    "MediaInfoResponse",
    "MediaUploadResponse",
    "MessageResponse",
    "SentMessage",
    "UploadedMedia",
    "ValidationError",
    "WebhookChallengeError",
    "WhatsAppClientError",
    "WhatsAppHttpClient",
    "WhatsAppService",
    "WhatsAppSettings",
    "build_image_message",
    "build_text_message",
    "create_whatsapp_http_client",
    "create_whatsapp_service",
    "create_whatsapp_service_from_overrides",
    "get_whatsapp_settings",
    "resolve_whatsapp_settings",
    "validate_language_code",
    "validate_message_text",
    "validate_phone_number",
    "validate_template_name",
]
