"""Webhook da Meta: somente o handshake de verificação (hub.challenge)."""

from whatsapp_business.api.connectors.whatsapp.webhook.verify import (
    SUBSCRIBE_MODE,
    WebhookChallengeError,
    verify_webhook_challenge,
    verify_webhook_query,
)

__all__ = [
    "SUBSCRIBE_MODE",
    "WebhookChallengeError",
    "verify_webhook_challenge",
    "verify_webhook_query",
]
