"""Handshake de verificação do webhook (GET com hub.mode/hub.verify_token).

A Meta chama a URL do webhook com três query params e espera receber
`hub.challenge` de volta como corpo da resposta quando o token confere.
"""

from __future__ import annotations

import hmac
from typing import TYPE_CHECKING

from whatsapp_business.utils.errors import ValidationError

if TYPE_CHECKING:
    from collections.abc import Mapping

SUBSCRIBE_MODE = "subscribe"


class WebhookChallengeError(ValidationError):
    """Handshake recusado (token não configurado ou divergente)."""


def verify_webhook_challenge(
    hub_mode: str | None,
    hub_verify_token: str | None,
    hub_challenge: str | None,
    expected_token: str | None,
) -> str:
    """Confere o handshake e devolve o corpo da resposta.

    Args:
        hub_mode: hub.mode recebido (precisa ser "subscribe")
        hub_verify_token: hub.verify_token recebido
        hub_challenge: hub.challenge recebido
        expected_token: WHATSAPP_WEBHOOK_VERIFY_TOKEN configurado

    Returns:
        hub.challenge, ou "" se a Meta não enviou desafio

    Raises:
        WebhookChallengeError: "missing_verify_token" ou "verification_failed"
    """
    if not expected_token:
        raise WebhookChallengeError(
            "missing_verify_token",
            details={"config": "WHATSAPP_WEBHOOK_VERIFY_TOKEN"},
        )

    token_matches = hmac.compare_digest(
        (hub_verify_token or "").encode("utf-8"),
        expected_token.encode("utf-8"),
    )
    if hub_mode != SUBSCRIBE_MODE or not token_matches:
        raise WebhookChallengeError("verification_failed", details={"hub_mode": hub_mode})

    return hub_challenge or ""


def verify_webhook_query(query: Mapping[str, str], expected_token: str | None) -> str:
    """Mesmo que verify_webhook_challenge, lendo direto dos query params."""
    return verify_webhook_challenge(
        query.get("hub.mode"),
        query.get("hub.verify_token"),
        query.get("hub.challenge"),
        expected_token,
    )
