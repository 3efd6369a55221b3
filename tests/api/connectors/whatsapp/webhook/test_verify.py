"""Testes para verify_webhook_challenge."""

from __future__ import annotations

import pytest

from whatsapp_business.api.connectors.whatsapp.webhook import (
    WebhookChallengeError,
    verify_webhook_challenge,
    verify_webhook_query,
)
from whatsapp_business.utils.errors import ValidationError


class TestVerifyWebhookChallenge:
    """Handshake hub.mode/hub.verify_token/hub.challenge."""

    def test_valid_challenge_returns_challenge(self) -> None:
        assert verify_webhook_challenge("subscribe", "secret", "1158201444", "secret") == "1158201444"

    def test_missing_challenge_returns_empty(self) -> None:
        assert verify_webhook_challenge("subscribe", "secret", None, "secret") == ""

    def test_missing_expected_token_raises(self) -> None:
        with pytest.raises(WebhookChallengeError, match="missing_verify_token") as exc_info:
            verify_webhook_challenge("subscribe", "secret", "123", None)
        assert exc_info.value.details == {"config": "WHATSAPP_WEBHOOK_VERIFY_TOKEN"}

    @pytest.mark.parametrize(
        ("mode", "token"),
        [
            ("subscribe", "wrong"),
            ("subscribe", None),
            ("unsubscribe", "secret"),
            (None, "secret"),
        ],
    )
    def test_verification_failed(self, mode: str | None, token: str | None) -> None:
        with pytest.raises(WebhookChallengeError, match="verification_failed"):
            verify_webhook_challenge(mode, token, "123", "secret")

    def test_error_is_validation_error(self) -> None:
        assert issubclass(WebhookChallengeError, ValidationError)


class TestVerifyWebhookQuery:
    """Leitura direta dos query params hub.*."""

    def test_query_mapping(self) -> None:
        query = {"hub.mode": "subscribe", "hub.verify_token": "secret", "hub.challenge": "42"}
        assert verify_webhook_query(query, "secret") == "42"

    def test_query_missing_params(self) -> None:
        with pytest.raises(WebhookChallengeError, match="verification_failed"):
            verify_webhook_query({}, "secret")
