"""Configuração do pytest para o projeto whatsapp_business."""

from __future__ import annotations

import sys
from collections.abc import Callable
from pathlib import Path

import httpx
import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from whatsapp_business.api.connectors.whatsapp.http_client import (  # noqa: E402
    WhatsAppHttpClient,
)
from whatsapp_business.config.settings import WhatsAppSettings  # noqa: E402

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def whatsapp_settings() -> WhatsAppSettings:
    """Settings mínimos válidos para testes."""
    return WhatsAppSettings(
        phone_number_id="123456789",
        access_token="test-access-token",
        business_account_id="987654321",
        webhook_verify_token="verify-me",
    )


@pytest.fixture
def make_client(
    whatsapp_settings: WhatsAppSettings,
) -> Callable[[Handler], WhatsAppHttpClient]:
    """Cria WhatsAppHttpClient com httpx.MockTransport."""

    def _make(handler: Handler) -> WhatsAppHttpClient:
        return WhatsAppHttpClient(
            whatsapp_settings,
            transport=httpx.MockTransport(handler),
        )

    return _make
