"""Factory de wiring para WhatsApp (bootstrap).

Injeção por construtor: settings resolvidos -> cliente HTTP -> serviço.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from whatsapp_business.api.connectors.whatsapp.http_client import (
    create_whatsapp_http_client,
)
from whatsapp_business.app.services.whatsapp_service import WhatsAppService
from whatsapp_business.config.settings import resolve_whatsapp_settings

if TYPE_CHECKING:
    import httpx

    from whatsapp_business.config.settings import WhatsAppSettings


def create_whatsapp_service(
    settings: WhatsAppSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> WhatsAppService:
    """Cria serviço com cliente HTTP injetado.

    Args:
        settings: Configuração resolvida. Se None, resolve do ambiente.
        transport: Transport httpx opcional.

    Raises:
        ConfigurationError: Se a configuração do ambiente for inválida.
    """
    return WhatsAppService(create_whatsapp_http_client(settings, transport=transport))


def create_whatsapp_service_from_overrides(**overrides: Any) -> WhatsAppService:
    """Resolve settings (defaults -> ambiente -> overrides) e cria o serviço."""
    return create_whatsapp_service(resolve_whatsapp_settings(**overrides))
