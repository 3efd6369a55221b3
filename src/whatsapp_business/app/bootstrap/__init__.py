"""Wiring de dependências (settings -> cliente -> serviço)."""

from whatsapp_business.app.bootstrap.whatsapp_factory import (
    create_whatsapp_service,
    create_whatsapp_service_from_overrides,
)

__all__ = [
    "create_whatsapp_service",
    "create_whatsapp_service_from_overrides",
]
