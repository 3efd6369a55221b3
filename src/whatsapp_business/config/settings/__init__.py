"""Configuração do cliente: defaults -> ambiente (WHATSAPP_*) -> overrides."""

from whatsapp_business.config.settings.whatsapp import (
    ENV_VARS,
    GRAPH_API_BASE_URL,
    GRAPH_API_VERSION,
    WhatsAppSettings,
    get_whatsapp_settings,
    resolve_whatsapp_settings,
)

__all__ = [
    "ENV_VARS",
    "GRAPH_API_BASE_URL",
    "GRAPH_API_VERSION",
    "WhatsAppSettings",
    "get_whatsapp_settings",
    "resolve_whatsapp_settings",
]
