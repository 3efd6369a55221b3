"""Exceções compartilhadas do cliente WhatsApp Business."""

from .exceptions import (
    ApiError,
    ConfigurationError,
    ValidationError,
    WhatsAppClientError,
)

__all__ = [
    "ApiError",
    "ConfigurationError",
    "ValidationError",
    "WhatsAppClientError",
]
