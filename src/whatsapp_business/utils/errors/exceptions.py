"""Exceções de domínio do cliente WhatsApp Business.

Taxonomia fechada:
- ValidationError: dado do chamador viola regra de formato/tamanho
- ConfigurationError: configuração ausente ou malformada
- ApiError: API remota rejeitou a chamada ou o transporte falhou

Todas carregam mensagem legível e `details` estruturado, suficientes
para logar a causa raiz sem inspecionar internals.
"""

from __future__ import annotations

from typing import Any


class WhatsAppClientError(Exception):
    """Base para todos os erros do cliente."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details: dict[str, Any] = dict(details or {})

    def __repr__(self) -> str:
        return f"{type(self).__name__}(message={self.message!r}, details={self.details!r})"


class ValidationError(WhatsAppClientError):
    """Dado fornecido pelo chamador falhou em regra de formato."""


class ConfigurationError(WhatsAppClientError):
    """Configuração incompleta ou inválida (fatal para criar o cliente)."""


class ApiError(WhatsAppClientError):
    """Falha HTTP da Graph API ou do transporte.

    Attributes:
        status_code: Status HTTP de origem (500 para falha de transporte)
        cause: Exceção subjacente, quando houver
    """

    def __init__(
        self,
        status_code: int,
        message: str | None = None,
        details: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(
            message or f"API request failed with status {status_code}",
            details,
        )
        self.status_code = status_code
        self.cause = cause

    @property
    def error_code(self) -> int | None:
        """Código Meta (`error.code`) do envelope, se presente."""
        error_obj = self.details.get("error")
        if isinstance(error_obj, dict):
            code = error_obj.get("code")
            return code if isinstance(code, int) else None
        return None

    @property
    def error_type(self) -> str | None:
        """Tipo Meta (`error.type`) do envelope, se presente."""
        error_obj = self.details.get("error")
        if isinstance(error_obj, dict):
            return error_obj.get("type")
        return None

    @property
    def is_retryable(self) -> bool:
        """True se o chamador pode tentar novamente (429, 5xx, transitórios)."""
        from whatsapp_business.api.connectors.whatsapp.meta_errors import is_permanent_error

        if self.status_code == 429 or self.status_code >= 500:
            return True
        return not is_permanent_error(
            self.status_code,
            self.error_type or "",
            self.error_code,
        )

    def __repr__(self) -> str:
        return (
            f"ApiError(status_code={self.status_code}, message={self.message!r}, "
            f"details={self.details!r})"
        )
