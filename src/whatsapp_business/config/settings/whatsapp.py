"""Settings do cliente WhatsApp.

Configurações do canal WhatsApp via Graph API, resolvidas uma vez por
instância de cliente e imutáveis depois disso.

Precedência (menor para maior): defaults -> variáveis de ambiente ->
overrides explícitos do chamador.
"""

from __future__ import annotations

import math
import os
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, fields, replace
from functools import lru_cache
from typing import Any

from whatsapp_business.utils.errors import ConfigurationError

# Constantes do Graph API
GRAPH_API_VERSION: str = "v17.0"
GRAPH_API_BASE_URL: str = "https://graph.facebook.com"

DEFAULT_MAX_RETRIES: int = 3
DEFAULT_RETRY_DELAY_MS: int = 1000
DEFAULT_REQUEST_TIMEOUT_SECONDS: float = 30.0

# Campo do dataclass -> variável de ambiente
ENV_VARS: dict[str, str] = {
    "phone_number_id": "WHATSAPP_PHONE_NUMBER_ID",
    "access_token": "WHATSAPP_ACCESS_TOKEN",
    "api_base_url": "WHATSAPP_BASE_URL",
    "api_version": "WHATSAPP_API_VERSION",
    "business_account_id": "WHATSAPP_BUSINESS_ACCOUNT_ID",
    "webhook_verify_token": "WHATSAPP_WEBHOOK_VERIFY_TOKEN",
    "max_retries": "WHATSAPP_MAX_RETRIES",
    "retry_delay_ms": "WHATSAPP_RETRY_DELAY_MS",
    "request_timeout_seconds": "WHATSAPP_REQUEST_TIMEOUT_SECONDS",
}

_REQUIRED_FIELDS = ("phone_number_id", "access_token")
_OPTIONAL_FIELDS = ("business_account_id", "webhook_verify_token")
_STRING_FIELDS = (
    "phone_number_id",
    "access_token",
    "api_base_url",
    "api_version",
    *_OPTIONAL_FIELDS,
)


@dataclass(frozen=True)
class WhatsAppSettings:
    """Configurações do cliente WhatsApp.

    Attributes:
        phone_number_id: ID do número de telefone no Meta Business
        access_token: Token de acesso à Graph API (segredo, fora do repr)
        api_base_url: URL base da Graph API
        api_version: Versão da Graph API (ex: v17.0)
        business_account_id: ID da conta de negócios (WABA)
        webhook_verify_token: Token para verificação de webhook (segredo)
        max_retries: Máximo de tentativas para um wrapper de retry externo
        retry_delay_ms: Intervalo entre tentativas, em milissegundos
        request_timeout_seconds: Timeout para requisições HTTP
    """

    # Credenciais
    phone_number_id: str = ""
    access_token: str = field(default="", repr=False)

    # API
    api_base_url: str = GRAPH_API_BASE_URL
    api_version: str = GRAPH_API_VERSION
    business_account_id: str | None = None
    webhook_verify_token: str | None = field(default=None, repr=False)

    # Timeouts e retries
    max_retries: int = DEFAULT_MAX_RETRIES
    retry_delay_ms: int = DEFAULT_RETRY_DELAY_MS
    request_timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS

    @property
    def api_endpoint(self) -> str:
        """URL base completa da API com versão."""
        return f"{self.api_base_url.rstrip('/')}/{self.api_version}"

    def get_messages_endpoint(self) -> str:
        """Retorna URL para envio de mensagens.

        Returns:
            URL completa no formato: https://graph.facebook.com/v17.0/{id}/messages
        """
        return f"{self.api_endpoint}/{self.phone_number_id}/messages"

    def get_media_endpoint(self) -> str:
        """Retorna URL para upload de mídia."""
        return f"{self.api_endpoint}/{self.phone_number_id}/media"

    def get_media_info_endpoint(self, media_id: str) -> str:
        """Retorna URL de metadados de uma mídia (sem query string)."""
        return f"{self.api_endpoint}/{media_id}"

    def validate(self) -> list[str]:
        """Valida configurações mínimas de WhatsApp.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        for name in _STRING_FIELDS:
            value = getattr(self, name)
            if value is None and name in _OPTIONAL_FIELDS:
                continue
            if not isinstance(value, str):
                errors.append(f"Invalid type for {ENV_VARS[name]}: must be a string")
            elif not value and name in _REQUIRED_FIELDS:
                errors.append(f"Missing required configuration: {ENV_VARS[name]}")

        for name in ("max_retries", "retry_delay_ms"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                errors.append(
                    f"Invalid type for {ENV_VARS[name]}: must be a positive integer"
                )

        timeout = self.request_timeout_seconds
        if (
            isinstance(timeout, bool)
            or not isinstance(timeout, (int, float))
            or not math.isfinite(timeout)
            or timeout <= 0
        ):
            errors.append(
                f"Invalid type for {ENV_VARS['request_timeout_seconds']}: "
                "must be a positive number"
            )

        return errors


def _parse_positive_int(raw: str) -> int:
    value = int(raw.strip())
    if value <= 0:
        raise ValueError("must be a positive integer")
    return value


def _parse_positive_float(raw: str) -> float:
    value = float(raw.strip())
    if not math.isfinite(value) or value <= 0:
        raise ValueError("must be a positive number")
    return value


_PARSERS: dict[str, Callable[[str], Any]] = {
    "max_retries": _parse_positive_int,
    "retry_delay_ms": _parse_positive_int,
    "request_timeout_seconds": _parse_positive_float,
}


def _read_env(
    env: Mapping[str, str],
) -> tuple[dict[str, Any], dict[str, str]]:
    """Lê valores do ambiente. Strings vazias contam como ausentes.

    Returns:
        (valores por campo, erros de parse por campo)
    """
    values: dict[str, Any] = {}
    errors: dict[str, str] = {}
    for name, key in ENV_VARS.items():
        raw = env.get(key)
        if raw is None or not raw.strip():
            continue
        parser = _PARSERS.get(name)
        if parser is None:
            values[name] = raw.strip()
            continue
        try:
            values[name] = parser(raw)
        except ValueError:
            expected = "a positive number" if parser is _parse_positive_float else "a positive integer"
            errors[name] = f"Invalid type for {key}: must be {expected}, got {raw!r}"
    return values, errors


def resolve_whatsapp_settings(
    env: Mapping[str, str] | None = None,
    **overrides: Any,
) -> WhatsAppSettings:
    """Resolve a configuração final a partir de defaults, ambiente e overrides.

    Todos os erros de campo são coletados e reportados juntos.

    Args:
        env: Mapeamento de variáveis de ambiente. Usa os.environ se None.
        **overrides: Valores explícitos por nome de campo (maior precedência).
            Overrides com valor None são ignorados.

    Returns:
        WhatsAppSettings validado e imutável.

    Raises:
        TypeError: Se um override não corresponde a nenhum campo.
        ConfigurationError: "Invalid configuration", com details["cause"]
            contendo uma linha por campo ausente/inválido.
    """
    known = {f.name for f in fields(WhatsAppSettings)}
    unknown = sorted(set(overrides) - known)
    if unknown:
        raise TypeError(f"Unknown configuration override(s): {', '.join(unknown)}")

    explicit = {k: v for k, v in overrides.items() if v is not None}
    values, env_errors = _read_env(os.environ if env is None else env)
    values.update(explicit)

    if isinstance(values.get("api_base_url"), str):
        values["api_base_url"] = values["api_base_url"].rstrip("/")

    settings = replace(WhatsAppSettings(), **values)

    # Override explícito substitui o valor malformado do ambiente
    errors = [msg for name, msg in env_errors.items() if name not in explicit]
    errors.extend(settings.validate())

    if errors:
        raise ConfigurationError(
            "Invalid configuration",
            details={"cause": "\n".join(errors), "errors": errors},
        )
    return settings


@lru_cache(maxsize=1)
def get_whatsapp_settings() -> WhatsAppSettings:
    """Retorna instância cacheada resolvida a partir do ambiente.

    A cache garante singleton para múltiplas injeções.
    """
    return resolve_whatsapp_settings()
