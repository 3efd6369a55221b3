"""Cliente HTTP base para conectores da camada API.

Cada chamada abre e fecha o próprio httpx.AsyncClient: não há estado
compartilhado entre requisições. Falhas de transporte viram ApiError
com status 500 e a exceção subjacente como causa.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import httpx

from whatsapp_business.api.connectors.whatsapp.meta_logging import log_transport_error
from whatsapp_business.utils.errors import ApiError

TRANSPORT_ERROR_STATUS = 500
INVALID_URL_ENDPOINT = "<invalid-url>"


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 30.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


class HttpClient:
    """Cliente HTTP simples para chamadas externas.

    Args:
        config: Configuração HTTP
        transport: Transport httpx opcional (ex: httpx.MockTransport em testes)
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._transport = transport

    async def send(
        self,
        method: str,
        url: str,
        headers: dict[str, str] | None = None,
        **kwargs: Any,
    ) -> httpx.Response:
        """Executa uma requisição e devolve a resposta com corpo já lido.

        Raises:
            ApiError: status 500 se a chamada ou a leitura do corpo falhar
        """
        merged_headers = {**self._config.default_headers, **(headers or {})}
        try:
            async with httpx.AsyncClient(
                transport=self._transport,
                verify=self._config.verify_ssl,
                timeout=self._config.timeout_seconds,
            ) as client:
                return await client.request(method, url, headers=merged_headers, **kwargs)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            log_transport_error(exc, method, endpoint_for_log(url))
            raise ApiError(
                TRANSPORT_ERROR_STATUS,
                f"Request failed: {exc}",
                details={"method": method, "error_type": type(exc).__name__},
                cause=exc,
            ) from exc


def endpoint_for_log(url: str) -> str:
    """Host + path, sem query string (URLs de mídia carregam assinatura)."""
    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL:
        return INVALID_URL_ENDPOINT
    return f"{parsed.host}{parsed.path}"
