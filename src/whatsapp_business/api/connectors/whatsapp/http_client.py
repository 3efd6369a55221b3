"""Cliente HTTP especializado para WhatsApp/Meta API.

Estende HttpClient genérico com comportamentos específicos de WhatsApp:
- Headers de autenticação Bearer
- Validação dos payloads antes de qualquer IO
- Tratamento de erros Meta (envelope {"error": {...}}) como ApiError
- Validação de response contra modelos tipados
- Logging estruturado sem PII (tokens, números, textos)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from whatsapp_business.api.connectors.whatsapp.http_base import (
    HttpClient,
    HttpClientConfig,
    endpoint_for_log,
)
from whatsapp_business.api.connectors.whatsapp.meta_errors import parse_error_envelope
from whatsapp_business.api.connectors.whatsapp.meta_logging import log_api_error, log_success
from whatsapp_business.api.connectors.whatsapp.models import (
    MediaInfoResponse,
    MediaUploadResponse,
    MessageResponse,
)
from whatsapp_business.api.payload_builders.whatsapp import (
    build_image_message,
    build_text_message,
)
from whatsapp_business.app.constants.whatsapp import MESSAGING_PRODUCT
from whatsapp_business.config.settings import get_whatsapp_settings
from whatsapp_business.utils.errors import ApiError, ValidationError

if TYPE_CHECKING:
    import httpx

    from whatsapp_business.config.settings import WhatsAppSettings

logger: logging.Logger = logging.getLogger(__name__)

_ModelT = TypeVar("_ModelT", bound=BaseModel)


class WhatsAppHttpClient(HttpClient):
    """Cliente HTTP especializado para Meta/WhatsApp API.

    Cada método faz exatamente uma requisição; não há retry interno.
    `settings.max_retries` e `settings.retry_delay_ms` ficam disponíveis
    para um wrapper do chamador (ver ApiError.is_retryable).
    """

    def __init__(
        self,
        settings: WhatsAppSettings,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Inicializa cliente WhatsApp.

        Args:
            settings: Configuração resolvida (imutável)
            config: Configuração HTTP base. Usa o timeout dos settings se None.
            transport: Transport httpx opcional (testes)
        """
        super().__init__(
            config or HttpClientConfig(timeout_seconds=settings.request_timeout_seconds),
            transport=transport,
        )
        self._settings = settings

    @property
    def settings(self) -> WhatsAppSettings:
        return self._settings

    def _auth_headers(self, include_content_type: bool = True) -> dict[str, str]:
        headers = {"Authorization": f"Bearer {self._settings.access_token}"}
        if include_content_type:
            headers["Content-Type"] = "application/json"
        return headers

    async def request(
        self,
        method: str,
        url: str,
        *,
        headers: dict[str, str] | None = None,
        **kwargs: Any,
    ) -> Any:
        """Executa uma troca HTTP com a API e traduz o resultado.

        Returns:
            JSON parseado para 2xx com corpo JSON; texto bruto para 2xx
            com corpo não-JSON.

        Raises:
            ApiError: status não-2xx (com envelope de erro em details) ou
                falha de transporte (status 500)
        """
        response = await self._exchange(method, url, headers=headers, **kwargs)
        return _decode_body(response)

    async def _exchange(
        self,
        method: str,
        url: str,
        *,
        headers: dict[str, str] | None = None,
        **kwargs: Any,
    ) -> httpx.Response:
        response = await self.send(
            method,
            url,
            headers=headers if headers is not None else self._auth_headers(),
            **kwargs,
        )
        endpoint = endpoint_for_log(url)
        if not response.is_success:
            self._raise_api_error(response, method, endpoint)
        log_success(method, endpoint, response.status_code)
        return response

    def _raise_api_error(
        self,
        response: httpx.Response,
        method: str,
        endpoint: str,
    ) -> None:
        envelope = parse_error_envelope(response.status_code, response.text)
        error = ApiError(
            response.status_code,
            envelope["error"].get("message"),
            details=envelope,
        )
        log_api_error(error, method, endpoint)
        raise error

    async def send_message(self, payload: dict[str, Any]) -> MessageResponse:
        """Envia payload já construído por um builder.

        Args:
            payload: Payload JSON da mensagem (ver payload_builders)

        Returns:
            Resposta tipada com contatos e ID da mensagem
        """
        response = await self._exchange(
            "POST",
            self._settings.get_messages_endpoint(),
            json=payload,
        )
        return _parse_model(MessageResponse, response)

    async def send_text_message(
        self,
        to: str,
        text: str,
        preview_url: bool = False,
    ) -> MessageResponse:
        """Valida, constrói e envia mensagem de texto.

        Raises:
            ValidationError: antes de qualquer chamada de rede
            ApiError: se a API rejeitar ou o transporte falhar
        """
        return await self.send_message(build_text_message(to, text, preview_url))

    async def send_image_message(
        self,
        to: str,
        media_id_or_url: str,
        caption: str | None = None,
    ) -> MessageResponse:
        """Valida, constrói e envia mensagem de imagem."""
        return await self.send_message(build_image_message(to, media_id_or_url, caption))

    async def upload_media(
        self,
        content: bytes,
        mime_type: str,
        filename: str = "file",
    ) -> MediaUploadResponse:
        """Faz upload multipart de mídia.

        Args:
            content: Bytes do arquivo
            mime_type: MIME type (ex: image/jpeg)
            filename: Nome enviado na parte `file`

        Returns:
            Resposta com o media id

        Raises:
            ValidationError: Se conteúdo ou MIME type vazios
        """
        if not content:
            raise ValidationError("Media content cannot be empty", details={"size": 0})
        if not mime_type or not mime_type.strip():
            raise ValidationError("Media MIME type is required", details={"mime_type": mime_type})

        response = await self._exchange(
            "POST",
            self._settings.get_media_endpoint(),
            # httpx define o Content-Type multipart com boundary
            headers=self._auth_headers(include_content_type=False),
            data={"messaging_product": MESSAGING_PRODUCT, "type": mime_type},
            files={"file": (filename, content, mime_type)},
        )
        logger.info(
            "whatsapp_media_uploaded",
            extra={"mime_type": mime_type, "size_bytes": len(content)},
        )
        return _parse_model(MediaUploadResponse, response)

    async def get_media_info(self, media_id: str) -> MediaInfoResponse:
        """Obtém metadados (URL temporária, MIME, hash, tamanho) de uma mídia."""
        response = await self._exchange(
            "GET",
            self._settings.get_media_info_endpoint(media_id),
            params={"phone_number_id": self._settings.phone_number_id},
        )
        return _parse_model(MediaInfoResponse, response)

    async def download_media(self, media_url: str) -> bytes:
        """Baixa os bytes de uma mídia pela URL retornada em get_media_info.

        Envia apenas o header Authorization.
        """
        response = await self._exchange(
            "GET",
            media_url,
            headers=self._auth_headers(include_content_type=False),
        )
        return response.content


def _decode_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


def _parse_model(model: type[_ModelT], response: httpx.Response) -> _ModelT:
    """Valida corpo 2xx contra o modelo; formato divergente vira ApiError."""
    body = _decode_body(response)
    try:
        return model.model_validate(body)
    except PydanticValidationError as exc:
        summary = "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or '<root>'}: {err['msg']}"
            for err in exc.errors()
        )
        raise ApiError(
            response.status_code,
            f"Invalid response format: {summary}",
            details={"response": body},
            cause=exc,
        ) from exc


def create_whatsapp_http_client(
    settings: WhatsAppSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> WhatsAppHttpClient:
    """Factory para criar cliente WhatsApp com config padrão.

    Args:
        settings: WhatsAppSettings opcional. Se None, resolve do ambiente.
        transport: Transport httpx opcional.

    Returns:
        Cliente HTTP configurado para WhatsApp.

    Raises:
        ConfigurationError: Se settings ausentes e o ambiente for inválido.
    """
    return WhatsAppHttpClient(settings or get_whatsapp_settings(), transport=transport)
