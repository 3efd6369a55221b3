"""Testes para WhatsAppHttpClient com httpx.MockTransport.

Cobre: envio de mensagens, upload, metadados e download de mídia,
mapeamento de erros HTTP/transporte e validação antes do IO.
"""

from __future__ import annotations

import json
from typing import Any

import httpx
import pytest

from whatsapp_business.api.connectors.whatsapp.http_base import (
    INVALID_URL_ENDPOINT,
    endpoint_for_log,
)
from whatsapp_business.api.connectors.whatsapp.http_client import (
    WhatsAppHttpClient,
    create_whatsapp_http_client,
)
from whatsapp_business.api.connectors.whatsapp.models import (
    MediaInfoResponse,
    MediaUploadResponse,
    MessageResponse,
)
from whatsapp_business.config.settings import WhatsAppSettings
from whatsapp_business.utils.errors import ApiError, ValidationError

MESSAGE_OK: dict[str, Any] = {
    "messaging_product": "whatsapp",
    "contacts": [{"input": "5215551234567", "wa_id": "5215551234567"}],
    "messages": [{"id": "wamid.HBgM123"}],
}

MEDIA_INFO_OK: dict[str, Any] = {
    "messaging_product": "whatsapp",
    "url": "https://lookaside.fbsbx.com/whatsapp_business/attachments/?mid=1&hash=abc",
    "mime_type": "image/jpeg",
    "sha256": "deadbeef",
    "file_size": 2048,
    "id": "media-1",
}


class Recorder:
    """Handler que grava requests e devolve respostas pré-definidas."""

    def __init__(self, response: httpx.Response) -> None:
        self._response = response
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._response

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


class TestSendMessage:
    """Testes de POST /{phone_number_id}/messages."""

    @pytest.mark.asyncio
    async def test_send_text_message_success(self, make_client) -> None:
        recorder = Recorder(httpx.Response(200, json=MESSAGE_OK))
        client: WhatsAppHttpClient = make_client(recorder)

        result = await client.send_text_message("5215551234567", "Hello")

        assert isinstance(result, MessageResponse)
        assert result.message_id == "wamid.HBgM123"
        assert result.contacts[0].wa_id == "5215551234567"

        request = recorder.last
        assert request.method == "POST"
        assert str(request.url) == "https://graph.facebook.com/v17.0/123456789/messages"
        assert request.headers["Authorization"] == "Bearer test-access-token"
        assert request.headers["Content-Type"] == "application/json"
        assert json.loads(request.content) == {
            "messaging_product": "whatsapp",
            "recipient_type": "individual",
            "to": "5215551234567",
            "type": "text",
            "text": {"body": "Hello", "preview_url": False},
        }

    @pytest.mark.asyncio
    async def test_send_image_message_success(self, make_client) -> None:
        recorder = Recorder(httpx.Response(200, json=MESSAGE_OK))
        client = make_client(recorder)

        await client.send_image_message("5215551234567", "media-1", "Legenda")

        body = json.loads(recorder.last.content)
        assert body["type"] == "image"
        assert body["image"] == {"id": "media-1", "caption": "Legenda"}

    @pytest.mark.asyncio
    async def test_validation_happens_before_network(self, make_client) -> None:
        recorder = Recorder(httpx.Response(200, json=MESSAGE_OK))
        client = make_client(recorder)

        with pytest.raises(ValidationError):
            await client.send_text_message("invalid", "Hello")
        with pytest.raises(ValidationError):
            await client.send_image_message("5215551234567", "media-1", "")

        assert recorder.requests == []

    @pytest.mark.asyncio
    async def test_unexpected_success_shape_raises_api_error(self, make_client) -> None:
        client = make_client(Recorder(httpx.Response(200, json={"ok": True})))

        with pytest.raises(ApiError) as exc_info:
            await client.send_message({"messaging_product": "whatsapp"})

        assert exc_info.value.status_code == 200
        assert exc_info.value.message.startswith("Invalid response format:")
        assert exc_info.value.details == {"response": {"ok": True}}


class TestErrorMapping:
    """Testes do mapeamento de falhas para ApiError."""

    @pytest.mark.asyncio
    async def test_meta_error_envelope_is_preserved(self, make_client) -> None:
        envelope = {
            "error": {"message": "Invalid OAuth", "type": "OAuthException", "code": 190}
        }
        client = make_client(Recorder(httpx.Response(401, json=envelope)))

        with pytest.raises(ApiError) as exc_info:
            await client.send_text_message("5215551234567", "Hello")

        err = exc_info.value
        assert err.status_code == 401
        assert err.message == "Invalid OAuth"
        assert err.details == envelope
        assert err.error_code == 190
        assert err.error_type == "OAuthException"
        assert err.is_retryable is False

    @pytest.mark.asyncio
    async def test_non_json_error_body_is_synthesized(self, make_client) -> None:
        client = make_client(Recorder(httpx.Response(502, text="Bad Gateway")))

        with pytest.raises(ApiError) as exc_info:
            await client.get_media_info("media-1")

        err = exc_info.value
        assert err.status_code == 502
        assert err.message == "Bad Gateway"
        assert err.details == {
            "error": {"message": "Bad Gateway", "type": "unknown", "code": 502}
        }
        assert err.is_retryable is True

    @pytest.mark.asyncio
    async def test_empty_error_body_uses_default_message(self, make_client) -> None:
        client = make_client(Recorder(httpx.Response(404)))

        with pytest.raises(ApiError) as exc_info:
            await client.get_media_info("missing")

        assert exc_info.value.message == "Unknown API error"
        assert exc_info.value.details["error"]["code"] == 404

    @pytest.mark.asyncio
    async def test_transport_failure_maps_to_500(self, make_client) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = make_client(handler)

        with pytest.raises(ApiError) as exc_info:
            await client.send_text_message("5215551234567", "Hello")

        err = exc_info.value
        assert err.status_code == 500
        assert isinstance(err.cause, httpx.ConnectError)
        assert err.__cause__ is err.cause
        assert "connection refused" in err.message

    @pytest.mark.asyncio
    async def test_malformed_url_maps_to_500(self, make_client) -> None:
        recorder = Recorder(httpx.Response(200, content=b"unused"))
        client = make_client(recorder)

        with pytest.raises(ApiError) as exc_info:
            await client.download_media("https://[::1")

        err = exc_info.value
        assert err.status_code == 500
        assert isinstance(err.cause, httpx.InvalidURL)
        assert err.details["error_type"] == "InvalidURL"
        assert recorder.requests == []

    def test_endpoint_for_log_tolerates_malformed_url(self) -> None:
        assert endpoint_for_log("https://[::1") == INVALID_URL_ENDPOINT
        assert (
            endpoint_for_log("https://lookaside.fbsbx.com/media?hash=abc")
            == "lookaside.fbsbx.com/media"
        )

    @pytest.mark.asyncio
    async def test_timeout_maps_to_500(self, make_client) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        client = make_client(handler)

        with pytest.raises(ApiError) as exc_info:
            await client.download_media("https://cdn.example.com/file")

        assert exc_info.value.status_code == 500
        assert exc_info.value.details["error_type"] == "ReadTimeout"


class TestGenericRequest:
    """Testes de request(): JSON, texto bruto e erros."""

    @pytest.mark.asyncio
    async def test_json_body_is_parsed(self, make_client) -> None:
        client = make_client(Recorder(httpx.Response(200, json={"success": True})))
        result = await client.request("GET", "https://graph.facebook.com/v17.0/me")
        assert result == {"success": True}

    @pytest.mark.asyncio
    async def test_non_json_body_returned_as_text(self, make_client) -> None:
        client = make_client(Recorder(httpx.Response(200, text="OK")))
        result = await client.request("GET", "https://graph.facebook.com/v17.0/me")
        assert result == "OK"


class TestMediaOperations:
    """Testes de upload, metadados e download de mídia."""

    @pytest.mark.asyncio
    async def test_upload_media_sends_multipart(self, make_client) -> None:
        recorder = Recorder(httpx.Response(200, json={"id": "media-42"}))
        client = make_client(recorder)

        result = await client.upload_media(b"\xff\xd8\xffimage", "image/jpeg", "photo.jpg")

        assert isinstance(result, MediaUploadResponse)
        assert result.id == "media-42"

        request = recorder.last
        assert str(request.url) == "https://graph.facebook.com/v17.0/123456789/media"
        assert request.headers["Authorization"] == "Bearer test-access-token"
        assert request.headers["Content-Type"].startswith("multipart/form-data")
        assert b'name="messaging_product"' in request.content
        assert b'name="type"' in request.content
        assert b"image/jpeg" in request.content
        assert b'filename="photo.jpg"' in request.content
        assert b"\xff\xd8\xffimage" in request.content

    @pytest.mark.asyncio
    async def test_upload_media_rejects_empty_input(self, make_client) -> None:
        recorder = Recorder(httpx.Response(200, json={"id": "x"}))
        client = make_client(recorder)

        with pytest.raises(ValidationError, match="Media content cannot be empty"):
            await client.upload_media(b"", "image/jpeg")
        with pytest.raises(ValidationError, match="Media MIME type is required"):
            await client.upload_media(b"data", " ")

        assert recorder.requests == []

    @pytest.mark.asyncio
    async def test_get_media_info(self, make_client) -> None:
        recorder = Recorder(httpx.Response(200, json=MEDIA_INFO_OK))
        client = make_client(recorder)

        result = await client.get_media_info("media-1")

        assert isinstance(result, MediaInfoResponse)
        assert result.file_size == 2048
        assert result.mime_type == "image/jpeg"

        request = recorder.last
        assert request.method == "GET"
        assert request.url.path == "/v17.0/media-1"
        assert request.url.params["phone_number_id"] == "123456789"

    @pytest.mark.asyncio
    async def test_download_media_returns_bytes(self, make_client) -> None:
        recorder = Recorder(httpx.Response(200, content=b"\x89PNG\r\n"))
        client = make_client(recorder)

        content = await client.download_media(MEDIA_INFO_OK["url"])

        assert content == b"\x89PNG\r\n"
        request = recorder.last
        assert str(request.url) == MEDIA_INFO_OK["url"]
        assert request.headers["Authorization"] == "Bearer test-access-token"
        assert "Content-Type" not in request.headers

    @pytest.mark.asyncio
    async def test_download_media_error_status(self, make_client) -> None:
        client = make_client(Recorder(httpx.Response(403, text="Forbidden")))

        with pytest.raises(ApiError) as exc_info:
            await client.download_media(MEDIA_INFO_OK["url"])

        assert exc_info.value.status_code == 403


class TestFactory:
    """Testes de create_whatsapp_http_client."""

    def test_factory_uses_given_settings(self, whatsapp_settings: WhatsAppSettings) -> None:
        client = create_whatsapp_http_client(whatsapp_settings)
        assert client.settings is whatsapp_settings

    @pytest.mark.asyncio
    async def test_custom_base_url_and_version(self) -> None:
        settings = WhatsAppSettings(
            phone_number_id="555",
            access_token="tok",
            api_base_url="http://localhost:8080",
            api_version="v21.0",
        )
        recorder = Recorder(httpx.Response(200, json=MESSAGE_OK))
        client = create_whatsapp_http_client(settings, transport=httpx.MockTransport(recorder))

        await client.send_text_message("5215551234567", "Hi")

        assert str(recorder.last.url) == "http://localhost:8080/v21.0/555/messages"
