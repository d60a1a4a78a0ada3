"""Testes para o relay de mídia (fetch + upload)."""

from __future__ import annotations

import pytest

from api.connectors.media_relay import MediaRelay
from app.protocols.http_transport import HttpResult
from app.protocols.models import FailureKind
from fakes.fake_transport import FakeTransport, error_result, json_result

SOURCE_URL = "https://storage.example.com/attachments/sound.ogg"
UPLOAD_URL = "https://foo.bar/v1/media"


@pytest.mark.asyncio
async def test_relay_success() -> None:
    transport = FakeTransport(
        HttpResult(status_code=200, body=b"\x00\x01binary"),
        json_result({"media": [{"id": "f043afd0-f0ae-4b9c-ab3d-696fb4c8cd68"}]}),
    )
    relay = MediaRelay(transport, user_agent="PonteMensageria/1.0")

    result = await relay.relay(SOURCE_URL, "audio/ogg", UPLOAD_URL, "the-auth-token")

    assert result.failure is None
    assert result.media_id == "f043afd0-f0ae-4b9c-ab3d-696fb4c8cd68"
    fetch, upload = transport.requests
    assert fetch.method == "GET"
    assert fetch.url == SOURCE_URL
    assert upload.method == "POST"
    assert upload.url == UPLOAD_URL
    assert upload.body == b"\x00\x01binary"
    assert upload.headers["Content-Type"] == "audio/ogg"
    assert upload.headers["Authorization"] == "Bearer the-auth-token"
    assert upload.headers["User-Agent"] == "PonteMensageria/1.0"
    assert [log.description for log in result.logs] == ["Media Fetch", "Media Upload"]
    # Bytes de mídia nunca vão para o log
    assert result.logs[0].response_body == ""


@pytest.mark.asyncio
async def test_fetch_transport_error() -> None:
    transport = FakeTransport(error_result("ConnectError: refused"))

    result = await MediaRelay(transport).relay(SOURCE_URL, "audio/ogg", UPLOAD_URL, "t")

    assert result.media_id is None
    assert result.failure.kind is FailureKind.MEDIA_FETCH
    assert "ConnectError" in result.failure.message
    assert len(transport.requests) == 1


@pytest.mark.asyncio
async def test_fetch_non_2xx() -> None:
    transport = FakeTransport(HttpResult(status_code=404, body=b"not found"))

    result = await MediaRelay(transport).relay(SOURCE_URL, "audio/ogg", UPLOAD_URL, "t")

    assert result.failure.kind is FailureKind.MEDIA_FETCH
    assert result.failure.is_retryable


@pytest.mark.asyncio
async def test_upload_failure() -> None:
    transport = FakeTransport(
        HttpResult(status_code=200, body=b"bytes"),
        HttpResult(status_code=500, body=b"oops"),
    )

    result = await MediaRelay(transport).relay(SOURCE_URL, "image/jpeg", UPLOAD_URL, "t")

    assert result.failure.kind is FailureKind.MEDIA_UPLOAD
    assert len(result.logs) == 2


@pytest.mark.asyncio
async def test_upload_without_media_id() -> None:
    transport = FakeTransport(
        HttpResult(status_code=200, body=b"bytes"),
        json_result({"media": []}),
    )

    result = await MediaRelay(transport).relay(SOURCE_URL, "image/jpeg", UPLOAD_URL, "t")

    assert result.failure.kind is FailureKind.MALFORMED_UPLOAD_RESPONSE
    assert not result.failure.is_retryable
