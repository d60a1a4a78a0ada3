"""Relay de mídia: baixa o anexo do storage interno e reenvia ao provedor.

Passos (sem retry; política de retry é do host):
1. GET simples na URL do anexo (bytes sem transformação)
2. POST dos bytes no endpoint de upload com Content-Type original
3. Extração do media id em caminho JSON fixo
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from api.connectors.response_classifier import JsonPath, get_json_string
from app.protocols.http_transport import HttpRequest
from app.protocols.models import ChannelLog, FailureKind, SendFailure

if TYPE_CHECKING:
    from app.protocols.http_transport import HttpResult, HttpTransportProtocol

logger = logging.getLogger(__name__)

MEDIA_ID_PATH: JsonPath = ("media", 0, "id")


@dataclass(frozen=True, slots=True)
class MediaRelayResult:
    """Resultado do relay: media handle ou falha, mais os logs das chamadas."""

    media_id: str | None
    failure: SendFailure | None = None
    logs: tuple[ChannelLog, ...] = field(default_factory=tuple)


class MediaRelay:
    """Busca bytes de mídia e reenvia ao endpoint de upload do provedor."""

    def __init__(
        self,
        transport: HttpTransportProtocol,
        user_agent: str = "",
        media_id_path: JsonPath = MEDIA_ID_PATH,
    ) -> None:
        self._transport = transport
        self._user_agent = user_agent
        self._media_id_path = media_id_path

    async def relay(
        self,
        source_url: str,
        mime_type: str,
        upload_url: str,
        token: str,
    ) -> MediaRelayResult:
        """Executa fetch + upload e retorna o media id do provedor."""
        fetch_request = HttpRequest(method="GET", url=source_url)
        fetched = await self._transport.perform(fetch_request)
        fetch_log = _log("Media Fetch", fetch_request, fetched, log_response_body=False)

        if fetched.error is not None or not fetched.is_success_status:
            reason = fetched.error or f"unexpected status {fetched.status_code}"
            logger.warning("media_fetch_failed", extra={"status_code": fetched.status_code})
            return MediaRelayResult(
                media_id=None,
                failure=SendFailure(FailureKind.MEDIA_FETCH, f"media fetch failed: {reason}"),
                logs=(fetch_log,),
            )

        headers = {
            "Authorization": f"Bearer {token}",
            "Content-Type": mime_type,
        }
        if self._user_agent:
            headers["User-Agent"] = self._user_agent
        upload_request = HttpRequest(method="POST", url=upload_url, headers=headers, body=fetched.body)
        uploaded = await self._transport.perform(upload_request)
        upload_log = _log("Media Upload", upload_request, uploaded)
        logs = (fetch_log, upload_log)

        if uploaded.error is not None or not uploaded.is_success_status:
            reason = uploaded.error or f"unexpected status {uploaded.status_code}"
            logger.warning("media_upload_failed", extra={"status_code": uploaded.status_code})
            return MediaRelayResult(
                media_id=None,
                failure=SendFailure(FailureKind.MEDIA_UPLOAD, f"media upload failed: {reason}"),
                logs=logs,
            )

        media_id = _extract_media_id(uploaded.body, self._media_id_path)
        if not media_id:
            return MediaRelayResult(
                media_id=None,
                failure=SendFailure(
                    FailureKind.MALFORMED_UPLOAD_RESPONSE,
                    "malformed upload response: media id not found",
                ),
                logs=logs,
            )

        logger.debug("media_relayed", extra={"mime_type": mime_type, "size_bytes": len(fetched.body)})
        return MediaRelayResult(media_id=media_id, logs=logs)


def _extract_media_id(body: bytes, path: JsonPath) -> str | None:
    try:
        data = json.loads(body) if body else None
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None
    return get_json_string(data, path) or None


def _log(
    description: str,
    request: HttpRequest,
    result: HttpResult,
    log_response_body: bool = True,
) -> ChannelLog:
    # Corpos binários de mídia nunca vão para o log
    response_body = ""
    if log_response_body:
        response_body = result.body.decode("utf-8", errors="replace")
    return ChannelLog(
        description=description,
        method=request.method,
        url=request.url,
        status_code=result.status_code,
        response_body=response_body,
        elapsed_ms=result.elapsed_ms,
        error=result.error,
    )
