"""Protocolos usados pelo dispatcher outbound.

Cada canal fornece um SendProfile com suas regras de wire
(endpoints, payloads, classificação da resposta).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from .http_transport import HttpResult
    from .models import ChannelLog, OutgoingMessage, SendFailure, SendResult


@dataclass(frozen=True, slots=True)
class SendContext:
    """Credenciais e endpoints resolvidos antes de qualquer chamada de rede."""

    token: str
    send_url: str
    media_url: str | None = None


class SendProfileProtocol(Protocol):
    """Regras de envio específicas de um tipo de canal."""

    def prepare(self, msg: OutgoingMessage) -> SendContext:
        """Valida config do canal. Levanta ConfigurationError sem tocar a rede."""
        ...

    def accepts_media(self, mime_type: str) -> bool: ...

    def message_url(self, context: SendContext, msg: OutgoingMessage) -> str: ...

    def text_payload(self, msg: OutgoingMessage, segment: str) -> dict[str, Any]: ...

    def media_payload(self, msg: OutgoingMessage, mime_type: str, media_id: str) -> dict[str, Any]: ...

    def classify(self, result: HttpResult) -> SendResult: ...


class MediaRelayResultProtocol(Protocol):
    media_id: str | None
    failure: SendFailure | None
    logs: tuple[ChannelLog, ...]


class MediaRelayProtocol(Protocol):
    """Contrato do relay de mídia (fetch + upload)."""

    async def relay(
        self,
        source_url: str,
        mime_type: str,
        upload_url: str,
        token: str,
    ) -> MediaRelayResultProtocol: ...
