"""Normalizer WhatsApp: converte lote de webhook em eventos canônicos.

Regras:
- Mensagens e statuses são processados de forma independente e os
  eventos resultantes seguem a ordem de encontro (mensagens primeiro).
- Qualquer erro de identidade ou timestamp aborta o lote inteiro.
- Tipo de conteúdo não suportado gera mensagem com corpo vazio.
- Status desconhecido vira InboundNotice (aceito, mas ignorado).
- Mídia não é baixada aqui: apenas a URL diferida é resolvida.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors.endpoints import resolve_endpoint
from api.normalizers.common import MessageKind, TimestampEncoding, new_urn, parse_timestamp
from app.protocols.models import (
    CONFIG_AUTH_TOKEN,
    CONFIG_BASE_URL,
    IncomingMessage,
    InboundNotice,
    MsgStatus,
    StatusUpdate,
)
from utils.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Callable

    from app.protocols.models import Channel, InboundEvent

    from .payload import WhatsAppEventPayload, WhatsAppMedia, WhatsAppMessage

logger = logging.getLogger(__name__)

URN_SCHEME = "whatsapp"
MEDIA_PATH = "/v1/media"

STATUS_MAPPING: dict[str, MsgStatus] = {
    "sending": MsgStatus.WIRED,
    "sent": MsgStatus.SENT,
    "delivered": MsgStatus.DELIVERED,
    "read": MsgStatus.DELIVERED,
    "failed": MsgStatus.FAILED,
}

# (texto, anexo) extraídos de uma mensagem
Content = tuple[str, str | None]


def resolve_media_url(channel: Channel, media_id: str) -> str:
    """Monta a URL diferida de mídia: <base_url>/v1/media/<media_id>.

    Raises:
        ConfigurationError: Se token ou base_url do canal estiverem ausentes
    """
    channel.require_config(CONFIG_AUTH_TOKEN)
    media_endpoint = resolve_endpoint(channel.string_config(CONFIG_BASE_URL), MEDIA_PATH)
    return f"{media_endpoint}/{media_id}"


class WhatsAppNormalizer:
    """Normalizer do lote {messages, statuses} do WhatsApp."""

    def __init__(self) -> None:
        self._content_handlers: dict[
            MessageKind, Callable[[Channel, WhatsAppMessage], Content]
        ] = {
            MessageKind.TEXT: self._text_content,
            MessageKind.AUDIO: lambda ch, msg: self._media_content(ch, msg.audio),
            MessageKind.DOCUMENT: lambda ch, msg: self._media_content(ch, msg.document, caption=True),
            MessageKind.IMAGE: lambda ch, msg: self._media_content(ch, msg.image, caption=True),
            MessageKind.LOCATION: self._location_content,
            MessageKind.VIDEO: lambda ch, msg: self._media_content(ch, msg.video),
            MessageKind.VOICE: lambda ch, msg: self._media_content(ch, msg.voice),
            MessageKind.UNSUPPORTED: self._unsupported_content,
        }

    @property
    def supported_kinds(self) -> frozenset[MessageKind]:
        return frozenset(self._content_handlers)

    def normalize(self, channel: Channel, payload: WhatsAppEventPayload) -> list[InboundEvent]:
        """Converte o payload validado em eventos canônicos.

        Raises:
            IdentityError: Remetente inválido em qualquer mensagem
            TimestampError: Timestamp inválido em qualquer evento
        """
        events: list[InboundEvent] = [
            self._normalize_message(channel, msg) for msg in payload.messages
        ]
        for status in payload.statuses:
            events.append(self._normalize_status(channel, status.id, status.status, status.timestamp))
        return events

    def _normalize_message(self, channel: Channel, msg: WhatsAppMessage) -> IncomingMessage:
        received_on = parse_timestamp(msg.timestamp, TimestampEncoding.EPOCH_SECONDS)
        urn = new_urn(URN_SCHEME, msg.from_)
        handler = self._content_handlers[MessageKind.from_wire(msg.type)]
        text, attachment = handler(channel, msg)
        return IncomingMessage(
            channel_uuid=channel.uuid,
            urn=urn,
            text=text,
            received_on=received_on,
            external_id=msg.id,
            attachment=attachment,
        )

    def _normalize_status(
        self,
        channel: Channel,
        external_id: str,
        raw_status: str,
        timestamp: str,
    ) -> InboundEvent:
        parse_timestamp(timestamp, TimestampEncoding.EPOCH_SECONDS)
        status = STATUS_MAPPING.get(raw_status.strip().lower())
        if status is None:
            logger.warning(
                "unknown_status_ignored",
                extra={"channel_uuid": channel.uuid, "status": raw_status},
            )
            return InboundNotice(info=f"invalid status: {raw_status}, ignored")
        return StatusUpdate(channel_uuid=channel.uuid, external_id=external_id, status=status)

    @staticmethod
    def _text_content(channel: Channel, msg: WhatsAppMessage) -> Content:
        return msg.text.body, None

    @staticmethod
    def _media_content(channel: Channel, media: WhatsAppMedia, caption: bool = False) -> Content:
        text = media.caption if caption else ""
        if not media.id:
            logger.warning("media_id_missing", extra={"channel_uuid": channel.uuid})
            return text, None
        try:
            return text, resolve_media_url(channel, media.id)
        except ConfigurationError as exc:
            # Mensagem segue sem anexo; o erro fica registrado.
            logger.warning(
                "media_url_unresolved",
                extra={"channel_uuid": channel.uuid, "error": str(exc)},
            )
            return text, None

    @staticmethod
    def _location_content(channel: Channel, msg: WhatsAppMessage) -> Content:
        location = msg.location
        return "", f"geo:{location.latitude:.6f},{location.longitude:.6f}"

    @staticmethod
    def _unsupported_content(channel: Channel, msg: WhatsAppMessage) -> Content:
        logger.warning(
            "unsupported_message_type",
            extra={"channel_uuid": channel.uuid, "message_type": msg.type},
        )
        return "", None
