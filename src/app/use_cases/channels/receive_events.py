"""Use case de recebimento: payload do provedor -> eventos persistidos + acks.

Fluxo:
1. Resolve handler (tipo) e canal (uuid)
2. Normaliza o lote inteiro antes de persistir qualquer evento
3. Persiste em ordem e monta um ack por evento
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from app.protocols.models import IncomingMessage, InboundNotice, StatusUpdate
from utils.errors import ChannelNotFoundError, MessageNotFoundError

if TYPE_CHECKING:
    from api.handlers.registry import HandlerRegistry
    from app.protocols.backend import MessageBackendProtocol
    from app.protocols.channel_handler import ChannelHandlerProtocol
    from app.protocols.channel_store import ChannelStoreProtocol
    from app.protocols.models import Channel, InboundEvent

logger = logging.getLogger(__name__)


def build_ack(event: InboundEvent, msg_uuid: str | None = None) -> dict[str, Any]:
    """Monta o ack de um evento normalizado."""
    if isinstance(event, IncomingMessage):
        return {
            "type": "msg",
            "channel_uuid": event.channel_uuid,
            "msg_uuid": msg_uuid or event.uuid,
            "text": event.text,
            "urn": str(event.urn),
            "external_id": event.external_id,
            "received_on": event.received_on.isoformat(),
            "attachments": [event.attachment] if event.attachment else [],
        }
    if isinstance(event, StatusUpdate):
        return {
            "type": "status",
            "channel_uuid": event.channel_uuid,
            "status": str(event.status),
            "external_id": event.external_id,
        }
    return {"type": "info", "info": event.info}


class ReceiveEventsUseCase:
    """Orquestra normalização e persistência de um webhook inbound."""

    def __init__(
        self,
        registry: HandlerRegistry,
        channel_store: ChannelStoreProtocol,
        backend: MessageBackendProtocol,
    ) -> None:
        self._registry = registry
        self._channel_store = channel_store
        self._backend = backend

    def resolve_channel(
        self, channel_type: str, channel_uuid: str
    ) -> tuple[ChannelHandlerProtocol, Channel]:
        """Resolve handler e canal do webhook.

        Raises:
            HandlerNotFoundError: tipo de canal sem handler registrado
            ChannelNotFoundError: uuid desconhecido para o tipo
        """
        handler = self._registry.get(channel_type)
        channel = self._channel_store.get_channel(handler.channel_type, channel_uuid)
        if channel is None:
            raise ChannelNotFoundError(f"channel not found: {handler.channel_type} {channel_uuid}")
        return handler, channel

    async def execute(
        self,
        channel_type: str,
        channel_uuid: str,
        payload: dict[str, Any],
    ) -> list[dict[str, Any]]:
        """Normaliza e persiste os eventos, retornando os acks em ordem.

        Raises:
            HandlerNotFoundError, ChannelNotFoundError: canal não resolvido
            RequestValidationError: payload rejeitado (nada é persistido)
        """
        handler, channel = self.resolve_channel(channel_type, channel_uuid)
        events = handler.normalize(channel, payload)

        acks = [await self._persist(event) for event in events]
        logger.info(
            "events_handled",
            extra={
                "channel_type": channel.channel_type,
                "channel_uuid": channel.uuid,
                "event_count": len(events),
            },
        )
        return acks

    async def _persist(self, event: InboundEvent) -> dict[str, Any]:
        if isinstance(event, IncomingMessage):
            msg_uuid = await self._backend.write_msg(event)
            return build_ack(event, msg_uuid)

        if isinstance(event, StatusUpdate):
            try:
                await self._backend.write_msg_status(event)
            except MessageNotFoundError:
                logger.info(
                    "status_ignored_not_found",
                    extra={"channel_uuid": event.channel_uuid, "external_id": event.external_id},
                )
                return build_ack(
                    InboundNotice(info=f"message id: {event.external_id} not found, ignored")
                )
            return build_ack(event)

        return build_ack(event)
