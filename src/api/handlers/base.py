"""Handler base de canal: schema inbound + normalizer + dispatcher outbound."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, ClassVar, Protocol

from api.connectors.webhook.receive import validate_payload

if TYPE_CHECKING:
    from pydantic import BaseModel

    from app.protocols.models import Channel, InboundEvent, OutgoingMessage, SendOutcome
    from app.services.outbound_dispatcher import OutboundDispatcher

logger = logging.getLogger(__name__)


class PayloadNormalizer(Protocol):
    def normalize(self, channel: Channel, payload: Any) -> list[InboundEvent]: ...


class ChannelHandler:
    """Implementação comum aos handlers registrados no HandlerRegistry."""

    channel_type: ClassVar[str] = ""
    name: ClassVar[str] = ""
    payload_model: ClassVar[type[BaseModel]]

    def __init__(self, normalizer: PayloadNormalizer, dispatcher: OutboundDispatcher) -> None:
        self._normalizer = normalizer
        self._dispatcher = dispatcher

    def normalize(self, channel: Channel, payload: dict[str, Any]) -> list[InboundEvent]:
        """Valida o schema do canal e normaliza em eventos canônicos.

        Raises:
            RequestValidationError: schema, identidade ou timestamp inválidos
        """
        validated = validate_payload(self.payload_model, payload)
        events = self._normalizer.normalize(channel, validated)
        logger.debug(
            "payload_normalized",
            extra={"channel_type": self.channel_type, "event_count": len(events)},
        )
        return events

    async def send_msg(self, msg: OutgoingMessage) -> SendOutcome:
        return await self._dispatcher.send(msg)
