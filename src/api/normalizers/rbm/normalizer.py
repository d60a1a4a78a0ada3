"""Normalizer RBM: um evento por requisição, apenas texto."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.normalizers.common import TimestampEncoding, new_urn, parse_timestamp
from app.protocols.models import IncomingMessage

if TYPE_CHECKING:
    from app.protocols.models import Channel, InboundEvent

    from .payload import RbmEventPayload

logger = logging.getLogger(__name__)

URN_SCHEME = "rbm"


class RbmNormalizer:
    """Converte o payload RBM em IncomingMessage."""

    def normalize(self, channel: Channel, payload: RbmEventPayload) -> list[InboundEvent]:
        received_on = parse_timestamp(payload.send_time, TimestampEncoding.RFC3339_NANO)
        urn = new_urn(URN_SCHEME, payload.sender_phone_number)

        if not payload.text:
            # RBM também envia eventos sem texto (ex: sugestões, arquivos)
            logger.warning(
                "unsupported_message_type",
                extra={"channel_uuid": channel.uuid, "external_id": payload.message_id},
            )

        return [
            IncomingMessage(
                channel_uuid=channel.uuid,
                urn=urn,
                text=payload.text,
                received_on=received_on,
                external_id=payload.message_id,
            )
        ]
