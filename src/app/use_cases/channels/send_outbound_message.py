"""Use case de envio outbound por qualquer canal registrado."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.protocols.models import ChannelLog, FailureKind, SendFailure, SendOutcome
from utils.errors import HandlerNotFoundError

if TYPE_CHECKING:
    from api.handlers.registry import HandlerRegistry
    from app.protocols.backend import MessageBackendProtocol
    from app.protocols.models import OutgoingMessage

logger = logging.getLogger(__name__)


class SendOutboundMessageUseCase:
    """Resolve o handler, despacha e registra o resultado no backend."""

    def __init__(self, registry: HandlerRegistry, backend: MessageBackendProtocol) -> None:
        self._registry = registry
        self._backend = backend

    async def execute(self, msg: OutgoingMessage) -> SendOutcome:
        """Envia a mensagem; falhas de envio voltam no SendOutcome, nunca como exceção."""
        try:
            handler = self._registry.get(msg.channel.channel_type)
        except HandlerNotFoundError as exc:
            outcome = SendOutcome(msg_id=msg.id)
            outcome.add_log(ChannelLog(description="Message Send Error", error=str(exc)))
            outcome.fail(SendFailure(kind=FailureKind.CONFIGURATION, message=str(exc)))
        else:
            outcome = await handler.send_msg(msg)

        await self._backend.write_send_outcome(msg, outcome)
        logger.info(
            "send_outcome_recorded",
            extra={
                "msg_id": msg.id,
                "channel_type": msg.channel.channel_type,
                "status": str(outcome.status),
                "failure_kind": str(outcome.failure.kind) if outcome.failure else None,
                "retryable": outcome.failure.is_retryable if outcome.failure else False,
            },
        )
        return outcome
