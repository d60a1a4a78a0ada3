"""Protocolo de handler de canal (um por tipo de provedor)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from .models import Channel, InboundEvent, OutgoingMessage, SendOutcome


class ChannelHandlerProtocol(Protocol):
    """Contrato de um handler plugável no registry."""

    channel_type: str
    name: str

    def normalize(self, channel: Channel, payload: dict[str, Any]) -> list[InboundEvent]:
        """Converte payload validado em eventos canônicos.

        Raises:
            RequestValidationError: payload, identidade ou timestamp inválidos
        """
        ...

    async def send_msg(self, msg: OutgoingMessage) -> SendOutcome: ...
