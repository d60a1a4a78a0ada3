"""Protocolos de persistência de mensagens e status."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .models import IncomingMessage, OutgoingMessage, SendOutcome, StatusUpdate


class MessageBackendProtocol(Protocol):
    """Contrato com o colaborador de persistência."""

    async def write_msg(self, msg: IncomingMessage) -> str:
        """Persiste mensagem recebida e retorna seu id."""
        ...

    async def write_msg_status(self, status: StatusUpdate) -> None:
        """Persiste status. Levanta MessageNotFoundError se external_id desconhecido."""
        ...

    async def write_send_outcome(self, msg: OutgoingMessage, outcome: SendOutcome) -> None:
        """Registra resultado de envio outbound (status, external_id, logs)."""
        ...
