"""Protocolos de acesso à configuração de canais."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .models import Channel


class ChannelStoreProtocol(Protocol):
    """Contrato mínimo para resolver canais por tipo/uuid."""

    def get_channel(self, channel_type: str, channel_uuid: str) -> Channel | None: ...
