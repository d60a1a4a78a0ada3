"""Stores em memória: apenas para desenvolvimento e testes.

ATENÇÃO: Não usar em staging/production. Sem persistência entre reinícios.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml

from app.protocols.models import Channel
from utils.errors import ConfigurationError, MessageNotFoundError

if TYPE_CHECKING:
    from app.protocols.models import (
        IncomingMessage,
        MsgStatus,
        OutgoingMessage,
        SendOutcome,
        StatusUpdate,
    )

logger = logging.getLogger(__name__)


class MemoryChannelStore:
    """Canais configurados indexados por (tipo, uuid)."""

    def __init__(self, channels: list[Channel] | None = None) -> None:
        self._channels: dict[tuple[str, str], Channel] = {}
        for channel in channels or []:
            self.add(channel)

    def add(self, channel: Channel) -> None:
        self._channels[(channel.channel_type.upper(), channel.uuid)] = channel

    def get_channel(self, channel_type: str, channel_uuid: str) -> Channel | None:
        return self._channels.get((channel_type.upper(), channel_uuid))

    def __len__(self) -> int:
        return len(self._channels)

    @classmethod
    def from_yaml(cls, path: str | Path) -> MemoryChannelStore:
        """Carrega canais de um arquivo YAML.

        Formato esperado:
            channels:
              - uuid: 8eb23e93-5ecb-45ba-b726-3b064e0c56ab
                channel_type: WA
                address: "+250788383383"
                config:
                  auth_token: ...
                  base_url: https://waba.example.com

        Raises:
            ConfigurationError: Se o arquivo não existir ou tiver formato inválido
        """
        file_path = Path(path)
        try:
            data = yaml.safe_load(file_path.read_text(encoding="utf-8")) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigurationError(f"unable to load channels file {file_path}: {exc}") from exc

        entries = data.get("channels") if isinstance(data, dict) else None
        if not isinstance(entries, list):
            raise ConfigurationError(f"channels file {file_path} must define a 'channels' list")

        store = cls([_channel_from_entry(entry) for entry in entries])
        logger.info(
            "channels_loaded",
            extra={"path": str(file_path), "channel_count": len(store)},
        )
        return store


def _channel_from_entry(entry: Any) -> Channel:
    if not isinstance(entry, dict):
        raise ConfigurationError("channel entry must be a mapping")
    uuid = str(entry.get("uuid") or "").strip()
    channel_type = str(entry.get("channel_type") or "").strip().upper()
    if not uuid or not channel_type:
        raise ConfigurationError("channel entry requires uuid and channel_type")
    config = entry.get("config") or {}
    if not isinstance(config, dict):
        raise ConfigurationError(f"config of channel {uuid} must be a mapping")
    return Channel(
        uuid=uuid,
        channel_type=channel_type,
        address=str(entry.get("address") or ""),
        country=str(entry.get("country") or ""),
        config={str(key): str(value) for key, value in config.items() if value is not None},
    )


class MemoryMessageBackend:
    """Backend de mensagens em memória: apenas para dev/test."""

    def __init__(self) -> None:
        self.messages: list[IncomingMessage] = []
        self.statuses: list[StatusUpdate] = []
        self.outcomes: list[tuple[OutgoingMessage, SendOutcome]] = []
        self._known_external_ids: dict[tuple[str, str], MsgStatus] = {}

    async def write_msg(self, msg: IncomingMessage) -> str:
        self.messages.append(msg)
        return msg.uuid

    async def write_msg_status(self, status: StatusUpdate) -> None:
        key = (status.channel_uuid, status.external_id)
        if key not in self._known_external_ids:
            raise MessageNotFoundError(f"message id: {status.external_id} not found")
        self._known_external_ids[key] = status.status
        self.statuses.append(status)

    async def write_send_outcome(self, msg: OutgoingMessage, outcome: SendOutcome) -> None:
        self.outcomes.append((msg, outcome))
        if outcome.external_id:
            self._known_external_ids[(msg.channel.uuid, outcome.external_id)] = outcome.status

    def track_external_id(self, channel_uuid: str, external_id: str, status: MsgStatus) -> None:
        """Registra mensagem enviada fora deste backend (útil em testes)."""
        self._known_external_ids[(channel_uuid, external_id)] = status

    def status_of(self, channel_uuid: str, external_id: str) -> MsgStatus | None:
        return self._known_external_ids.get((channel_uuid, external_id))
