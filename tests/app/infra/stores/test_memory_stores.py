"""Testes dos stores em memória e do carregamento YAML de canais."""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

import pytest

from app.infra.stores.memory_stores import MemoryChannelStore, MemoryMessageBackend
from app.protocols.models import (
    IncomingMessage,
    MsgStatus,
    OutgoingMessage,
    SendOutcome,
    StatusUpdate,
    Urn,
)
from fakes.channels import WA_UUID, whatsapp_channel
from utils.errors import ConfigurationError, MessageNotFoundError

CHANNELS_YAML = """
channels:
  - uuid: 8eb23e93-5ecb-45ba-b726-3b064e0c56ab
    channel_type: wa
    address: "250788383383"
    country: RW
    config:
      auth_token: the-auth-token
      base_url: https://foo.bar/
  - uuid: 2f1ad7e9-5cd3-4c3b-a8e4-0b4e6b2a7f11
    channel_type: RBM
    config:
      auth_token: rbm-token
      send_url: https://rbm.example.com/v1
"""


class TestMemoryChannelStore:
    def test_lookup_is_case_insensitive_on_type(self) -> None:
        store = MemoryChannelStore([whatsapp_channel()])

        assert store.get_channel("wa", WA_UUID) == whatsapp_channel()
        assert store.get_channel("RBM", WA_UUID) is None
        assert store.get_channel("WA", "other") is None

    def test_from_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "channels.yaml"
        path.write_text(CHANNELS_YAML, encoding="utf-8")

        store = MemoryChannelStore.from_yaml(path)

        assert len(store) == 2
        channel = store.get_channel("WA", WA_UUID)
        assert channel.channel_type == "WA"
        assert channel.country == "RW"
        assert channel.require_config("base_url") == "https://foo.bar/"
        rbm = store.get_channel("rbm", "2f1ad7e9-5cd3-4c3b-a8e4-0b4e6b2a7f11")
        assert rbm.address == ""
        assert rbm.string_config("send_url") == "https://rbm.example.com/v1"

    def test_from_yaml_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError, match="unable to load channels file"):
            MemoryChannelStore.from_yaml(tmp_path / "missing.yaml")

    @pytest.mark.parametrize(
        "content",
        [
            "channels: {}",
            "- just a list",
            "channels:\n  - uuid: abc\n",
            "channels:\n  - uuid: abc\n    channel_type: WA\n    config: [1, 2]\n",
            "channels: [",
        ],
    )
    def test_from_yaml_invalid(self, tmp_path: Path, content: str) -> None:
        path = tmp_path / "channels.yaml"
        path.write_text(content, encoding="utf-8")

        with pytest.raises(ConfigurationError):
            MemoryChannelStore.from_yaml(path)


class TestMemoryMessageBackend:
    @pytest.mark.asyncio
    async def test_write_msg_returns_uuid(self) -> None:
        backend = MemoryMessageBackend()
        msg = IncomingMessage(
            channel_uuid=WA_UUID,
            urn=Urn("whatsapp", "250788123123"),
            text="hi",
            received_on=datetime(2016, 1, 30, tzinfo=UTC),
            external_id="41",
        )

        assert await backend.write_msg(msg) == msg.uuid
        assert backend.messages == [msg]

    @pytest.mark.asyncio
    async def test_status_for_unknown_id_raises(self) -> None:
        backend = MemoryMessageBackend()

        with pytest.raises(MessageNotFoundError):
            await backend.write_msg_status(StatusUpdate(WA_UUID, "nope", MsgStatus.SENT))

    @pytest.mark.asyncio
    async def test_sent_message_can_receive_status(self) -> None:
        backend = MemoryMessageBackend()
        msg = OutgoingMessage(id="10", channel=whatsapp_channel(), urn=Urn("whatsapp", "1"))
        outcome = SendOutcome(msg_id="10").wire("157b")

        await backend.write_send_outcome(msg, outcome)
        await backend.write_msg_status(StatusUpdate(WA_UUID, "157b", MsgStatus.DELIVERED))

        assert backend.status_of(WA_UUID, "157b") is MsgStatus.DELIVERED

    @pytest.mark.asyncio
    async def test_errored_outcome_without_id_not_tracked(self) -> None:
        backend = MemoryMessageBackend()
        msg = OutgoingMessage(id="10", channel=whatsapp_channel(), urn=Urn("whatsapp", "1"))

        await backend.write_send_outcome(msg, SendOutcome(msg_id="10"))

        assert backend.outcomes[0][1].status is MsgStatus.ERRORED
        assert backend.status_of(WA_UUID, "157b") is None
