"""Testes do handler WA no inbound: schema + normalização do lote."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import Any

import pytest

from api.handlers.whatsapp import WhatsAppHandler
from api.normalizers.common import MessageKind
from api.normalizers.whatsapp import STATUS_MAPPING, WhatsAppNormalizer, resolve_media_url
from app.protocols.models import IncomingMessage, InboundNotice, MsgStatus, StatusUpdate
from fakes.channels import WA_UUID, whatsapp_channel
from utils.errors import ConfigurationError, IdentityError, PayloadSchemaError, TimestampError


@pytest.fixture
def handler() -> WhatsAppHandler:
    # Dispatcher não é usado no inbound
    return WhatsAppHandler(dispatcher=None)  # type: ignore[arg-type]


def _message(**overrides: Any) -> dict[str, Any]:
    msg: dict[str, Any] = {
        "from": "250788123123",
        "id": "41",
        "timestamp": "1454119029",
        "type": "text",
        "text": {"body": "hello world"},
    }
    msg.update(overrides)
    return msg


class TestMessages:
    def test_text_message(self, handler: WhatsAppHandler) -> None:
        events = handler.normalize(whatsapp_channel(), {"messages": [_message()]})

        assert len(events) == 1
        event = events[0]
        assert isinstance(event, IncomingMessage)
        assert event.channel_uuid == WA_UUID
        assert str(event.urn) == "whatsapp:250788123123"
        assert event.text == "hello world"
        assert event.external_id == "41"
        assert event.received_on == datetime(2016, 1, 30, 1, 57, 9, tzinfo=UTC)
        assert event.attachment is None

    def test_audio_message_gets_deferred_media_url(self, handler: WhatsAppHandler) -> None:
        payload = {
            "messages": [
                _message(type="audio", audio={"id": "41", "mime_type": "audio/ogg"})
            ]
        }
        event = handler.normalize(whatsapp_channel(), payload)[0]

        assert event.text == ""
        assert event.attachment == "https://foo.bar/v1/media/41"

    @pytest.mark.parametrize("kind", ["document", "image"])
    def test_caption_becomes_text(self, handler: WhatsAppHandler, kind: str) -> None:
        payload = {
            "messages": [
                _message(type=kind, **{kind: {"id": "9", "mime_type": "image/jpeg", "caption": "the caption"}})
            ]
        }
        event = handler.normalize(whatsapp_channel(), payload)[0]

        assert event.text == "the caption"
        assert event.attachment == "https://foo.bar/v1/media/9"

    @pytest.mark.parametrize("kind", ["video", "voice"])
    def test_video_and_voice_ignore_caption(self, handler: WhatsAppHandler, kind: str) -> None:
        payload = {"messages": [_message(type=kind, **{kind: {"id": "9", "caption": "ignored"}})]}
        event = handler.normalize(whatsapp_channel(), payload)[0]

        assert event.text == ""
        assert event.attachment == "https://foo.bar/v1/media/9"

    def test_location_message(self, handler: WhatsAppHandler) -> None:
        payload = {
            "messages": [
                _message(type="location", location={"latitude": 0.000000, "longitude": 1.000000})
            ]
        }
        event = handler.normalize(whatsapp_channel(), payload)[0]

        assert event.text == ""
        assert event.attachment == "geo:0.000000,1.000000"

    def test_unsupported_type_persists_empty_body(
        self, handler: WhatsAppHandler, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING):
            event = handler.normalize(whatsapp_channel(), {"messages": [_message(type="sticker")]})[0]

        assert isinstance(event, IncomingMessage)
        assert event.text == ""
        assert event.attachment is None
        assert any(r.getMessage() == "unsupported_message_type" for r in caplog.records)

    def test_media_without_token_is_kept_without_attachment(
        self, handler: WhatsAppHandler, caplog: pytest.LogCaptureFixture
    ) -> None:
        payload = {"messages": [_message(type="image", image={"id": "9", "caption": "hi"})]}
        with caplog.at_level(logging.WARNING):
            event = handler.normalize(whatsapp_channel(auth_token=None), payload)[0]

        assert event.text == "hi"
        assert event.attachment is None
        assert any(r.getMessage() == "media_url_unresolved" for r in caplog.records)

    def test_invalid_sender_aborts_batch(self, handler: WhatsAppHandler) -> None:
        payload = {"messages": [_message(), _message(**{"from": "notnumber"})]}
        with pytest.raises(IdentityError):
            handler.normalize(whatsapp_channel(), payload)

    def test_invalid_timestamp_aborts_batch(self, handler: WhatsAppHandler) -> None:
        with pytest.raises(TimestampError):
            handler.normalize(whatsapp_channel(), {"messages": [_message(timestamp="asdf")]})

    def test_missing_required_field(self, handler: WhatsAppHandler) -> None:
        msg = _message()
        del msg["id"]
        with pytest.raises(PayloadSchemaError, match="messages.0.id"):
            handler.normalize(whatsapp_channel(), {"messages": [msg]})


class TestStatuses:
    def _status(self, status: str, **overrides: Any) -> dict[str, Any]:
        entry = {"id": "157b5e14568e8", "recipient_id": "16315555555", "timestamp": "1518694700", "status": status}
        entry.update(overrides)
        return entry

    @pytest.mark.parametrize(
        ("wire", "expected"),
        [
            ("sending", MsgStatus.WIRED),
            ("sent", MsgStatus.SENT),
            ("delivered", MsgStatus.DELIVERED),
            ("read", MsgStatus.DELIVERED),
            ("failed", MsgStatus.FAILED),
        ],
    )
    def test_status_mapping(self, handler: WhatsAppHandler, wire: str, expected: MsgStatus) -> None:
        events = handler.normalize(whatsapp_channel(), {"statuses": [self._status(wire)]})

        assert events == [StatusUpdate(channel_uuid=WA_UUID, external_id="157b5e14568e8", status=expected)]

    def test_unknown_status_becomes_notice(self, handler: WhatsAppHandler) -> None:
        events = handler.normalize(whatsapp_channel(), {"statuses": [self._status("in_orbit")]})

        assert events == [InboundNotice(info="invalid status: in_orbit, ignored")]

    def test_status_timestamp_validated(self, handler: WhatsAppHandler) -> None:
        with pytest.raises(TimestampError):
            handler.normalize(
                whatsapp_channel(), {"statuses": [self._status("sent", timestamp="yesterday")]}
            )

    def test_messages_then_statuses_in_order(self, handler: WhatsAppHandler) -> None:
        payload = {
            "statuses": [self._status("sent"), self._status("bogus")],
            "messages": [_message(id="1"), _message(id="2")],
        }
        events = handler.normalize(whatsapp_channel(), payload)

        assert [type(e) for e in events] == [IncomingMessage, IncomingMessage, StatusUpdate, InboundNotice]
        assert [e.external_id for e in events[:2]] == ["1", "2"]

    def test_null_lists_are_empty(self, handler: WhatsAppHandler) -> None:
        assert handler.normalize(whatsapp_channel(), {"messages": None, "statuses": None}) == []


def test_every_message_kind_has_content_handler() -> None:
    assert WhatsAppNormalizer().supported_kinds == frozenset(MessageKind)


def test_status_mapping_values() -> None:
    assert set(STATUS_MAPPING.values()) == {
        MsgStatus.WIRED,
        MsgStatus.SENT,
        MsgStatus.DELIVERED,
        MsgStatus.FAILED,
    }


class TestResolveMediaUrl:
    def test_resolves_against_base_url(self) -> None:
        channel = whatsapp_channel(base_url="https://waba.example.com/api/")
        assert resolve_media_url(channel, "abc") == "https://waba.example.com/v1/media/abc"

    def test_missing_token(self) -> None:
        with pytest.raises(ConfigurationError, match="auth_token"):
            resolve_media_url(whatsapp_channel(auth_token=None), "abc")

    def test_unparseable_base_url(self) -> None:
        with pytest.raises(ConfigurationError):
            resolve_media_url(whatsapp_channel(base_url="not a url"), "abc")
