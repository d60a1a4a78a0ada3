"""Testes para parse_json_body e validate_payload."""

from __future__ import annotations

import pytest

from api.connectors.webhook import parse_json_body, validate_payload
from api.normalizers.rbm import RbmEventPayload
from utils.errors import InvalidJsonError, PayloadSchemaError


def test_parse_json_body_ok() -> None:
    assert parse_json_body(b'{"messages": []}') == {"messages": []}


@pytest.mark.parametrize("body", [b"", b"not json", b"[1, 2]", b'"text"', b"\xff\xfe"])
def test_parse_json_body_invalid(body: bytes) -> None:
    with pytest.raises(InvalidJsonError, match="unable to parse request JSON"):
        parse_json_body(body)


def test_validate_payload_by_alias() -> None:
    payload = validate_payload(
        RbmEventPayload,
        {"senderPhoneNumber": "+12223334444", "messageId": "m1", "sendTime": "2018-12-31T15:01:23Z"},
    )

    assert payload.sender_phone_number == "+12223334444"
    assert payload.text == ""


def test_validate_payload_lists_problems() -> None:
    with pytest.raises(PayloadSchemaError) as exc_info:
        validate_payload(RbmEventPayload, {"text": "hi"})

    message = str(exc_info.value)
    assert message.startswith("request JSON doesn't match required schema")
    assert "senderPhoneNumber" in message
    assert "sendTime" in message
