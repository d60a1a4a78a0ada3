"""Testes para api.normalizers.common (timestamps, URNs, MessageKind)."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from api.normalizers.common import MessageKind, TimestampEncoding, new_urn, parse_timestamp
from utils.errors import IdentityError, RequestValidationError, TimestampError


class TestParseTimestampEpoch:
    def test_epoch_seconds(self) -> None:
        parsed = parse_timestamp("1454119029", TimestampEncoding.EPOCH_SECONDS)
        assert parsed == datetime(2016, 1, 30, 1, 57, 9, tzinfo=UTC)

    @pytest.mark.parametrize("value", ["", "abc", "1454119029.5", "2016-01-30T01:57:09Z", "١٤٥٤١١٩٠٢٩"])
    def test_epoch_invalid(self, value: str) -> None:
        with pytest.raises(TimestampError, match="invalid timestamp format"):
            parse_timestamp(value, TimestampEncoding.EPOCH_SECONDS)


class TestParseTimestampRfc3339:
    def test_nanoseconds_truncated_to_micro(self) -> None:
        parsed = parse_timestamp("2018-12-31T15:01:23.045123456Z", TimestampEncoding.RFC3339_NANO)
        assert parsed == datetime(2018, 12, 31, 15, 1, 23, 45123, tzinfo=UTC)

    def test_offset_converted_to_utc(self) -> None:
        parsed = parse_timestamp("2018-12-31T12:01:23-03:00", TimestampEncoding.RFC3339_NANO)
        assert parsed == datetime(2018, 12, 31, 15, 1, 23, tzinfo=UTC)
        assert parsed.tzinfo is UTC

    @pytest.mark.parametrize("value", ["20170623T123000Z", "2018-12-31 15:01:23", "1454119029"])
    def test_rfc3339_invalid(self, value: str) -> None:
        with pytest.raises(TimestampError, match="RFC 3339"):
            parse_timestamp(value, TimestampEncoding.RFC3339_NANO)

    def test_timestamp_error_is_request_validation_error(self) -> None:
        with pytest.raises(RequestValidationError):
            parse_timestamp("bad", TimestampEncoding.RFC3339_NANO)


class TestNewUrn:
    def test_whatsapp_urn(self) -> None:
        urn = new_urn("whatsapp", "250788123123")
        assert str(urn) == "whatsapp:250788123123"

    def test_rbm_urn(self) -> None:
        urn = new_urn("rbm", "+12223334444")
        assert urn.scheme == "rbm"
        assert urn.path == "+12223334444"

    def test_rbm_invalid_number(self) -> None:
        with pytest.raises(IdentityError, match="invalid rbm number"):
            new_urn("rbm", "not a number")

    def test_rbm_requires_plus_prefix(self) -> None:
        with pytest.raises(IdentityError):
            new_urn("rbm", "12223334444")

    def test_whatsapp_invalid_id(self) -> None:
        with pytest.raises(IdentityError, match="invalid whatsapp id"):
            new_urn("whatsapp", "+250 788")

    @pytest.mark.parametrize(("scheme", "path"), [("whatsapp", "١٢٣٤"), ("rbm", "+١٢٢٢٣٣٣٤٤٤٤")])
    def test_non_ascii_digits_rejected(self, scheme: str, path: str) -> None:
        with pytest.raises(IdentityError):
            new_urn(scheme, path)

    def test_unknown_scheme(self) -> None:
        with pytest.raises(IdentityError, match="unknown urn scheme"):
            new_urn("fax", "123")


class TestMessageKind:
    @pytest.mark.parametrize(
        ("wire", "expected"),
        [
            ("text", MessageKind.TEXT),
            ("IMAGE", MessageKind.IMAGE),
            ("voice", MessageKind.VOICE),
            ("sticker", MessageKind.UNSUPPORTED),
            ("", MessageKind.UNSUPPORTED),
            (None, MessageKind.UNSUPPORTED),
        ],
    )
    def test_from_wire(self, wire: str | None, expected: MessageKind) -> None:
        assert MessageKind.from_wire(wire) is expected
