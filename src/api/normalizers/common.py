"""Utilitários compartilhados entre normalizers de canal.

Responsabilidades:
- Enum fechado de tipos de conteúdo inbound (MessageKind)
- Parsing de timestamp nos encodings observados nos provedores
- Conversão de endereço do provedor em URN canônica
"""

from __future__ import annotations

import re
from datetime import UTC, datetime
from enum import StrEnum

from app.protocols.models import Urn
from utils.errors import IdentityError, TimestampError


class MessageKind(StrEnum):
    """Tipos de conteúdo inbound. UNSUPPORTED é o fallback explícito."""

    TEXT = "text"
    AUDIO = "audio"
    DOCUMENT = "document"
    IMAGE = "image"
    LOCATION = "location"
    VIDEO = "video"
    VOICE = "voice"
    UNSUPPORTED = "unsupported"

    @classmethod
    def from_wire(cls, value: str | None) -> MessageKind:
        try:
            kind = cls((value or "").strip().lower())
        except ValueError:
            return cls.UNSUPPORTED
        return kind


class TimestampEncoding(StrEnum):
    """Encodings de timestamp aceitos por canal."""

    EPOCH_SECONDS = "epoch_seconds"
    RFC3339_NANO = "rfc3339_nano"


_EPOCH_RE = re.compile(r"^[+-]?\d{1,12}$", re.ASCII)
_RFC3339_RE = re.compile(
    r"^(\d{4}-\d{2}-\d{2}[Tt]\d{2}:\d{2}:\d{2})(?:\.(\d{1,9}))?([Zz]|[+-]\d{2}:\d{2})$",
    re.ASCII,
)


def parse_timestamp(value: str, encoding: TimestampEncoding) -> datetime:
    """Converte timestamp do provedor em datetime UTC.

    Args:
        value: Valor bruto do payload
        encoding: Encoding esperado para o canal

    Returns:
        datetime timezone-aware em UTC. Nanossegundos são truncados
        para microssegundos.

    Raises:
        TimestampError: Se o valor não estiver no encoding esperado
    """
    raw = (value or "").strip()
    if encoding is TimestampEncoding.EPOCH_SECONDS:
        return _parse_epoch_seconds(raw)
    return _parse_rfc3339(raw)


def _parse_epoch_seconds(raw: str) -> datetime:
    if not _EPOCH_RE.match(raw):
        raise TimestampError(f"invalid timestamp format: {raw!r}")
    try:
        return datetime.fromtimestamp(int(raw), tz=UTC)
    except (OverflowError, OSError, ValueError) as exc:
        raise TimestampError(f"invalid timestamp format: {raw!r}") from exc


def _parse_rfc3339(raw: str) -> datetime:
    match = _RFC3339_RE.match(raw)
    if match is None:
        raise TimestampError(f"invalid timestamp format, must be RFC 3339: {raw!r}")
    base, fraction, offset = match.groups()
    micros = (fraction or "").ljust(6, "0")[:6]
    offset = "+00:00" if offset in ("Z", "z") else offset
    try:
        parsed = datetime.fromisoformat(f"{base.upper()}.{micros}{offset}")
    except ValueError as exc:
        raise TimestampError(f"invalid timestamp format, must be RFC 3339: {raw!r}") from exc
    return parsed.astimezone(UTC)


# Esquema -> (regex do path, rótulo usado na mensagem de erro)
_URN_RULES: dict[str, tuple[re.Pattern[str], str]] = {
    "whatsapp": (re.compile(r"^\d{1,30}$", re.ASCII), "invalid whatsapp id"),
    "rbm": (re.compile(r"^\+[1-9]\d{6,14}$", re.ASCII), "invalid rbm number"),
}


def new_urn(scheme: str, address: str) -> Urn:
    """Cria URN canônica validando o endereço para o esquema.

    Raises:
        IdentityError: Se o endereço não for válido no esquema
    """
    rule = _URN_RULES.get(scheme)
    if rule is None:
        raise IdentityError(f"unknown urn scheme: {scheme}")
    pattern, label = rule
    path = (address or "").strip()
    if not pattern.match(path):
        raise IdentityError(f"{label}: {path!r}")
    return Urn(scheme=scheme, path=path)
