"""Modelos canônicos do adapter de canais.

Representação interna, independente do provedor, para:
- Canal configurado (Channel)
- Eventos inbound (IncomingMessage, StatusUpdate, InboundNotice)
- Mensagem outbound e resultado de envio (OutgoingMessage, SendOutcome)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING
from uuid import uuid4

from utils.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Mapping
    from datetime import datetime

CONFIG_AUTH_TOKEN = "auth_token"
CONFIG_BASE_URL = "base_url"
CONFIG_SEND_URL = "send_url"


class MsgStatus(StrEnum):
    """Status canônico de mensagem."""

    WIRED = "wired"
    SENT = "sent"
    DELIVERED = "delivered"
    FAILED = "failed"
    ERRORED = "errored"


class FailureKind(StrEnum):
    """Motivo tipado de falha de envio outbound."""

    CONFIGURATION = "configuration"
    ATTACHMENT_POLICY = "attachment_policy"
    MEDIA_FETCH = "media_fetch"
    MEDIA_UPLOAD = "media_upload"
    MALFORMED_UPLOAD_RESPONSE = "malformed_upload_response"
    TRANSPORT = "transport"
    PROVIDER_REJECTED = "provider_rejected"
    MALFORMED_RESPONSE = "malformed_response"


_RETRYABLE_KINDS = frozenset(
    {FailureKind.TRANSPORT, FailureKind.MEDIA_FETCH, FailureKind.MEDIA_UPLOAD}
)


@dataclass(frozen=True, slots=True)
class Channel:
    """Snapshot read-only de um canal configurado."""

    uuid: str
    channel_type: str
    address: str = ""
    country: str = ""
    config: Mapping[str, str] = field(default_factory=dict)

    def string_config(self, key: str, default: str = "") -> str:
        value = self.config.get(key)
        if value is None:
            return default
        return str(value)

    def require_config(self, key: str) -> str:
        """Retorna config obrigatória ou levanta ConfigurationError."""
        value = self.string_config(key).strip()
        if not value:
            raise ConfigurationError(f"missing {key} for {self.channel_type} channel")
        return value


@dataclass(frozen=True, slots=True)
class Urn:
    """Identidade canônica no esquema do canal (ex: whatsapp:5511999)."""

    scheme: str
    path: str

    def __str__(self) -> str:
        return f"{self.scheme}:{self.path}"


@dataclass(frozen=True, slots=True)
class IncomingMessage:
    """Mensagem recebida, já normalizada."""

    channel_uuid: str
    urn: Urn
    text: str
    received_on: datetime
    external_id: str
    attachment: str | None = None
    uuid: str = field(default_factory=lambda: str(uuid4()))


@dataclass(frozen=True, slots=True)
class StatusUpdate:
    """Atualização de status para mensagem enviada anteriormente."""

    channel_uuid: str
    external_id: str
    status: MsgStatus


@dataclass(frozen=True, slots=True)
class InboundNotice:
    """Evento aceito mas ignorado (apenas informativo)."""

    info: str


InboundEvent = IncomingMessage | StatusUpdate | InboundNotice


@dataclass(frozen=True, slots=True)
class OutgoingMessage:
    """Mensagem canônica a enviar. Attachments no formato "<mime>:<url>"."""

    id: str
    channel: Channel
    urn: Urn
    text: str = ""
    attachments: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class ChannelLog:
    """Entrada de diagnóstico de uma interação com o provedor."""

    description: str
    method: str = ""
    url: str = ""
    status_code: int | None = None
    request_body: str = ""
    response_body: str = ""
    elapsed_ms: float = 0.0
    error: str | None = None


@dataclass(frozen=True, slots=True)
class SendFailure:
    """Falha tipada de envio."""

    kind: FailureKind
    message: str

    @property
    def is_retryable(self) -> bool:
        return self.kind in _RETRYABLE_KINDS


@dataclass(frozen=True, slots=True)
class SendResult:
    """Resultado de uma única requisição de envio ao provedor."""

    external_id: str | None = None
    failure: SendFailure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None and bool(self.external_id)


@dataclass
class SendOutcome:
    """Resultado agregado do envio de uma mensagem outbound.

    Começa como ERRORED e só passa a WIRED quando todas as requisições
    ao provedor foram aceitas.
    """

    msg_id: str
    status: MsgStatus = MsgStatus.ERRORED
    external_id: str | None = None
    failure: SendFailure | None = None
    logs: list[ChannelLog] = field(default_factory=list)

    def add_log(self, log: ChannelLog) -> None:
        self.logs.append(log)

    def fail(self, failure: SendFailure) -> SendOutcome:
        self.status = MsgStatus.ERRORED
        self.failure = failure
        return self

    def wire(self, external_id: str | None) -> SendOutcome:
        self.status = MsgStatus.WIRED
        self.external_id = external_id
        return self
