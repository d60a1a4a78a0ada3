"""Protocolos e contratos do core da aplicação."""

from .backend import MessageBackendProtocol
from .channel_handler import ChannelHandlerProtocol
from .channel_store import ChannelStoreProtocol
from .http_transport import HttpRequest, HttpResult, HttpTransportProtocol
from .models import (
    Channel,
    ChannelLog,
    FailureKind,
    IncomingMessage,
    InboundEvent,
    InboundNotice,
    MsgStatus,
    OutgoingMessage,
    SendFailure,
    SendOutcome,
    SendResult,
    StatusUpdate,
    Urn,
)
from .send_profile import (
    MediaRelayProtocol,
    MediaRelayResultProtocol,
    SendContext,
    SendProfileProtocol,
)

__all__ = [
    "Channel",
    "ChannelHandlerProtocol",
    "ChannelLog",
    "ChannelStoreProtocol",
    "FailureKind",
    "HttpRequest",
    "HttpResult",
    "HttpTransportProtocol",
    "InboundEvent",
    "InboundNotice",
    "IncomingMessage",
    "MediaRelayProtocol",
    "MediaRelayResultProtocol",
    "MessageBackendProtocol",
    "MsgStatus",
    "OutgoingMessage",
    "SendContext",
    "SendFailure",
    "SendOutcome",
    "SendProfileProtocol",
    "SendResult",
    "StatusUpdate",
    "Urn",
]
