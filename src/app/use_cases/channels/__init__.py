"""Use cases do adapter de canais (inbound e outbound)."""

from .receive_events import ReceiveEventsUseCase, build_ack
from .send_outbound_message import SendOutboundMessageUseCase

__all__ = [
    "ReceiveEventsUseCase",
    "SendOutboundMessageUseCase",
    "build_ack",
]
