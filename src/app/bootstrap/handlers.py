"""Factory de wiring dos handlers de canal (bootstrap)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.connectors.media_relay import MediaRelay
from api.handlers import HandlerRegistry, RbmHandler, RbmSendProfile, WhatsAppHandler, WhatsAppSendProfile
from app.services.outbound_dispatcher import OutboundDispatcher

if TYPE_CHECKING:
    from app.protocols.http_transport import HttpTransportProtocol


def create_whatsapp_handler(
    transport: HttpTransportProtocol,
    media_transport: HttpTransportProtocol | None = None,
    user_agent: str = "",
) -> WhatsAppHandler:
    """Cria handler WA com relay de mídia habilitado."""
    media_relay = MediaRelay(media_transport or transport, user_agent=user_agent)
    dispatcher = OutboundDispatcher(
        WhatsAppSendProfile(),
        transport,
        media_relay=media_relay,
        user_agent=user_agent,
    )
    return WhatsAppHandler(dispatcher)


def create_rbm_handler(transport: HttpTransportProtocol, user_agent: str = "") -> RbmHandler:
    """Cria handler RBM (somente texto, sem relay de mídia)."""
    dispatcher = OutboundDispatcher(RbmSendProfile(), transport, user_agent=user_agent)
    return RbmHandler(dispatcher)


def create_handler_registry(
    transport: HttpTransportProtocol,
    media_transport: HttpTransportProtocol | None = None,
    user_agent: str = "",
) -> HandlerRegistry:
    """Cria registry com todos os tipos de canal suportados."""
    registry = HandlerRegistry()
    registry.register(create_whatsapp_handler(transport, media_transport, user_agent))
    registry.register(create_rbm_handler(transport, user_agent))
    return registry
