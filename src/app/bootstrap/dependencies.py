"""Factories de dependências: criação de implementações concretas.

Centraliza a criação de transporte, stores e use cases a partir
das settings de ambiente.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors.http_transport import HttpClientConfig, HttpxTransport
from app.bootstrap.handlers import create_handler_registry
from app.infra.stores import MemoryChannelStore, MemoryMessageBackend
from app.use_cases.channels import ReceiveEventsUseCase, SendOutboundMessageUseCase
from config.settings import get_channels_settings, get_transport_settings

if TYPE_CHECKING:
    from api.handlers import HandlerRegistry
    from app.protocols.backend import MessageBackendProtocol
    from app.protocols.channel_store import ChannelStoreProtocol

logger = logging.getLogger(__name__)


def create_http_transport(timeout_seconds: float | None = None) -> HttpxTransport:
    """Cria transporte httpx com timeout e TLS das settings."""
    settings = get_transport_settings()
    return HttpxTransport(
        HttpClientConfig(
            timeout_seconds=timeout_seconds or settings.http_timeout_seconds,
            verify_ssl=settings.verify_ssl,
        )
    )


def create_registry() -> HandlerRegistry:
    """Cria registry com transportes separados para envio e mídia."""
    settings = get_transport_settings()
    return create_handler_registry(
        transport=create_http_transport(),
        media_transport=create_http_transport(settings.media_timeout_seconds),
        user_agent=settings.user_agent,
    )


def create_channel_store() -> MemoryChannelStore:
    """Cria store de canais, carregando o YAML de CHANNELS_CONFIG_PATH se definido."""
    settings = get_channels_settings()
    if not settings.enabled:
        logger.warning("channels_config_not_set", extra={"component": "bootstrap"})
        return MemoryChannelStore()
    return MemoryChannelStore.from_yaml(settings.config_path)


def create_message_backend() -> MemoryMessageBackend:
    """Backend em memória; o host substitui pela sua persistência real."""
    return MemoryMessageBackend()


def create_receive_events_use_case(
    registry: HandlerRegistry,
    channel_store: ChannelStoreProtocol,
    backend: MessageBackendProtocol,
) -> ReceiveEventsUseCase:
    return ReceiveEventsUseCase(registry=registry, channel_store=channel_store, backend=backend)


def create_send_outbound_use_case(
    registry: HandlerRegistry,
    backend: MessageBackendProtocol,
) -> SendOutboundMessageUseCase:
    return SendOutboundMessageUseCase(registry=registry, backend=backend)
