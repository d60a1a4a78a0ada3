"""Registry explícito de handlers por tipo de canal.

Construído uma vez no bootstrap e passado por referência ao router
e aos use cases; não há registro global implícito.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from utils.errors import HandlerNotFoundError

if TYPE_CHECKING:
    from app.protocols.channel_handler import ChannelHandlerProtocol


class HandlerRegistry:
    """Mapeia channel_type (ex: "WA") para o handler correspondente."""

    def __init__(self) -> None:
        self._handlers: dict[str, ChannelHandlerProtocol] = {}

    def register(self, handler: ChannelHandlerProtocol) -> None:
        key = handler.channel_type.upper()
        if key in self._handlers:
            raise ValueError(f"handler already registered for channel type: {key}")
        self._handlers[key] = handler

    def get(self, channel_type: str) -> ChannelHandlerProtocol:
        handler = self._handlers.get(channel_type.upper())
        if handler is None:
            raise HandlerNotFoundError(f"no handler registered for channel type: {channel_type}")
        return handler

    def channel_types(self) -> list[str]:
        return sorted(self._handlers)
