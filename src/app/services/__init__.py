"""Serviços de aplicação.

Orquestração reutilizável entre canais; IO concreto é injetado.
"""

from app.services.outbound_dispatcher import OutboundDispatcher

__all__ = ["OutboundDispatcher"]
