"""Handlers de canal: um por tipo de provedor, plugáveis no HandlerRegistry.

- whatsapp.py: WhatsApp (WA)
- rbm.py: RCS Business Messaging (RBM)
"""

from .base import ChannelHandler
from .rbm import RbmHandler, RbmSendProfile
from .registry import HandlerRegistry
from .whatsapp import WhatsAppHandler, WhatsAppSendProfile

__all__ = [
    "ChannelHandler",
    "HandlerRegistry",
    "RbmHandler",
    "RbmSendProfile",
    "WhatsAppHandler",
    "WhatsAppSendProfile",
]
