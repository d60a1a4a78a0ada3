"""Normalizer WhatsApp: schema do webhook e conversão para eventos canônicos.

Tipos suportados: text, audio, document, image, location, video, voice.
Demais tipos geram mensagem vazia (diagnóstico apenas).
"""

from .normalizer import STATUS_MAPPING, WhatsAppNormalizer, resolve_media_url
from .payload import WhatsAppEventPayload

__all__ = [
    "STATUS_MAPPING",
    "WhatsAppEventPayload",
    "WhatsAppNormalizer",
    "resolve_media_url",
]
