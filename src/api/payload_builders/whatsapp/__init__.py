"""Builders de payload para a API WhatsApp.

Um builder por variante de conteúdo (text, audio, document, image);
a factory escolhe a variante de mídia pela categoria MIME.
"""

from api.payload_builders.whatsapp.base import build_base_payload
from api.payload_builders.whatsapp.factory import (
    build_media_payload,
    build_text_payload,
    get_media_builder,
)

__all__ = [
    "build_base_payload",
    "build_media_payload",
    "build_text_payload",
    "get_media_builder",
]
