"""Factory: escolhe o builder pela categoria MIME e monta o payload completo."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.payload_builders.whatsapp.base import build_base_payload
from api.payload_builders.whatsapp.media import (
    AudioPayloadBuilder,
    DocumentPayloadBuilder,
    ImagePayloadBuilder,
)
from api.payload_builders.whatsapp.text import TextPayloadBuilder

if TYPE_CHECKING:
    from api.payload_builders.whatsapp.base import MediaPayloadBuilder

# Categoria MIME (parte antes da "/") -> builder; application/* é documento
_MEDIA_BUILDERS: dict[str, MediaPayloadBuilder] = {
    "audio": AudioPayloadBuilder(),
    "application": DocumentPayloadBuilder(),
    "image": ImagePayloadBuilder(),
}

_TEXT_BUILDER = TextPayloadBuilder()


def get_media_builder(mime_type: str) -> MediaPayloadBuilder | None:
    """Retorna o builder para o MIME type, ou None se categoria não suportada."""
    category = mime_type.strip().lower().split("/", 1)[0]
    return _MEDIA_BUILDERS.get(category)


def build_text_payload(to: str, body: str) -> dict[str, Any]:
    """Payload completo de um segmento de texto."""
    payload = build_base_payload(to, _TEXT_BUILDER.message_type)
    payload.update(_TEXT_BUILDER.build(body))
    return payload


def build_media_payload(to: str, mime_type: str, media_id: str, caption: str = "") -> dict[str, Any]:
    """Payload completo de mídia já enviada ao provedor.

    Raises:
        ValueError: Se a categoria MIME não for suportada
    """
    builder = get_media_builder(mime_type)
    if builder is None:
        raise ValueError(f"unknown attachment mime type: {mime_type}")
    payload = build_base_payload(to, builder.message_type)
    payload.update(builder.build(media_id, caption))
    return payload
