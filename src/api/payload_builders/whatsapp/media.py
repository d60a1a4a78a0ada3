"""Builders para mensagens de mídia (audio, document, image).

A mídia é referenciada pelo id devolvido no upload. Legenda só é
aceita em document e image.
"""

from __future__ import annotations

from typing import Any


class AudioPayloadBuilder:
    message_type = "audio"

    def build(self, media_id: str, caption: str = "") -> dict[str, Any]:
        return {"audio": {"id": media_id}}


class _CaptionedMediaBuilder:
    message_type = ""

    def build(self, media_id: str, caption: str = "") -> dict[str, Any]:
        media_obj: dict[str, Any] = {"id": media_id}
        if caption:
            media_obj["caption"] = caption
        return {self.message_type: media_obj}


class DocumentPayloadBuilder(_CaptionedMediaBuilder):
    message_type = "document"


class ImagePayloadBuilder(_CaptionedMediaBuilder):
    message_type = "image"
