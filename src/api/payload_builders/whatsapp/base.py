"""Base comum dos builders de payload WhatsApp."""

from __future__ import annotations

from typing import Any, Protocol


class MediaPayloadBuilder(Protocol):
    """Contrato dos builders de mídia (id do upload + legenda opcional)."""

    message_type: str

    def build(self, media_id: str, caption: str = "") -> dict[str, Any]: ...


def build_base_payload(to: str, message_type: str) -> dict[str, Any]:
    """Campos comuns a todo envio: destinatário e tipo."""
    return {"to": to, "type": message_type}
