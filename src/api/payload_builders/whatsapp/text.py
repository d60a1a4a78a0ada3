"""Builder para mensagens de texto."""

from __future__ import annotations

from typing import Any


class TextPayloadBuilder:
    """Builder para um segmento de texto simples."""

    message_type = "text"

    def build(self, body: str) -> dict[str, Any]:
        """Constrói payload para mensagem de texto.

        Args:
            body: Segmento de texto (já dentro do limite)

        Returns:
            Bloco `text` conforme API WhatsApp
        """
        return {"text": {"body": body}}
