"""Builder para mensagens de texto RBM."""

from __future__ import annotations

from typing import Any


def build_text_payload(text: str) -> dict[str, Any]:
    """Payload agentMessages com um segmento de texto."""
    return {"contentMessage": {"text": text}}
