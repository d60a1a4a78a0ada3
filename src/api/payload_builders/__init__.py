"""Payload builders por canal: construção de payloads para APIs externas.

Estrutura:
- segments.py: segmentação de texto no limite de caracteres
- whatsapp/: text, audio, document, image
- rbm/: contentMessage de texto

Cada canal tem seus próprios builders, garantindo SRP e isolamento de falhas.
"""

from api.payload_builders.segments import MAX_TEXT_LENGTH, split_text

__all__ = [
    "MAX_TEXT_LENGTH",
    "split_text",
]
