"""Segmentação de texto outbound em partes de tamanho limitado."""

from __future__ import annotations

# WhatsApp e RBM aceitam no máximo 4096 caracteres por mensagem
MAX_TEXT_LENGTH = 4096


def split_text(text: str, max_length: int = MAX_TEXT_LENGTH) -> list[str]:
    """Divide o texto em segmentos de até `max_length` caracteres.

    Corta no maior espaço em branco dentro do limite; sem nenhum,
    faz corte seco no limite. Texto curto (inclusive vazio) volta
    como segmento único, intacto. Nunca retorna lista vazia.
    """
    if max_length <= 0:
        raise ValueError("max_length must be > 0")
    if len(text) <= max_length:
        return [text]

    segments: list[str] = []
    remaining = text
    while len(remaining) > max_length:
        cut = _last_boundary(remaining, max_length)
        if cut <= 0:
            segment, remaining = remaining[:max_length], remaining[max_length:]
        else:
            segment, remaining = remaining[:cut], remaining[cut:]
        segment = segment.strip()
        remaining = remaining.lstrip()
        if segment:
            segments.append(segment)

    remaining = remaining.strip()
    if remaining:
        segments.append(remaining)
    # texto só de espaços continua sendo um envio
    return segments or [""]


def _last_boundary(text: str, max_length: int) -> int:
    """Índice do último espaço em branco em text[1:max_length + 1], ou -1."""
    for index in range(min(max_length, len(text) - 1), 0, -1):
        if text[index].isspace():
            return index
    return -1
