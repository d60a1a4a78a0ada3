"""Normalizers por canal: conversão de payloads externos para eventos canônicos.

Estrutura:
- common.py: MessageKind, parsing de timestamp e URN
- whatsapp/: lote {messages, statuses} do WhatsApp
- rbm/: evento único do RCS Business Messaging

Cada canal tem seu próprio schema e normalizer, mantendo SRP.
"""

from .common import MessageKind, TimestampEncoding, new_urn, parse_timestamp

__all__ = [
    "MessageKind",
    "TimestampEncoding",
    "new_urn",
    "parse_timestamp",
]
