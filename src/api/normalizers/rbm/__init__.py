"""Normalizer RBM: mensagens de texto recebidas via RCS Business Messaging."""

from .normalizer import RbmNormalizer
from .payload import RbmEventPayload

__all__ = [
    "RbmEventPayload",
    "RbmNormalizer",
]
