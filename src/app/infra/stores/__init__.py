"""Stores: implementações concretas de persistência.

Módulos disponíveis:
    - memory_stores: canais (memória/YAML) e backend de mensagens em memória
"""

from __future__ import annotations

from app.infra.stores.memory_stores import MemoryChannelStore, MemoryMessageBackend

__all__ = [
    "MemoryChannelStore",
    "MemoryMessageBackend",
]
