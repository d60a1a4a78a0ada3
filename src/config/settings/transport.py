"""Settings do transporte HTTP usado para falar com os provedores."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_USER_AGENT = "PonteMensageria/1.0"


@dataclass(frozen=True)
class TransportSettings:
    """Configurações do transporte HTTP outbound.

    Attributes:
        http_timeout_seconds: Timeout de envio de mensagens
        media_timeout_seconds: Timeout de download/upload de mídia
        user_agent: User-Agent enviado aos provedores
        verify_ssl: Verificação de certificado TLS
    """

    http_timeout_seconds: float = 30.0
    media_timeout_seconds: float = 120.0
    user_agent: str = DEFAULT_USER_AGENT
    verify_ssl: bool = True

    def validate(self) -> list[str]:
        errors: list[str] = []
        if self.http_timeout_seconds <= 0:
            errors.append("HTTP_TIMEOUT_SECONDS deve ser positivo")
        if self.media_timeout_seconds <= 0:
            errors.append("MEDIA_TIMEOUT_SECONDS deve ser positivo")
        if not self.user_agent:
            errors.append("HTTP_USER_AGENT não pode ser vazio")
        return errors


def _parse_float(value: str, default: float) -> float:
    try:
        return float(value)
    except ValueError:
        return default


def _load_transport_from_env() -> TransportSettings:
    return TransportSettings(
        http_timeout_seconds=_parse_float(os.getenv("HTTP_TIMEOUT_SECONDS", "30"), 30.0),
        media_timeout_seconds=_parse_float(os.getenv("MEDIA_TIMEOUT_SECONDS", "120"), 120.0),
        user_agent=os.getenv("HTTP_USER_AGENT", DEFAULT_USER_AGENT),
        verify_ssl=os.getenv("HTTP_VERIFY_SSL", "true").lower() in ("true", "1", "yes"),
    )


@lru_cache(maxsize=1)
def get_transport_settings() -> TransportSettings:
    """Retorna instância cacheada de TransportSettings."""
    return _load_transport_from_env()
