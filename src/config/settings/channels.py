"""Settings da fonte de configuração de canais."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path


@dataclass(frozen=True)
class ChannelsSettings:
    """Configuração de onde carregar os canais.

    Attributes:
        config_path: Arquivo YAML com a lista de canais. Vazio = nenhum canal
            pré-carregado (canais adicionados programaticamente).
    """

    config_path: str = ""

    @property
    def enabled(self) -> bool:
        return bool(self.config_path)

    def validate(self) -> list[str]:
        errors: list[str] = []
        if self.config_path and not Path(self.config_path).is_file():
            errors.append(f"CHANNELS_CONFIG_PATH não encontrado: {self.config_path}")
        return errors


@lru_cache(maxsize=1)
def get_channels_settings() -> ChannelsSettings:
    """Retorna instância cacheada de ChannelsSettings."""
    return ChannelsSettings(config_path=os.getenv("CHANNELS_CONFIG_PATH", "").strip())
