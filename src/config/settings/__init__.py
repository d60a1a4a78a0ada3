"""Agregador de settings do Ponte Mensageria.

Re-exporta todas as settings e funções de cada módulo.
"""

from __future__ import annotations

from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.channels import ChannelsSettings, get_channels_settings
from config.settings.transport import TransportSettings, get_transport_settings

__all__ = [
    "BaseSettings",
    "ChannelsSettings",
    "Environment",
    "TransportSettings",
    "get_base_settings",
    "get_channels_settings",
    "get_transport_settings",
]
