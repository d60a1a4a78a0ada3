"""Configuração do pytest para o projeto Ponte Mensageria."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ e tests/ ao PYTHONPATH para imports absolutos (e fakes/)
tests_path = Path(__file__).parent
src_path = tests_path.parent / "src"
for path in (src_path, tests_path):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))


@pytest.fixture(autouse=True)
def _clear_settings_cache(monkeypatch: pytest.MonkeyPatch):
    """Isola settings carregadas de env entre testes."""
    from config.settings import get_base_settings, get_channels_settings, get_transport_settings

    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.delenv("CHANNELS_CONFIG_PATH", raising=False)
    getters = (get_base_settings, get_channels_settings, get_transport_settings)
    for getter in getters:
        getter.cache_clear()
    yield
    for getter in getters:
        getter.cache_clear()
