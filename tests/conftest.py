"""Configuração do pytest para o núcleo do CRM jurídico."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def _reset_settings_cache():
    """Isola testes que alteram env das settings cacheadas."""
    from config.settings import get_agenda_settings, get_base_settings

    get_agenda_settings.cache_clear()
    get_base_settings.cache_clear()
    yield
    get_agenda_settings.cache_clear()
    get_base_settings.cache_clear()
