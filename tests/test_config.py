"""Teste das configurações via variáveis de ambiente."""

import sys
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from dejt import config as config_module
from dejt.config import Settings, get_settings, override_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    for var in ("PDFTOTEXT_BIN", "DEJT_LOG_LEVEL", "DEJT_ENCODING"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults():
    settings = Settings()

    assert settings.pdftotext_bin == "pdftotext"
    assert settings.log_level == "INFO"
    assert settings.encoding == "utf-8"


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("PDFTOTEXT_BIN", "/opt/poppler/bin/pdftotext")
    monkeypatch.setenv("DEJT_LOG_LEVEL", "DEBUG")

    settings = get_settings()

    assert settings.pdftotext_bin == "/opt/poppler/bin/pdftotext"
    assert settings.log_level == "DEBUG"


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_override_settings(monkeypatch):
    # monkeypatch restaura o ambiente ao fim do teste
    monkeypatch.setenv("DEJT_ENCODING", "utf-8")

    settings = override_settings(dejt_encoding="latin-1")

    assert settings.encoding == "latin-1"
    assert get_settings() is settings


def test_override_replaces_cached_settings(monkeypatch):
    monkeypatch.setenv("PDFTOTEXT_BIN", "pdftotext")
    before = get_settings()

    after = override_settings(pdftotext_bin="/opt/poppler/bin/pdftotext")

    assert before.pdftotext_bin == "pdftotext"
    assert after.pdftotext_bin == "/opt/poppler/bin/pdftotext"
    assert get_settings() is after
    # Sem singleton de módulo que ficaria com a instância antiga
    assert not hasattr(config_module, "settings")
