"""
Configuração centralizada do dejt.

Usa variáveis de ambiente com fallback para valores padrão.

Uso:
    from dejt.config import get_settings

    settings = get_settings()
    print(settings.pdftotext_bin)   # pdftotext
    print(settings.log_level)       # INFO
"""

import os
from dataclasses import dataclass, field
from functools import lru_cache


@dataclass
class Settings:
    """Configurações do sistema."""

    # Poppler
    pdftotext_bin: str = field(default_factory=lambda: os.getenv("PDFTOTEXT_BIN", "pdftotext"))

    # Logging (usado pelos scripts)
    log_level: str = field(default_factory=lambda: os.getenv("DEJT_LOG_LEVEL", "INFO"))

    # Encoding dos .txt gerados/lidos
    encoding: str = field(default_factory=lambda: os.getenv("DEJT_ENCODING", "utf-8"))


@lru_cache()
def get_settings() -> Settings:
    """Retorna singleton das configurações."""
    return Settings()


# Função helper para atualizar em runtime (testes)
def override_settings(**kwargs) -> Settings:
    """
    Sobrescreve configurações (útil para testes).

    As chaves são nomes de variáveis de ambiente:
        override_settings(pdftotext_bin="/opt/poppler/bin/pdftotext", dejt_log_level="DEBUG")
    """
    get_settings.cache_clear()
    for key, value in kwargs.items():
        os.environ[key.upper()] = str(value)
    return get_settings()
