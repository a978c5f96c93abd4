"""
Preprocessor - Remove o boilerplate recorrente do caderno do DEJT.

Três passes, nesta ordem:
    1. Cabeçalho da primeira página (tribunal, título do diário, número, região)
    2. Cabeçalho repetido de cada página (número/ano + "Data da Disponibilização")
    3. Rodapé com o código de autenticidade do caderno

Cada pass é uma substituição global; sem o padrão, o texto volta intacto.
Os regex são presos ao layout do caderno (ver `patterns.py`), não tentam
detectar cabeçalhos de forma genérica.

Usage:
    texto = preprocess(pdf_to_text("caderno.pdf", return_text=True))

    # Padrões customizados
    config = PreprocessorConfig(footer_pattern=r"\\nPágina [0-9]+(?=\\n)")
    texto = Preprocessor(config).preprocess(texto)
"""

import logging
from typing import Optional

from pydantic import BaseModel, Field

from . import patterns
from .locator import compile_pattern

logger = logging.getLogger(__name__)


class PreprocessorConfig(BaseModel):
    """Regex de boilerplate usados pelo Preprocessor."""

    first_header_pattern: str = Field(
        default=patterns.FIRST_HEADER,
        description="Cabeçalho da primeira página (substituído por quebra de linha)"
    )
    page_header_pattern: str = Field(
        default=patterns.PAGE_HEADER,
        description="Cabeçalho de página após form feed (substituído por quebra de linha)"
    )
    footer_pattern: str = Field(
        default=patterns.FOOTER,
        description="Rodapé de autenticidade (removido, mantendo uma quebra de linha)"
    )


class Preprocessor:
    """
    Limpa o texto do caderno antes da segmentação.

    Os regex são compilados no construtor; um padrão inválido na
    configuração levanta InvalidPatternError imediatamente.
    """

    def __init__(self, config: Optional[PreprocessorConfig] = None):
        self.config = config or PreprocessorConfig()
        self._first_header = compile_pattern(self.config.first_header_pattern)
        self._page_header = compile_pattern(self.config.page_header_pattern)
        self._footer = compile_pattern(self.config.footer_pattern)

    def remove_first_header(self, text: str) -> str:
        return self._first_header.sub("\n", text)

    def remove_headers(self, text: str) -> str:
        return self._page_header.sub("\n", text)

    def remove_footers(self, text: str) -> str:
        return self._footer.sub("", text)

    def preprocess(self, text: str) -> str:
        """
        Aplica os três passes até o texto estabilizar.

        Remover um rodapé pode juntar as linhas de um cabeçalho de página
        que antes estavam separadas; repetir a composição garante que
        preprocess(preprocess(t)) == preprocess(t). Com os padrões do DEJT
        toda substituição encurta o texto; o laço para quando uma rodada
        não encurta mais.
        """
        rounds = 0
        while True:
            cleaned = self.remove_footers(
                self.remove_headers(self.remove_first_header(text))
            )
            rounds += 1
            shrunk = len(cleaned) < len(text)
            text = cleaned
            if not shrunk:
                break

        logger.debug(f"Preprocess estabilizou em {rounds} rodada(s)")
        return text


_default = Preprocessor()


def remove_first_header(text: str) -> str:
    """Remove o cabeçalho da primeira página."""
    return _default.remove_first_header(text)


def remove_headers(text: str) -> str:
    """Remove os cabeçalhos de página (exceto o primeiro)."""
    return _default.remove_headers(text)


def remove_footers(text: str) -> str:
    """Remove os rodapés de autenticidade."""
    return _default.remove_footers(text)


def preprocess(text: str) -> str:
    """Remove cabeçalhos e rodapés com os padrões do DEJT."""
    return _default.preprocess(text)
