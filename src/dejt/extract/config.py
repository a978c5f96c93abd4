"""
Configuração da conversão PDF -> texto.

Exemplo de uso:
    from dejt.extract.config import PdfToTextConfig, Converter

    config = PdfToTextConfig(converter=Converter.PDFTOTEXT, raw=True)
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class Converter(str, Enum):
    """
    Ferramenta de conversão.

    - PDFTOTEXT: Poppler; mantém o form feed entre páginas, que o
      Preprocessor usa para achar os cabeçalhos de página
    - DOCLING: Docling; sem form feed, os cabeçalhos de página ficam no texto
    """
    PDFTOTEXT = "pdftotext"
    DOCLING = "docling"


class PdfToTextConfig(BaseModel):
    """Configuração do conversor."""

    converter: Converter = Field(
        default=Converter.PDFTOTEXT,
        description="Ferramenta usada na conversão"
    )
    binary: Optional[str] = Field(
        default=None,
        description="Executável do pdftotext (None = settings.pdftotext_bin)"
    )
    raw: bool = Field(
        default=False,
        description="Usa o modo -raw do pdftotext (ordem do fluxo de conteúdo)"
    )
