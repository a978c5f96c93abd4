"""
dejt - Publicações de processos no Diário Eletrônico da Justiça do Trabalho.

Fluxo:
    PDF -> texto (pdftotext) -> preprocess -> match_lawsuits -> LawsuitRecord

Usage:
    from dejt import pdf_to_text, preprocess, match_lawsuits

    texto = preprocess(pdf_to_text("caderno.pdf", return_text=True))
    for record in match_lawsuits(texto, r"Banco do Brasil"):
        print(record.id)
"""

from .models import LawsuitRecord
from .parsing import (
    InvalidPatternError,
    Match,
    Segment,
    locate_patterns,
    segment,
    preprocess,
    match_lawsuits,
)
from .extract import pdf_to_text, find_html_styles

__version__ = "0.1.0"

__all__ = [
    "LawsuitRecord",
    "InvalidPatternError",
    "Match",
    "Segment",
    "locate_patterns",
    "segment",
    "preprocess",
    "match_lawsuits",
    "pdf_to_text",
    "find_html_styles",
]
