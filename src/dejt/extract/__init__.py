"""
Módulo de Extração - Conversão do caderno para texto.

Stack:
- pdftotext (Poppler): PDF -> texto com form feed entre páginas
- Docling: alternativa opcional (extra "docling")
- BeautifulSoup: blocos <style> de cadernos em HTML

Uso básico:
    from dejt.extract import pdf_to_text

    texto = pdf_to_text("caderno.pdf", return_text=True)
"""

from .config import Converter, PdfToTextConfig
from .pdf_text import build_pdftotext_command, pdf_to_text
from .html_styles import find_html_styles

__all__ = [
    # Config
    "Converter",
    "PdfToTextConfig",
    # Conversão
    "build_pdftotext_command",
    "pdf_to_text",
    "find_html_styles",
]
