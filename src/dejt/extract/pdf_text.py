"""
Conversão do caderno em PDF para texto.

Por padrão chama o `pdftotext` do Poppler num subprocesso. O texto sai
com form feed ("\\f") entre as páginas, que é o que o Preprocessor espera.

Exemplo de uso:
    from dejt.extract import pdf_to_text

    # Grava caderno.txt ao lado do PDF e devolve o caminho
    path = pdf_to_text("caderno.pdf")

    # Só as páginas 2 a 10, devolvendo o texto (o .txt é apagado)
    texto = pdf_to_text("caderno.pdf", start_page=2, end_page=10, return_text=True)
"""

import logging
import subprocess
from pathlib import Path
from typing import Optional, Union

from ..config import get_settings
from .config import Converter, PdfToTextConfig

logger = logging.getLogger(__name__)


def build_pdftotext_command(
    file: Path,
    new_file: Path,
    start_page: Optional[int] = None,
    end_page: Optional[int] = None,
    raw: bool = False,
    binary: Optional[str] = None,
) -> list[str]:
    """Monta a linha de comando do pdftotext."""
    command = [binary or get_settings().pdftotext_bin]
    if raw:
        command.append("-raw")
    if start_page is not None:
        command += ["-f", str(start_page)]
    if end_page is not None:
        command += ["-l", str(end_page)]
    command += [str(file), str(new_file)]
    return command


def _convert_with_docling(file: Path, new_file: Path, encoding: str):
    from docling.document_converter import DocumentConverter

    result = DocumentConverter().convert(str(file))
    new_file.write_text(result.document.export_to_text(), encoding=encoding)


def pdf_to_text(
    file: Union[str, Path],
    new_file: Optional[Union[str, Path]] = None,
    start_page: Optional[int] = None,
    end_page: Optional[int] = None,
    raw: bool = False,
    return_text: bool = False,
    config: Optional[PdfToTextConfig] = None,
) -> str:
    """
    Converte um PDF em texto.

    Args:
        file: Caminho do PDF
        new_file: Onde gravar o .txt (padrão: mesmo nome com .txt)
        start_page: Primeira página convertida (None = primeira)
        end_page: Última página convertida (None = última)
        raw: Usa o modo -raw do pdftotext
        return_text: Se True, devolve o texto e apaga o .txt gerado
        config: Conversor e executável

    Returns:
        O texto convertido (return_text=True) ou o caminho absoluto do .txt

    Raises:
        FileNotFoundError: PDF inexistente ou pdftotext fora do PATH
        ValueError: Arquivo sem extensão .pdf
        subprocess.CalledProcessError: pdftotext terminou com erro
    """
    config = config or PdfToTextConfig()
    settings = get_settings()

    file = Path(file)
    if not file.exists():
        raise FileNotFoundError(f"Arquivo não encontrado: {file}")
    if file.suffix.lower() != ".pdf":
        raise ValueError(f"Arquivo não é PDF: {file}")

    new_file = Path(new_file).resolve() if new_file else file.with_suffix(".txt")

    if config.converter == Converter.DOCLING:
        if start_page is not None or end_page is not None or raw or config.raw:
            logger.warning("Docling converte o documento inteiro; start_page, end_page e raw ignorados")
        logger.info(f"Convertendo {file.name} com Docling")
        _convert_with_docling(file, new_file, settings.encoding)
    else:
        command = build_pdftotext_command(
            file,
            new_file,
            start_page=start_page,
            end_page=end_page,
            raw=raw or config.raw,
            binary=config.binary,
        )
        logger.info(f"Convertendo {file.name} com pdftotext")
        logger.debug(f"Comando: {' '.join(command)}")
        subprocess.run(command, check=True, capture_output=True)

    if return_text:
        text = new_file.read_text(encoding=settings.encoding)
        new_file.unlink()
        logger.info(f"Texto extraído: {len(text)} caracteres")
        return text

    return str(new_file.resolve())
