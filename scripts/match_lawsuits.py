"""
Busca publicações de processos num caderno do DEJT.

Uso:
    python scripts/match_lawsuits.py --input data/caderno.pdf --pattern "Banco do Brasil"
    python scripts/match_lawsuits.py --input data/caderno.txt --pattern "ACME" --no-word-bounded
    python scripts/match_lawsuits.py --input data/caderno.pdf --pattern "ACME" --start-page 2 --output out.json
"""

import json
import sys
import argparse
import logging
import subprocess
from pathlib import Path

# Adiciona src ao path
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from dejt.config import get_settings
from dejt.extract import pdf_to_text
from dejt.parsing import match_lawsuits, preprocess

logger = logging.getLogger(__name__)


def load_text(input_path: Path, args: argparse.Namespace) -> str:
    """Lê o .txt ou converte o PDF."""
    if input_path.suffix.lower() == ".pdf":
        return pdf_to_text(
            input_path,
            start_page=args.start_page,
            end_page=args.end_page,
            raw=args.raw,
            return_text=True,
        )
    return input_path.read_text(encoding=get_settings().encoding)


def main():
    parser = argparse.ArgumentParser(description="Busca processos num caderno do DEJT")
    parser.add_argument("--input", "-i", required=True, help="Caderno (.pdf ou .txt)")
    parser.add_argument("--pattern", "-p", required=True, help="Regex buscado nas publicações")
    parser.add_argument("--no-word-bounded", action="store_true", help="Permite casar dentro de palavras")
    parser.add_argument("--no-preprocess", action="store_true", help="Não remove cabeçalhos/rodapés")
    parser.add_argument("--start-page", type=int, default=None, help="Primeira página (PDF)")
    parser.add_argument("--end-page", type=int, default=None, help="Última página (PDF)")
    parser.add_argument("--raw", action="store_true", help="Modo -raw do pdftotext")
    parser.add_argument("--output", "-o", help="Arquivo JSON de saída (padrão: stdout)")
    args = parser.parse_args()

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(levelname)s - %(message)s"
    )

    input_path = Path(args.input)
    try:
        text = load_text(input_path, args)
        if not args.no_preprocess:
            text = preprocess(text)
        records = match_lawsuits(text, args.pattern, word_bounded=not args.no_word_bounded)
    except (FileNotFoundError, ValueError, subprocess.CalledProcessError) as e:
        logger.error(f"Falha ao processar {input_path}: {e}")
        return 1

    payload = json.dumps([r.model_dump() for r in records], ensure_ascii=False, indent=2)

    if args.output:
        Path(args.output).write_text(payload, encoding=settings.encoding)
        logger.info(f"{len(records)} publicações salvas em {args.output}")
    else:
        print(payload)

    return 0


if __name__ == "__main__":
    sys.exit(main())
