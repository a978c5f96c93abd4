"""
LawsuitMatcher - Encontra as publicações de processos que citam um padrão.

Pipeline:
    texto -> localiza "Processo ... <CNJ>" -> segmenta -> descarta o último
    segmento -> corta em "Intimado(s)" -> filtra pelo padrão -> extrai o CNJ

O último segmento é sempre descartado: no caderno do DEJT ele é o resto do
documento depois do último delimitador, não uma publicação. É uma premissa
do formato do caderno (ver MatcherConfig.discard_last_segment).

Usage:
    from dejt.parsing import match_lawsuits, preprocess

    texto = preprocess(texto_bruto)
    for record in match_lawsuits(texto, "Banco do Brasil"):
        print(record.id, record.context[:80])
"""

import re
import logging
from typing import Optional

from pydantic import BaseModel, Field

from ..models.lawsuit import LawsuitRecord
from . import patterns
from .locator import compile_pattern, locate_patterns
from .models import InvalidPatternError, Segment
from .segmenter import segment

logger = logging.getLogger(__name__)


class MatcherConfig(BaseModel):
    """Configuração do LawsuitMatcher."""

    delimiter_pattern: str = Field(
        default=patterns.LAWSUIT_DELIMITER,
        description="Marca o início de cada publicação"
    )
    body_marker_pattern: str = Field(
        default=patterns.NOTIFICATION_BODY,
        description="Início do corpo da intimação; o contexto para antes dele"
    )
    id_pattern: str = Field(
        default=patterns.LAWSUIT_ID,
        description="Número do processo extraído do contexto"
    )
    ignore_case: bool = Field(
        default=True,
        description="Padrão do chamador ignora maiúsculas/minúsculas"
    )
    discard_last_segment: bool = Field(
        default=True,
        description="Descarta o segmento após o último delimitador (resto do caderno)"
    )


# Flags globais no início do padrão, ex: "(?i)", "(?s)(?m)"
_LEADING_FLAGS = re.compile(r"^(?:\(\?[aiLmsux]+\))*")


def word_bounded_pattern(pattern: str) -> str:
    """
    Exige que o padrão esteja entre caracteres não-palavra (ou borda do texto).

    Evita que "ACME" case dentro de "ACMEBANK". Flags globais do início
    do padrão ("(?i)...") continuam na frente da expressão montada.
    """
    flags = _LEADING_FLAGS.match(pattern).group(0)
    rest = pattern[len(flags):]
    return rf"{flags}(?<!\w)(?:{rest})(?!\w)"


class LawsuitMatcher:
    """
    Separa o caderno em publicações e filtra pelas que citam um padrão.

    Usage:
        matcher = LawsuitMatcher()
        records = matcher.match(texto, r"Fulano de Tal", word_bounded=True)

        # Caderno sem resto após a última publicação
        matcher = LawsuitMatcher(MatcherConfig(discard_last_segment=False))
    """

    def __init__(self, config: Optional[MatcherConfig] = None):
        self.config = config or MatcherConfig()
        self._delimiter = compile_pattern(self.config.delimiter_pattern)
        self._body_marker = compile_pattern(self.config.body_marker_pattern)
        self._id = compile_pattern(self.config.id_pattern)

    def compile_search(self, pattern: str, word_bounded: bool = True) -> re.Pattern:
        """Compila o padrão do chamador com as flags e a delimitação configuradas."""
        # Valida o padrão cru para o erro citar o que o chamador passou
        compile_pattern(pattern)
        flags = re.IGNORECASE if self.config.ignore_case else 0
        if word_bounded:
            try:
                return compile_pattern(word_bounded_pattern(pattern), flags)
            except InvalidPatternError as e:
                raise InvalidPatternError(pattern, e.reason) from e
        return compile_pattern(pattern, flags)

    def split(self, text: str) -> list[Segment]:
        """Segmenta o texto nos delimitadores de publicação."""
        matches = locate_patterns(text, [self._delimiter])
        segments = segment(text, matches)
        if self.config.discard_last_segment:
            segments = segments[:-1]
        return segments

    def truncate(self, text: str) -> str:
        """Mantém só o cabeçalho da publicação (antes de 'Intimado(s)')."""
        marker = self._body_marker.search(text)
        if marker is None:
            return text
        return text[:marker.start()]

    def extract_id(self, context: str) -> Optional[str]:
        """Extrai o número do processo; None se não houver."""
        found = self._id.search(context)
        return found.group(0) if found else None

    def match(self, text: str, pattern: str, word_bounded: bool = True) -> list[LawsuitRecord]:
        """
        Retorna as publicações cujo cabeçalho casa com o padrão.

        Args:
            text: Texto do caderno, já preprocessado
            pattern: Regex buscado
            word_bounded: Exige bordas de palavra em volta do padrão

        Returns:
            Lista de LawsuitRecord na ordem do caderno
        """
        search = self.compile_search(pattern, word_bounded)
        segments = self.split(text)

        records = []
        for seg in segments:
            context = self.truncate(seg.text)
            if not search.search(context):
                continue

            lawsuit_id = self.extract_id(context)
            if lawsuit_id is None:
                logger.debug(f"Publicação sem número de processo na posição {seg.start}")

            records.append(LawsuitRecord(id=lawsuit_id, pattern=pattern, context=context))

        logger.info(
            f"Matched lawsuits: {len(records)} of {len(segments)} entries "
            f"for pattern {pattern!r}"
        )
        return records


_default = LawsuitMatcher()


def match_lawsuits(text: str, pattern: str, word_bounded: bool = True) -> list[LawsuitRecord]:
    """Atalho para LawsuitMatcher().match com a configuração padrão."""
    return _default.match(text, pattern, word_bounded)
