"""
PatternLocator - Localiza todas as ocorrências de vários regex num texto.

Cada padrão é buscado de forma independente (seu próprio finditer) e os
resultados são unidos e ordenados pela posição inicial. Empates mantêm
a ordem em que os padrões foram passados (sort estável).

Usage:
    matches = locate_patterns(texto, [r"Processo", r"Intimado\\(s\\)"])
    for m in matches:
        print(m.start, m.end, m.pattern)
"""

import re
import logging
from typing import Sequence, Union

from .models import InvalidPatternError, Match

logger = logging.getLogger(__name__)

PatternLike = Union[str, re.Pattern]


def compile_pattern(pattern: PatternLike, flags: int = 0) -> re.Pattern:
    """
    Compila um regex, convertendo erros de sintaxe em InvalidPatternError.

    Padrões já compilados são devolvidos como estão (flags ignoradas).
    """
    if isinstance(pattern, re.Pattern):
        return pattern
    try:
        return re.compile(pattern, flags)
    except re.error as e:
        raise InvalidPatternError(pattern, str(e)) from e


def locate_patterns(text: str, patterns: Sequence[PatternLike]) -> list[Match]:
    """
    Encontra todas as ocorrências de um ou mais padrões.

    Args:
        text: Texto de entrada
        patterns: Sequência ordenada de regex (a ordem decide empates)

    Returns:
        Lista de Match ordenada por start; vazia se nada casar

    Raises:
        InvalidPatternError: Se algum padrão não compilar
    """
    # Compila tudo antes de buscar: um padrão inválido falha a chamada inteira
    compiled = [compile_pattern(p) for p in patterns]

    matches: list[Match] = []
    for regex in compiled:
        for m in regex.finditer(text):
            matches.append(Match(pattern=regex.pattern, start=m.start() + 1, end=m.end()))

    # sorted() é estável: mesmo start preserva a ordem dos padrões
    matches = sorted(matches, key=lambda m: m.start)

    logger.debug(f"Located {len(matches)} matches for {len(compiled)} patterns")
    return matches
