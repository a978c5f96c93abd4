"""
Parsing module - Segmentação do caderno do DEJT por regex.

Localiza os delimitadores de publicação, corta o texto em segmentos e
filtra as publicações que citam um padrão. Tudo determinístico, em memória.

Usage:
    from dejt.parsing import preprocess, match_lawsuits

    texto = preprocess(texto_bruto)
    records = match_lawsuits(texto, r"Fulano de Tal")

    # Peças individuais
    from dejt.parsing import locate_patterns, segment

    matches = locate_patterns(texto, [r"Processo", r"Intimado\\(s\\)"])
    segments = segment(texto, matches)
"""

from .models import (
    InvalidPatternError,
    Match,
    Segment,
)
from .locator import compile_pattern, locate_patterns
from .segmenter import segment
from .preprocessor import (
    Preprocessor,
    PreprocessorConfig,
    preprocess,
    remove_first_header,
    remove_headers,
    remove_footers,
)
from .lawsuit_matcher import (
    LawsuitMatcher,
    MatcherConfig,
    match_lawsuits,
    word_bounded_pattern,
)

__all__ = [
    # Models
    "InvalidPatternError",
    "Match",
    "Segment",
    # Locator / Segmenter
    "compile_pattern",
    "locate_patterns",
    "segment",
    # Preprocessor
    "Preprocessor",
    "PreprocessorConfig",
    "preprocess",
    "remove_first_header",
    "remove_headers",
    "remove_footers",
    # Matcher
    "LawsuitMatcher",
    "MatcherConfig",
    "match_lawsuits",
    "word_bounded_pattern",
]
