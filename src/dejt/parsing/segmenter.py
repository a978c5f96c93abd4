"""
Segmenter - Corta o texto nas posições devolvidas por locate_patterns.

O segmento i vai do início do match i até o caractere anterior ao
match i+1; o último vai até o fim do texto. Texto antes do primeiro
match não pertence a nenhum segmento.
"""

from typing import Sequence

from .models import Match, Segment


def segment(text: str, matches: Sequence[Match]) -> list[Segment]:
    """
    Particiona o texto a partir de matches ordenados por start.

    Args:
        text: Texto original
        matches: Matches ordenados (saída de locate_patterns)

    Returns:
        Um Segment por match; lista vazia se não houver matches
    """
    segments = []
    for i, match in enumerate(matches):
        if i + 1 < len(matches):
            end = matches[i + 1].start - 1
        else:
            end = len(text)

        segments.append(
            Segment(
                label=match.pattern,
                text=text[match.start - 1:end],
                start=match.start,
                end=end,
            )
        )
    return segments
