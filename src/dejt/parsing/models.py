"""
Match/Segment Models - Estruturas de dados do localizador e do segmentador.

Offsets seguem a convenção 1-based inclusiva usada nos relatórios do
caderno: um match de "Processo" no início do texto tem start=1.
Para fatiar strings Python use a propriedade `slice`.
"""

from dataclasses import dataclass


class InvalidPatternError(ValueError):
    """Regex que não compila."""

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Padrão inválido {pattern!r}: {reason}")


@dataclass(frozen=True)
class Match:
    """
    Ocorrência de um padrão no texto.

    Attributes:
        pattern: Regex que gerou o match (serve como rótulo)
        start: Posição inicial (1-based, inclusiva)
        end: Posição final (1-based, inclusiva); start - 1 em match vazio
    """

    pattern: str
    start: int
    end: int

    @property
    def slice(self) -> tuple[int, int]:
        """Limites equivalentes 0-based, semiabertos."""
        return self.start - 1, self.end

    def to_dict(self) -> dict:
        return {"pattern": self.pattern, "start": self.start, "end": self.end}


@dataclass(frozen=True)
class Segment:
    """
    Trecho do texto entre dois matches consecutivos.

    Attributes:
        label: Padrão do match que abre o segmento
        text: Conteúdo do segmento
        start: Posição inicial no texto original (1-based)
        end: Posição final no texto original (1-based, inclusiva)
    """

    label: str
    text: str
    start: int
    end: int

    def to_dict(self) -> dict:
        return {
            "label": self.label,
            "text": self.text,
            "start": self.start,
            "end": self.end,
        }

    def __repr__(self) -> str:
        text_preview = self.text[:50] + "..." if len(self.text) > 50 else self.text
        return f"Segment({self.start}-{self.end}, '{text_preview}')"
