"""
Modelo Pydantic para as publicações encontradas no caderno.

Uso:
    from dejt.models.lawsuit import LawsuitRecord

    record = LawsuitRecord(id="0010977-62.2021.5.02.0025", pattern="ACME", context="...")
    record.model_dump()
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class LawsuitRecord(BaseModel):
    """Publicação de um processo que casou com o padrão buscado."""

    model_config = ConfigDict(frozen=True)

    id: Optional[str] = Field(
        default=None,
        description="Número do processo (prefixo de classe opcional + CNJ). None se não encontrado.",
        examples=["0010977-62.2021.5.02.0025", "RTOrd-0010977-62.2021.5.02.0025"]
    )
    pattern: str = Field(
        ...,
        description="Padrão buscado, como informado pelo chamador."
    )
    context: str = Field(
        ...,
        description="Cabeçalho da publicação (texto antes de 'Intimado(s)')."
    )

    @property
    def has_id(self) -> bool:
        return self.id is not None
