"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) para los
  resultados que cruzan capas (pipeline -> CLI -> exportador JSON).
- La validación en sí sigue siendo un `bool`; estos modelos solo la explican.

Nota:
- Estos modelos describen *qué* se validó, no *cómo* se valida.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field, computed_field

from core.domain.document_type import DocumentType


class BatchEntry(BaseModel):
    """Fila cruda de un archivo de lote, tal como se leyó."""

    document_type: str | None = Field(
        default=None,
        description="Tipo declarado en la fila (texto libre); vacío si la fila solo trae el número.",
    )
    document_number: str = Field(
        ...,
        description="Número de documento, sin normalizar.",
    )
    line: int | None = Field(
        default=None,
        ge=1,
        description="Línea (1-based) del archivo de origen.",
    )


class DocumentCheck(BaseModel):
    """Resultado explicado de validar un único documento.

    Por qué existe:
    - `is_valid` es exactamente el veredicto del validador.
    - `reason` indica la primera regla que falló, útil para reportes.
    """

    document_type: DocumentType | None = Field(
        default=None,
        description="Tipo resuelto; `None` si el tipo no fue reconocido.",
    )
    document_number: str = Field(
        default="",
        description="Número evaluado, tal como fue recibido.",
    )
    is_valid: bool = Field(
        ...,
        description="Veredicto de validación.",
    )
    reason: str | None = Field(
        default=None,
        description="Regla que rechazó el documento (length, non_digit, check_digit, ...).",
    )
    line: int | None = Field(
        default=None,
        ge=1,
        description="Línea de origen cuando el documento viene de un lote.",
    )


class BatchReport(BaseModel):
    """Agregado de un lote de validaciones."""

    checks: list[DocumentCheck] = Field(
        default_factory=list,
        description="Resultados en el orden del archivo de entrada.",
    )
    generated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Momento de generación del reporte (UTC).",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total(self) -> int:
        return len(self.checks)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def valid_count(self) -> int:
        return sum(1 for c in self.checks if c.is_valid)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def invalid_count(self) -> int:
        return self.total - self.valid_count
