"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Valida la forma del JSON en el borde de parseo: un campo ausente se
  convierte en `DecodeError` en vez de fallar más tarde con un error ajeno.
- Documenta las respuestas de la API sin acoplar el Core a httpx.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
- Se crean por request y se descartan tras la proyección.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict

from core.errors import CatFactsError

QueryValue = Union[str, int, float]


class EndpointDescriptor(BaseModel):
    """Path + query de un endpoint bajo la base URL."""

    model_config = ConfigDict(frozen=True)

    path: str = Field(
        ...,
        min_length=1,
        description="Path literal del endpoint (p.ej. '/facts'), sin query string.",
    )
    query: dict[str, QueryValue] = Field(
        default_factory=dict,
        description="Parámetros de query; se escapan al componer la URL.",
    )

    @field_validator("path")
    @classmethod
    def _no_query_in_path(cls, value: str) -> str:
        if "?" in value:
            raise ValueError("path must not contain a query string")
        return value


class FactRecord(BaseModel):
    model_config = ConfigDict(extra="ignore")

    fact: str = Field(..., description="Texto del hecho.")
    # La fuente garantiza que coincide con len(fact); no se re-valida.
    length: int | None = Field(default=None, description="Longitud informada por la API.")


class FactCollection(BaseModel):
    """Respuesta de `/facts`. La metadata de paginación se ignora."""

    model_config = ConfigDict(extra="ignore")

    data: list[FactRecord] = Field(..., description="Hechos en el orden del servidor.")


class BreedRecord(BaseModel):
    model_config = ConfigDict(extra="ignore")

    breed: str = Field(..., description="Nombre de la raza.")
    country: str | None = None
    origin: str | None = None
    coat: str | None = None
    pattern: str | None = None


class BreedCollection(BaseModel):
    """Respuesta de `/breeds`."""

    model_config = ConfigDict(extra="ignore")

    data: list[BreedRecord] = Field(..., description="Razas en el orden del servidor.")


@dataclass
class ReportResult:
    """Resultado explícito de un reporte: líneas formateadas o un error.

    Por qué un dataclass y no una excepción:
    - Cada reporte termina en éxito o fallo sin propagar nada al proceso.
    - El hook de completado decide cómo presentarlo (stdout/stderr).
    """

    report: str
    label: str
    lines: list[str] = field(default_factory=list)
    error: CatFactsError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
