"""Contrato del pipeline de fetch JSON.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite que la capa de reportes use httpx en producción y stubs en tests
  sin acoplar el Core a una implementación concreta.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class JsonFetcher(Protocol):
    """Contrato mínimo para obtener un documento JSON.

    Reglas de diseño:
    - `fetch_json` es asíncrono porque hace I/O (HTTP).
    - Falla con `NetworkError`, `HttpStatusError`, `DecodeError` o
      `InvalidArgument`; nunca valida el esquema del documento.
    """

    async def fetch_json(self, url: str) -> Any:
        """Devuelve el body parseado de un GET a `url`."""

        ...
