"""Taxonomía de errores del pipeline.

Por qué aquí:
- El Core define *qué* puede fallar; los adaptadores traducen excepciones de
  librerías (httpx, json, pydantic) a estos tipos.
- La capa de reportes solo necesita capturar `CatFactsError`.
"""

from __future__ import annotations


class CatFactsError(Exception):
    """Base de todos los errores esperados del pipeline."""

    @property
    def kind(self) -> str:
        return type(self).__name__

    def describe(self) -> str:
        """Línea corta `<Kind>: <mensaje>` para la consola de errores."""

        return f"{self.kind}: {self}"


class InvalidArgument(CatFactsError):
    """Entradas inválidas para componer una URL."""


class NetworkError(CatFactsError):
    """Fallo de transporte (DNS, conexión rechazada, timeout)."""

    def __init__(self, *, url: str, cause: BaseException) -> None:
        reason = str(cause) or type(cause).__name__
        super().__init__(f"request to {url} failed: {reason}")
        self.url = url
        self.cause = cause


class HttpStatusError(CatFactsError):
    """Respuesta con status >= 400. El body nunca se lee."""

    def __init__(self, *, code: int, url: str) -> None:
        super().__init__(f"HTTP {code} from {url}")
        self.code = code
        self.url = url


class DecodeError(CatFactsError):
    """Body que no es JSON válido o que no tiene la forma esperada."""

    def __init__(self, message: str, *, url: str | None = None, snippet: str | None = None) -> None:
        detail = message
        if snippet is not None:
            detail = f"{message} (body starts with {snippet!r})"
        super().__init__(detail)
        self.url = url
        self.snippet = snippet
