"""Wrapper de httpx: pipeline de fetch JSON.

Por qué un wrapper:
- Traduce excepciones de httpx/json a la taxonomía del Core.
- Facilita testeo: se puede inyectar un `httpx.MockTransport`.

Sin caché, sin reintentos y sin override de timeout: httpx aplica su default.
"""

from __future__ import annotations

import json
from typing import Any

import httpx

from core.errors import DecodeError, HttpStatusError, InvalidArgument, NetworkError
from core.log_config import get_logger

logger = get_logger(__name__)

_SNIPPET_LENGTH = 120


def build_async_client(
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` sin headers propios ni `base_url`.

    Por qué un builder:
    - Un único punto donde se decide cómo se construye el cliente.
    - Los tests inyectan `transport` en lugar de hacer I/O real.
    """

    return httpx.AsyncClient(
        follow_redirects=True,
        transport=transport,
    )


def _snippet(body: bytes) -> str:
    return body[:_SNIPPET_LENGTH].decode("utf-8", errors="replace")


async def fetch_json(
    url: str,
    *,
    client: httpx.AsyncClient | None = None,
) -> Any:
    """GET `url` y devuelve el body parseado como JSON.

    Errores:
    - `NetworkError`: fallo de transporte (DNS, conexión, timeout).
    - `HttpStatusError`: status >= 400; el body no se lee.
    - `DecodeError`: body que no es JSON válido.
    - `InvalidArgument`: URL que httpx no puede interpretar.

    El caller valida la forma del documento.
    """

    if client is None:
        async with build_async_client() as owned:
            return await fetch_json(url, client=owned)

    logger.debug("http_get", url=url)
    try:
        async with client.stream("GET", url) as response:
            logger.debug("http_response", url=url, status_code=response.status_code)
            if response.status_code >= 400:
                raise HttpStatusError(code=response.status_code, url=url)
            body = await response.aread()
    except httpx.InvalidURL as exc:
        raise InvalidArgument(f"invalid URL {url!r}: {exc}") from exc
    except httpx.HTTPError as exc:
        raise NetworkError(url=url, cause=exc) from exc

    try:
        return json.loads(body)
    except ValueError as exc:
        # JSONDecodeError y UnicodeDecodeError heredan de ValueError.
        raise DecodeError(f"invalid JSON body: {exc}", url=url, snippet=_snippet(body)) from exc


class HttpxJsonFetcher:
    """Implementación de `JsonFetcher` sobre httpx.

    Cada llamada abre y cierra su propio cliente: los reportes no comparten
    estado de conexión entre sí.
    """

    def __init__(
        self,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._transport = transport

    async def fetch_json(self, url: str) -> Any:
        async with build_async_client(transport=self._transport) as client:
            return await fetch_json(url, client=client)
