"""Composición de URLs de request.

Función pura: no hace I/O ni lee configuración.
"""

from __future__ import annotations

from typing import Mapping
from urllib.parse import quote

from core.domain.models import EndpointDescriptor, QueryValue
from core.errors import InvalidArgument


def build_url(base: str, path: str, params: Mapping[str, QueryValue] | None = None) -> str:
    """Une `base` y `path` con exactamente una barra y agrega la query.

    Los pares `key=value` respetan el orden de iteración de `params` para que
    la URL sea determinista.
    """

    if not base or not base.strip():
        raise InvalidArgument("base URL must not be empty")
    if not path or not path.strip():
        raise InvalidArgument("path must not be empty")
    if "?" in path:
        raise InvalidArgument(f"path must not contain a query string: {path!r}")

    url = f"{base.rstrip('/')}/{path.lstrip('/')}"
    if params:
        query = "&".join(f"{quote(str(key), safe='')}={quote(str(value), safe='')}" for key, value in params.items())
        url = f"{url}?{query}"
    return url


def build_endpoint_url(base: str, endpoint: EndpointDescriptor) -> str:
    return build_url(base, endpoint.path, endpoint.query)
