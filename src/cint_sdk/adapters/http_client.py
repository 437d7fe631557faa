"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza base URL, timeouts y headers comunes de todas las llamadas.
- Facilita testeo: se puede inyectar un `httpx.MockTransport`.
"""

from __future__ import annotations

import httpx

from cint_sdk.core.config import CintSettings


def build_async_client(
    settings: CintSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` para un único dispatch.

    Por qué un builder:
    - El esquema (http/https) y el host salen de settings: ambos transportes
      comparten el mismo contrato de envío.
    - Un cliente por llamada: no hay pooling ni estado compartido entre dispatches.
    """

    settings = settings or CintSettings()
    return httpx.AsyncClient(
        base_url=settings.base_url,
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        headers={"User-Agent": settings.user_agent},
        transport=transport,
    )
