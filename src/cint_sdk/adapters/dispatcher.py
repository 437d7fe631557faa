"""Dispatcher HTTP: el único punto por el que sale cada request.

Aquí se toman todas las decisiones de protocolo:
- negociación de content type por patrón de path (JSON vs XML)
- Authorization condicional (paths públicos sin auth)
- serialización del cuerpo JSON
- corto circuito en 204 y parseo según el content type elegido
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass, field
from typing import Any, Awaitable

import httpx

from cint_sdk.adapters.http_client import build_async_client
from cint_sdk.core.config import CintSettings
from cint_sdk.core.domain.models import Credentials, RequestDescriptor
from cint_sdk.core.errors import (
    AuthenticationRequiredError,
    InvalidResponseError,
    TransportError,
)

logger = logging.getLogger(__name__)

CONTENT_TYPE_JSON = "application/json"
CONTENT_TYPE_XML = "application/xml"

PUBLIC_PATHS: frozenset[str] = frozenset({"/", "/genders", "/statuses", "/transaction_types"})


@dataclass(frozen=True)
class ContentRule:
    """Regla de negociación: si `pattern` matchea el path, se usa `content_type`."""

    pattern: re.Pattern[str]
    content_type: str

    def matches(self, path: str) -> bool:
        return self.pattern.search(path) is not None


# Evaluadas en orden; la primera que matchea gana.
CONTENT_RULES: tuple[ContentRule, ...] = (
    ContentRule(re.compile(r"^/panels/[^/]+/questions$"), CONTENT_TYPE_XML),
)


def select_content_type(path: str, rules: tuple[ContentRule, ...] = CONTENT_RULES) -> str:
    for rule in rules:
        if rule.matches(path):
            return rule.content_type
    return CONTENT_TYPE_JSON


def requires_auth(path: str) -> bool:
    return path not in PUBLIC_PATHS


@dataclass(frozen=True)
class PreparedRequest:
    """Request listo para enviar (estado Built)."""

    method: str
    path: str
    content_type: str
    headers: dict[str, str] = field(default_factory=dict)
    content: bytes | None = None

    def loggable_headers(self) -> dict[str, str]:
        return {k: ("Basic ***" if k == "Authorization" else v) for k, v in self.headers.items()}


class HttpDispatcher:
    """Implementación httpx del contrato `Dispatcher`.

    `dispatch` prepara de forma síncrona y devuelve una corrutina. Todo error
    de dispatch (sin credenciales, red, parseo) llega solo al hacer `await`;
    `prepare` sí lanza `AuthenticationRequiredError` de forma directa.
    """

    def __init__(
        self,
        settings: CintSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or CintSettings()
        self._transport = transport

    @property
    def settings(self) -> CintSettings:
        return self._settings

    def prepare(self, request: RequestDescriptor, credentials: Credentials | None) -> PreparedRequest:
        content_type = select_content_type(request.path)
        headers: dict[str, str] = {"Accept": content_type}

        if requires_auth(request.path):
            if credentials is None:
                raise AuthenticationRequiredError(
                    f"Path `{request.path}` requires authentication; call `set_auth(key, secret)` first."
                )
            headers["Authorization"] = credentials.authorization_header()

        content: bytes | None = None
        if request.body is not None:
            serialized = json.dumps(request.body, ensure_ascii=False, separators=(",", ":"))
            content = serialized.encode("utf-8")
            headers["Content-Type"] = CONTENT_TYPE_JSON
            headers["Content-Length"] = str(len(content))
            logger.debug("cint_request_body", extra={"http_path": request.path, "body": serialized})

        prepared = PreparedRequest(
            method=request.method.upper(),
            path=request.path,
            content_type=content_type,
            headers=headers,
            content=content,
        )
        logger.debug(
            "cint_request_params",
            extra={
                "http_method": prepared.method,
                "http_host": self._settings.host,
                "http_path": prepared.path,
                "http_headers": prepared.loggable_headers(),
            },
        )
        return prepared

    def dispatch(self, request: RequestDescriptor, credentials: Credentials | None) -> Awaitable[Any]:
        try:
            prepared = self.prepare(request, credentials)
        except AuthenticationRequiredError as exc:
            # Falla en el await, como cualquier otro error de dispatch.
            return _fail(exc)
        return self._send(prepared)

    async def _send(self, prepared: PreparedRequest) -> Any:
        try:
            async with build_async_client(self._settings, transport=self._transport) as client:
                async with client.stream(
                    prepared.method,
                    prepared.path,
                    headers=prepared.headers,
                    content=prepared.content,
                ) as response:
                    status_code = response.status_code
                    logger.debug(
                        "cint_response_status",
                        extra={"http_path": prepared.path, "status_code": status_code},
                    )
                    if status_code == httpx.codes.NO_CONTENT:
                        return {}
                    await response.aread()
                    raw = response.text
        except httpx.TransportError as exc:
            logger.debug(
                "cint_transport_error",
                extra={"http_path": prepared.path, "error": type(exc).__name__},
            )
            raise TransportError(f"{prepared.method} {prepared.path} failed: {exc}") from exc

        return _parse_body(prepared, status_code, raw)


def _parse_body(prepared: PreparedRequest, status_code: int, raw: str) -> Any:
    if prepared.content_type == CONTENT_TYPE_XML:
        logger.debug("cint_response_raw", extra={"http_path": prepared.path, "payload": raw})
        return raw

    try:
        data = json.loads(raw, parse_constant=_reject_constant)
    except ValueError as exc:
        logger.debug("cint_response_invalid", extra={"http_path": prepared.path, "payload": raw})
        raise InvalidResponseError(
            f"Invalid JSON response: {raw}",
            raw=raw,
            status_code=status_code,
        ) from exc

    logger.debug("cint_response", extra={"http_path": prepared.path, "payload": data})
    return data


def _reject_constant(token: str) -> Any:
    # NaN / Infinity / -Infinity no son JSON válido.
    raise ValueError(f"invalid JSON constant: {token}")


async def _fail(exc: Exception) -> Any:
    raise exc
