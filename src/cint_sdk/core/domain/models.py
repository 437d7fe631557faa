"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- Las proyecciones sobre respuestas del servidor fallan temprano si el
  payload no tiene la forma esperada.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
"""

from __future__ import annotations

import base64
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, SecretStr, ValidationError, model_validator
from pydantic.config import ConfigDict

from cint_sdk.core.errors import ConfigurationError, InvalidResponseError


class AuthState(str, Enum):
    """Estado de autenticación del cliente."""

    UNAUTHENTICATED = "unauthenticated"
    AUTHENTICATED = "authenticated"


class Credentials(BaseModel):
    """Par identificador/secreto con el token Basic ya codificado.

    El token se calcula una sola vez y se reutiliza en cada dispatch.
    """

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., min_length=1, description="Identificador de la credencial.")
    secret: SecretStr = Field(..., description="Secreto de la credencial.")
    token: SecretStr = Field(..., description="base64(key:secret) para HTTP Basic.")

    @classmethod
    def from_pair(cls, key: str | None, secret: str | SecretStr | None) -> Credentials:
        if isinstance(secret, SecretStr):
            secret = secret.get_secret_value()
        if not key or not secret:
            raise ConfigurationError("options `key` and `secret` are required")

        token = base64.b64encode(f"{key}:{secret}".encode("utf-8")).decode("ascii")
        return cls(key=key, secret=SecretStr(secret), token=SecretStr(token))

    def authorization_header(self) -> str:
        return f"Basic {self.token.get_secret_value()}"


@dataclass(frozen=True)
class RequestDescriptor:
    """Valor transitorio de una llamada: verbo, path y cuerpo opcional."""

    method: str = "GET"
    path: str = "/"
    body: Any = None


class Link(BaseModel):
    """Link hipermedia devuelto por la API."""

    model_config = ConfigDict(extra="allow")

    rel: str = Field(..., description="Relación del link (p.ej. 'self', 'start').")
    href: str = Field(..., description="URL destino.")
    type: str | None = Field(default=None, description="Content type anunciado.")


class CandidateRespondent(BaseModel):
    """Proyección de solo lectura sobre un candidate respondent.

    Por qué existe:
    - El caller solo necesita `params` y `link_start`; el resto del payload
      se conserva tal cual para trazabilidad.
    - Invariante: `links` contiene exactamente un link con `rel == "start"`.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    public_id: str | None = Field(default=None, description="Id público del candidato.")
    respondent_params: str | None = Field(
        default=None,
        description="Parámetros del respondent (query string).",
    )
    quota_ids: list[Any] | None = Field(default=None, description="Cuotas asociadas.")
    allow_routing: bool | None = Field(default=None, description="Permite routing entre encuestas.")
    min_cpi: float | None = Field(default=None, description="CPI mínimo aceptado.")
    auto_accept_invitation: bool | None = Field(
        default=None,
        description="Si la invitación se acepta automáticamente.",
    )
    links: list[Link] = Field(..., description="Links hipermedia del recurso.")

    @model_validator(mode="after")
    def _exactly_one_start_link(self) -> CandidateRespondent:
        starts = [link for link in self.links if link.rel == "start"]
        if len(starts) != 1:
            raise ValueError(f"expected exactly one `start` link, found {len(starts)}")
        return self

    @classmethod
    def from_payload(cls, payload: Any) -> CandidateRespondent:
        """Construye la proyección o falla con `InvalidResponseError`."""

        if not isinstance(payload, dict):
            raise InvalidResponseError(
                "Invalid candidate respondent payload",
                raw=str(payload),
            )
        try:
            return cls.model_validate(payload)
        except ValidationError as exc:
            raise InvalidResponseError(
                f"Invalid candidate respondent payload: {exc.error_count()} error(s)",
                raw=str(payload),
            ) from exc

    @property
    def params(self) -> str | None:
        return self.respondent_params

    @property
    def link_start(self) -> str:
        return next(link.href for link in self.links if link.rel == "start")
