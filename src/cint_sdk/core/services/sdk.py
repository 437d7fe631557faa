"""Facade de endpoints de la API de gestión de paneles.

Por qué métodos no `async`:
- Validan argumentos y configuración de forma síncrona: el caller ve el error
  en la llamada, antes de que exista ningún awaitable.
- Devuelven el awaitable del dispatcher; red, parseo y autenticación fallan
  solo al hacer `await`.
"""

from __future__ import annotations

import logging
from typing import Any, Awaitable, Mapping
from urllib.parse import urlencode

import httpx
from pydantic import SecretStr

from cint_sdk.adapters.dispatcher import HttpDispatcher
from cint_sdk.core.config import CintSettings
from cint_sdk.core.domain.models import (
    AuthState,
    CandidateRespondent,
    Credentials,
    RequestDescriptor,
)
from cint_sdk.core.errors import ArgumentError, ConfigurationError
from cint_sdk.core.interfaces.dispatcher import Dispatcher

logger = logging.getLogger(__name__)

_SUPPORTED_PROTOCOLS = ("http", "https")


def _require(value: Any, name: str) -> None:
    if not value:
        raise ArgumentError(f"Argument `{name}` is required.")


class CintSDK:
    """Cliente para un host de Cint.

    Estado de autenticación:
    - Empieza autenticado solo si hay `key` y `secret` (argumentos o settings).
    - `set_auth` hace la transición más tarde.

    Los `key` omitidos se resuelven contra el resource key por defecto:
    `panel_key` si está configurado, si no el identificador de la credencial.
    """

    def __init__(
        self,
        settings: CintSettings | None = None,
        *,
        protocol: str | None = None,
        key: str | None = None,
        secret: str | None = None,
        panel_key: str | None = None,
        dispatcher: Dispatcher | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        settings = settings or CintSettings()
        overrides: dict[str, Any] = {
            "protocol": protocol,
            "key": key,
            "secret": SecretStr(secret) if secret is not None else None,
            "panel_key": panel_key,
        }
        overrides = {name: value for name, value in overrides.items() if value is not None}
        if overrides:
            settings = settings.model_copy(update=overrides)

        if settings.protocol not in _SUPPORTED_PROTOCOLS:
            raise ConfigurationError(
                f"Unsupported protocol `{settings.protocol}`; expected one of {_SUPPORTED_PROTOCOLS}."
            )

        self._settings = settings
        self._dispatcher: Dispatcher = dispatcher or HttpDispatcher(settings, transport=transport)
        self._panel_key = settings.panel_key
        self._credentials: Credentials | None = None

        if settings.key or settings.secret:
            self.set_auth(settings.key, settings.secret)

    @property
    def settings(self) -> CintSettings:
        return self._settings

    @property
    def auth_state(self) -> AuthState:
        if self._credentials is None:
            return AuthState.UNAUTHENTICATED
        return AuthState.AUTHENTICATED

    @property
    def key(self) -> str | None:
        """Resource key por defecto de las operaciones sobre un panel."""

        if self._panel_key:
            return self._panel_key
        if self._credentials is not None:
            return self._credentials.key
        return None

    def set_auth(self, key: str | None, secret: str | SecretStr | None) -> None:
        """Adjunta credenciales; pasa el cliente a `AuthState.AUTHENTICATED`."""

        self._credentials = Credentials.from_pair(key, secret)
        logger.debug("cint_auth_configured", extra={"auth_state": self.auth_state.value})

    def get_main(self) -> Awaitable[Any]:
        return self._request()

    def get_genders(self) -> Awaitable[Any]:
        return self._request(path="/genders")

    def get_statuses(self) -> Awaitable[Any]:
        return self._request(path="/statuses")

    def get_transaction_types(self) -> Awaitable[Any]:
        return self._request(path="/transaction_types")

    def get_panel(self, panel_id: str | None) -> Awaitable[Any]:
        _require(panel_id, "panelId")
        return self._request(path=f"/panels/{panel_id}")

    def get_setting(self) -> Awaitable[Any]:
        return self._request(path="/panel/settings")

    def get_questions(self, key: str | None = None) -> Awaitable[Any]:
        """Preguntas del panel; resuelve con el texto XML crudo."""

        key = self._resolve_key(key)
        return self._request(path=f"/panels/{key}/questions")

    def get_respondents(self, key: str | None = None) -> Awaitable[Any]:
        key = self._resolve_key(key)
        return self._request(path=f"/panels/{key}/respondent")

    def get_respondent_quotas(self, key: str | None = None) -> Awaitable[Any]:
        key = self._resolve_key(key)
        return self._request(path=f"/panels/{key}/respondent_quotas")

    def get_events(self, key: str | None = None) -> Awaitable[Any]:
        key = self._resolve_key(key)
        return self._request(path=f"/panels/{key}/events")

    def get_panelists(self, search_params: Mapping[str, Any] | None, key: str | None = None) -> Awaitable[Any]:
        """Busca panelists, p.ej. `{"member_id": "42"}` o `{"email": "a@b.c"}`."""

        if search_params is None:
            raise ArgumentError("Argument `searchParams` must have `member_id` or `email` property.")
        key = self._resolve_key(key)
        query = urlencode(search_params, doseq=True)
        return self._request(path=f"/panels/{key}/panelists?{query}")

    def create_panelist(self, body: Any, key: str | None = None) -> Awaitable[Any]:
        key = self._resolve_key(key)
        return self._request(method="POST", path=f"/panels/{key}/panelists", body=body)

    def update_panelist(self, body: Any, panelist_id: str | None, key: str | None = None) -> Awaitable[Any]:
        _require(panelist_id, "panelistId")
        key = self._resolve_key(key)
        return self._request(method="PATCH", path=f"/panels/{key}/panelists/{panelist_id}", body=body)

    def delete_panelist(self, panelist_id: str | None, key: str | None = None) -> Awaitable[Any]:
        _require(panelist_id, "panelistId")
        key = self._resolve_key(key)
        return self._request(method="DELETE", path=f"/panels/{key}/panelists/{panelist_id}")

    def get_panelist(self, panelist_id: str | None, key: str | None = None) -> Awaitable[Any]:
        _require(panelist_id, "panelistId")
        key = self._resolve_key(key)
        return self._request(path=f"/panels/{key}/panelists/{panelist_id}")

    def get_survey_invitations(self, panelist_id: str | None, key: str | None = None) -> Awaitable[Any]:
        _require(panelist_id, "panelistId")
        key = self._resolve_key(key)
        return self._request(path=f"/panels/{key}/panelists/{panelist_id}/survey_invitations")

    def candidate_respondent(
        self,
        body: Any,
        panelist_id: str | None,
        key: str | None = None,
    ) -> Awaitable[CandidateRespondent]:
        """Nomina un panelist; resuelve con la proyección `CandidateRespondent`."""

        _require(panelist_id, "panelistId")
        key = self._resolve_key(key)
        pending = self._request(
            method="POST",
            path=f"/panels/{key}/panelists/{panelist_id}/candidate_respondents",
            body=body,
        )
        return _as_candidate(pending)

    def _resolve_key(self, key: str | None) -> str:
        resolved = key or self.key
        _require(resolved, "key")
        return resolved  # type: ignore[return-value]

    def _request(self, *, method: str = "GET", path: str = "/", body: Any = None) -> Awaitable[Any]:
        return self._dispatcher.dispatch(RequestDescriptor(method, path, body), self._credentials)


async def _as_candidate(pending: Awaitable[Any]) -> CandidateRespondent:
    return CandidateRespondent.from_payload(await pending)
