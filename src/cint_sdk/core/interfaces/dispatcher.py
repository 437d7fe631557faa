"""Contrato del dispatcher de requests.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite que el Facade use el dispatcher HTTP real o uno falso en tests.
"""

from __future__ import annotations

from typing import Any, Awaitable, Protocol, runtime_checkable

from cint_sdk.core.domain.models import Credentials, RequestDescriptor


@runtime_checkable
class Dispatcher(Protocol):
    """Único punto de salida de cada llamada.

    Reglas de diseño:
    - `dispatch` NO es `async`: prepara de forma síncrona y devuelve el
      awaitable que hace I/O. Sus errores (incluido `AuthenticationRequiredError`)
      salen del awaitable, nunca de la llamada.
    - Devuelve JSON parseado, texto crudo (XML) o `{}` (204).
    """

    def dispatch(
        self,
        request: RequestDescriptor,
        credentials: Credentials | None,
    ) -> Awaitable[Any]:
        """Prepara `request` y devuelve el awaitable con el resultado."""

        ...
