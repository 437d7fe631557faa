"""Errores del SDK.

Regla de propagación:
- Configuración, argumentos y estado de autenticación fallan de forma síncrona,
  antes de crear cualquier awaitable.
- Red y parseo fallan solo al hacer `await` del resultado.
"""

from __future__ import annotations


class CintError(Exception):
    """Base de todos los errores del SDK."""


class ConfigurationError(CintError):
    """Configuración incompleta o inválida (p.ej. credencial a medias)."""


class ArgumentError(CintError, ValueError):
    """Falta un argumento obligatorio de una operación."""


class AuthenticationRequiredError(CintError):
    """Se intentó usar un path autenticado sin credenciales."""


class TransportError(CintError):
    """Fallo de socket/conexión. El error original queda en `__cause__`."""


class InvalidResponseError(CintError):
    """El cuerpo de la respuesta no tiene la forma esperada."""

    def __init__(self, message: str, *, raw: str | None = None, status_code: int | None = None) -> None:
        super().__init__(message)
        self.raw = raw
        self.status_code = status_code
