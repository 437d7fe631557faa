"""Cliente async para la API de gestión de paneles de Cint.

Uso:
    from cint_sdk import CintSDK

    sdk = CintSDK(key="panel-key", secret="s3cr3t")
    panel = await sdk.get_panel("panel-key")
"""

from cint_sdk.core.config import CintSettings
from cint_sdk.core.domain.models import AuthState, CandidateRespondent, Credentials, Link
from cint_sdk.core.errors import (
    ArgumentError,
    AuthenticationRequiredError,
    CintError,
    ConfigurationError,
    InvalidResponseError,
    TransportError,
)
from cint_sdk.core.services.sdk import CintSDK

__all__ = [
    "ArgumentError",
    "AuthState",
    "AuthenticationRequiredError",
    "CandidateRespondent",
    "CintError",
    "CintSDK",
    "CintSettings",
    "ConfigurationError",
    "Credentials",
    "InvalidResponseError",
    "Link",
    "TransportError",
]
