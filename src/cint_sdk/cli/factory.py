"""Construcción del cliente para los comandos de la CLI.

Los comandos llaman `factory.build_sdk()` (no un import directo) para que los
tests puedan sustituir el cliente con `monkeypatch.setattr`.
"""

from __future__ import annotations

from cint_sdk.core.config import CintSettings
from cint_sdk.core.services.sdk import CintSDK


def build_sdk() -> CintSDK:
    return CintSDK(CintSettings())
