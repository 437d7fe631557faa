"""Configuración de pytest para cint-sdk."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Callable

import httpx
import pytest

# Añade src/ al PYTHONPATH para permitir imports absolutos sin instalar
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from cint_sdk.core.config import CintSettings  # noqa: E402

TEST_KEY = "panel-key"
TEST_SECRET = "s3cr3t"


class RecordingTransport:
    """MockTransport que guarda cada request y responde con `responder`."""

    def __init__(self, responder: Callable[[httpx.Request], httpx.Response] | None = None) -> None:
        self.requests: list[httpx.Request] = []
        self._responder = responder or (lambda request: httpx.Response(200, json={}))
        self.transport = httpx.MockTransport(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._responder(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture(autouse=True)
def _clean_cint_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "CINT_PROTOCOL",
        "CINT_HOST",
        "CINT_KEY",
        "CINT_SECRET",
        "CINT_PANEL_KEY",
        "CINT_HTTP_TIMEOUT_SECONDS",
        "CINT_USER_AGENT",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings() -> CintSettings:
    return CintSettings(_env_file=None, key=TEST_KEY, secret=TEST_SECRET)


@pytest.fixture
def anonymous_settings() -> CintSettings:
    return CintSettings(_env_file=None)


@pytest.fixture
def recorder() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers = handlers
    root.setLevel(level)
