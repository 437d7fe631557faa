"""Tests de la CLI (Typer CliRunner)."""

from __future__ import annotations

from pathlib import Path

import httpx
import pytest
from typer.testing import CliRunner

from cint_sdk.cli import doctor, factory
from cint_sdk.cli.main import app
from cint_sdk.core.config import CintSettings, write_user_env_vars
from cint_sdk.core.services.sdk import CintSDK
from tests.conftest import TEST_KEY, RecordingTransport

runner = CliRunner()


def _patch_sdk(monkeypatch: pytest.MonkeyPatch, settings: CintSettings, recorder: RecordingTransport) -> None:
    monkeypatch.setattr(factory, "build_sdk", lambda: CintSDK(settings, transport=recorder.transport))


@pytest.fixture(autouse=True)
def _isolated_logging(restore_root_logger):
    yield


class TestCommands:
    """Comandos que consultan la API."""

    def test_genders(self, monkeypatch: pytest.MonkeyPatch, anonymous_settings: CintSettings) -> None:
        recorder = RecordingTransport(lambda request: httpx.Response(200, json=[{"id": 1, "name": "male"}]))
        _patch_sdk(monkeypatch, anonymous_settings, recorder)

        result = runner.invoke(app, ["genders"])

        assert result.exit_code == 0, result.output
        assert "male" in result.output
        assert recorder.last.url.path == "/genders"

    def test_panel_defaults_to_configured_key(
        self, monkeypatch: pytest.MonkeyPatch, settings: CintSettings
    ) -> None:
        recorder = RecordingTransport(lambda request: httpx.Response(200, json={"name": "Panel A"}))
        _patch_sdk(monkeypatch, settings, recorder)

        result = runner.invoke(app, ["panel"])

        assert result.exit_code == 0, result.output
        assert "Panel A" in result.output
        assert recorder.last.url.path == f"/panels/{TEST_KEY}"

    def test_panel_without_credentials_fails(
        self, monkeypatch: pytest.MonkeyPatch, anonymous_settings: CintSettings
    ) -> None:
        recorder = RecordingTransport()
        _patch_sdk(monkeypatch, anonymous_settings, recorder)

        result = runner.invoke(app, ["panel", "p1"])

        assert result.exit_code == 1
        assert "AuthenticationRequiredError" in result.output
        assert recorder.requests == []

    def test_invalid_json_reported(self, monkeypatch: pytest.MonkeyPatch, settings: CintSettings) -> None:
        recorder = RecordingTransport(lambda request: httpx.Response(502, text="Bad Gateway"))
        _patch_sdk(monkeypatch, settings, recorder)

        result = runner.invoke(app, ["panel", "p1"])

        assert result.exit_code == 1
        assert "InvalidResponseError" in result.output

    def test_invalid_log_level(self) -> None:
        result = runner.invoke(app, ["--log-level", "LOUD", "genders"])
        assert result.exit_code != 0


class TestDoctor:
    """Diagnóstico y setup de credenciales."""

    def test_run_all_ok(self, monkeypatch: pytest.MonkeyPatch, settings: CintSettings) -> None:
        recorder = RecordingTransport()
        _patch_sdk(monkeypatch, settings, recorder)

        result = runner.invoke(app, ["doctor", "run"])

        assert result.exit_code == 0, result.output
        assert [r.url.path for r in recorder.requests] == ["/genders", f"/panels/{TEST_KEY}"]

    def test_run_without_credentials(
        self, monkeypatch: pytest.MonkeyPatch, anonymous_settings: CintSettings
    ) -> None:
        recorder = RecordingTransport()
        _patch_sdk(monkeypatch, anonymous_settings, recorder)

        result = runner.invoke(app, ["doctor", "run"])

        assert result.exit_code == 0, result.output
        assert "MISSING" in result.output
        assert "SKIPPED" in result.output
        assert [r.url.path for r in recorder.requests] == ["/genders"]

    def test_run_connectivity_failure(self, monkeypatch: pytest.MonkeyPatch, settings: CintSettings) -> None:
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        _patch_sdk(monkeypatch, settings, RecordingTransport(refuse))

        result = runner.invoke(app, ["doctor", "run"])

        assert result.exit_code == 1
        assert "FAIL" in result.output

    def test_setup_writes_user_env(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        env_path = tmp_path / ".env"
        monkeypatch.setattr(
            doctor,
            "write_user_env_vars",
            lambda values: write_user_env_vars(values, env_path=env_path),
        )

        result = runner.invoke(app, ["doctor", "setup"], input="https\nmy-key\nmy-secret\n\n")

        assert result.exit_code == 0, result.output
        content = env_path.read_text(encoding="utf-8")
        assert "CINT_KEY=my-key" in content
        assert "CINT_SECRET=my-secret" in content
        assert "CINT_PANEL_KEY=my-key" in content
        assert "CINT_PROTOCOL=https" in content
