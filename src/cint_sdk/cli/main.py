"""CLI de diagnóstico (Typer).

Por qué una CLI en una librería:
- Permite verificar credenciales y conectividad sin escribir código.
- Solo usa métodos públicos del Facade; no añade lógica de protocolo.
"""

from __future__ import annotations

import asyncio
from typing import Any, Callable, Optional

import typer
from rich.console import Console

from cint_sdk.cli import doctor, factory
from cint_sdk.cli.ui_components import print_banner, render_payload
from cint_sdk.core.errors import CintError
from cint_sdk.core.log_config import configure_logging

app = typer.Typer(no_args_is_help=True, help="Cint panel management API client.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


@app.callback()
def main(
    log_level: str = typer.Option("WARNING", "--log-level", help="DEBUG, INFO, WARNING, ERROR."),
    json_logs: bool = typer.Option(False, "--json-logs", help="Emit logs as JSON lines."),
    banner: bool = typer.Option(False, "--banner", help="Show the welcome banner."),
) -> None:
    try:
        configure_logging(log_level, json_output=json_logs)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--log-level") from exc
    if banner:
        print_banner(_console)


@app.command()
def genders() -> None:
    """Print the public genders list."""

    sdk = factory.build_sdk()
    _run_and_render(lambda: asyncio.run(sdk.get_genders()))


@app.command()
def panel(panel_id: Optional[str] = typer.Argument(None, help="Panel id (defaults to the configured key).")) -> None:
    """Print a panel resource."""

    sdk = factory.build_sdk()
    _run_and_render(lambda: asyncio.run(sdk.get_panel(panel_id or sdk.key)))


def _run_and_render(call: Callable[[], Any]) -> None:
    try:
        payload = call()
    except CintError as exc:
        _console.print(f"[red]{type(exc).__name__}:[/red] {exc}")
        raise typer.Exit(code=1) from exc
    render_payload(_console, payload)


def run() -> None:
    app()
