"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable

import typer
from rich.console import Console

from cint_sdk.cli import factory
from cint_sdk.cli.ui_components import build_checks_table
from cint_sdk.core.config import write_user_env_vars
from cint_sdk.core.domain.models import AuthState
from cint_sdk.core.errors import CintError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_call(call: Callable[[], Awaitable[Any]]) -> tuple[bool, str]:
    try:
        await call()
        return True, "OK"
    except CintError as exc:
        return False, str(exc)


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    sdk = factory.build_sdk()
    settings = sdk.settings

    table = build_checks_table("cint-sdk Doctor")
    table.add_row("Base URL", "OK", settings.base_url)

    authenticated = sdk.auth_state is AuthState.AUTHENTICATED
    if authenticated:
        table.add_row("Credentials", "OK", "key/secret configured")
    else:
        table.add_row("Credentials", "MISSING", "Run `cint doctor setup` or set CINT_KEY/CINT_SECRET")
    table.add_row("Panel key", "OK" if sdk.key else "MISSING", sdk.key or "-")

    ok_public, detail_public = asyncio.run(_check_call(sdk.get_genders))
    table.add_row("Public API (/genders)", "OK" if ok_public else "FAIL", detail_public)

    ok_auth = False
    if authenticated and sdk.key:
        ok_auth, detail_auth = asyncio.run(_check_call(lambda: sdk.get_panel(sdk.key)))
        table.add_row("Authenticated API (/panels/<key>)", "OK" if ok_auth else "FAIL", detail_auth)
    else:
        table.add_row("Authenticated API (/panels/<key>)", "SKIPPED", "No credentials")

    _console.print(table)

    if not ok_public or (authenticated and not ok_auth):
        raise typer.Exit(code=1)


@app.command(name="setup")
def setup() -> None:
    """Interactive credential setup (stores config in the user config .env)."""

    protocol = typer.prompt("Protocol", default="https", show_default=True).strip().lower()
    key = typer.prompt("API key").strip()
    secret = typer.prompt("API secret", hide_input=True, confirmation_prompt=False).strip()
    panel_key = typer.prompt("Default panel key", default=key, show_default=True).strip()

    if protocol not in ("http", "https"):
        raise typer.BadParameter("protocol must be 'http' or 'https'")
    if not key or not secret:
        raise typer.BadParameter("key and secret are required")

    env_path = write_user_env_vars(
        {
            "CINT_PROTOCOL": protocol,
            "CINT_KEY": key,
            "CINT_SECRET": secret,
            "CINT_PANEL_KEY": panel_key or None,
        }
    )

    _console.print(f"[green]Saved credentials to:[/green] {env_path}")
