"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

import json
from typing import Any

from rich.align import Align
from rich.console import Console
from rich.json import JSON
from rich.panel import Panel
from rich.table import Table
from rich.text import Text


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida."""

    title = Text("cint-sdk", style="bold cyan")
    subtitle = Text("Panel management API • diagnostics", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_checks_table(title: str) -> Table:
    table = Table(title=title)
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    return table


def render_payload(console: Console, payload: Any) -> None:
    """Muestra una respuesta: JSON resaltado, o texto crudo (XML)."""

    if isinstance(payload, str):
        console.print(payload, markup=False, highlight=False)
        return
    console.print(JSON(json.dumps(payload, ensure_ascii=False)))
