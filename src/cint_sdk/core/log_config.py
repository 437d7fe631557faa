"""Configuración de logging para entry-points (CLI, scripts).

La librería solo usa `logging.getLogger(__name__)` con eventos snake_case y
campos en `extra`; nunca instala handlers por su cuenta.

Uso:
    from cint_sdk.core.log_config import configure_logging

    configure_logging(level="DEBUG", json_output=True)
"""

from __future__ import annotations

import logging

from pythonjsonlogger.json import JsonFormatter
from rich.logging import RichHandler

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Formatter JSON: los campos de `extra` salen como claves de primer nivel."""

    return JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s",
        rename_fields=FIELD_RENAME_MAP,
    )


def configure_logging(level: str = "WARNING", *, json_output: bool = False) -> logging.Handler:
    """Instala un único handler en el root logger.

    Raises:
        ValueError: Si el nivel de log es inválido.
    """

    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Invalid log level: {level}. Valid: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler: logging.Handler
    if json_output:
        handler = logging.StreamHandler()
        handler.setFormatter(create_json_formatter())
    else:
        handler = RichHandler(show_path=False, rich_tracebacks=True)

    handler.setLevel(level_upper)
    root = logging.getLogger()
    root.setLevel(level_upper)
    # Reemplaza handlers para evitar duplicación si se llama dos veces.
    root.handlers = [handler]
    return handler
