"""Script de ejecución.

Por qué existe:
- Permite ejecutar la CLI con `python -m cint_sdk` durante desarrollo.
- Mantiene un entrypoint simple además del console script `cint`.
"""

from __future__ import annotations

from cint_sdk.cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
