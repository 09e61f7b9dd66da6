"""Script de ejecución.

Por qué existe:
- Permite ejecutar la CLI con `python -m main` desde `src/` durante desarrollo.
- Mantiene un entrypoint simple además del script `tinyhttp` instalado.
"""

from __future__ import annotations

import sys

# Los logs y errores van a stderr como texto; en consolas cp1252 (Windows)
# forzamos utf-8 para no romper con caracteres fuera de rango.
if sys.platform == "win32":
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
