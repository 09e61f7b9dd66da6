"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- stdout queda reservado para los bytes de la respuesta: todo lo demás
  (logs, errores) va a stderr.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text


def build_stderr_console() -> Console:
    return Console(stderr=True)


def configure_logging(level: str, console: Console) -> None:
    """Configura el logging raíz con un `RichHandler` sobre stderr.

    Por qué aquí:
    - Los módulos solo hacen `logging.getLogger(__name__)`; el handler se
      decide una vez, en el entrypoint.
    """

    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False, rich_tracebacks=False)],
        force=True,
    )


def print_error(console: Console, message: str) -> None:
    """Imprime un error de una línea; el mensaje no se interpreta como markup."""

    console.print(Text.assemble(("error: ", "bold red"), message), highlight=False)
