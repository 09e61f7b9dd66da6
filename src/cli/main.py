"""CLI principal (Typer).

Por qué Typer:
- Declarar flags con tipos y ayuda sin parsing manual.
- La CLI solo traduce flags a `HttpFlags`, abre el sink y reporta errores;
  el protocolo vive en `core`/`adapters`.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer
from pydantic import ValidationError

from adapters.sinks import open_sink
from cli.ui_components import build_stderr_console, configure_logging, print_error
from core.config import AppSettings
from core.domain.models import HttpFlags
from core.errors import TinyHttpError
from core.services.http_get import http_get

app = typer.Typer(
    add_completion=False,
    help="Minimal HTTP/1.1 GET client over a raw TCP connection.",
)

_console = build_stderr_console()
logger = logging.getLogger(__name__)


@app.command(no_args_is_help=True)
def get(
    url: str = typer.Argument(..., help="Target URL, e.g. http://example.com:8080/path"),
    include: bool = typer.Option(False, "-i", "--include", help="Show response headers before the body."),
    head: bool = typer.Option(False, "-I", "--head", help="Show only the response headers."),
    header: Optional[List[str]] = typer.Option(
        None,
        "-H",
        "--header",
        help="Custom request header 'Name: Value' (repeatable).",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "-o",
        "--output",
        help="Write output to FILE (truncated) instead of stdout.",
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Debug logging on stderr."),
) -> None:
    """Send a GET request to URL and stream the response."""

    try:
        settings = AppSettings()
    except ValidationError as exc:
        print_error(_console, f"invalid configuration: {exc}")
        raise typer.Exit(code=2) from exc

    configure_logging("DEBUG" if verbose else settings.log_level, _console)

    flags = HttpFlags(
        show_headers=include,
        show_only_headers=head,
        custom_headers=list(header or []),
        output_file=output,
    )

    try:
        with open_sink(flags.output_file) as sink:
            http_get(url, sink, flags, settings)
    except TinyHttpError as exc:
        logger.debug("Request failed", exc_info=exc)
        print_error(_console, str(exc))
        raise typer.Exit(code=1) from exc
    except KeyboardInterrupt:
        raise typer.Exit(code=130)


def run() -> None:
    app()
