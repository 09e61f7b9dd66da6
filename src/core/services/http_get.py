"""Orquestación de un GET completo.

This module composes the pieces of a single request/response cycle:
URL split, TCP connect, request write, header/body framing into the sink,
and teardown. It owns the connection and the single buffered cursor over it,
so both are closed on every exit path (success, decode error, or the early
return of headers-only mode). Printing and exit codes stay in the CLI.
"""

from __future__ import annotations

import logging
import socket

from adapters.framing import transfer_response
from adapters.request_builder import build_request, send_request
from adapters.url import parse_url
from core.config import AppSettings
from core.domain.models import HttpFlags, RequestTarget, ResponseHead
from core.errors import TransportError
from core.interfaces.sink import OutputSink

logger = logging.getLogger(__name__)


def open_connection(target: RequestTarget, settings: AppSettings) -> socket.socket:
    """Abre la conexión TCP; sin reintentos."""

    try:
        return socket.create_connection(target.address, timeout=settings.connect_timeout_seconds)
    except OSError as exc:
        raise TransportError(f"failed to connect to {target.host}:{target.port}: {exc}") from exc


def http_get(
    url: str,
    sink: OutputSink,
    flags: HttpFlags | None = None,
    settings: AppSettings | None = None,
) -> ResponseHead:
    """Ejecuta un GET sobre `url` y escribe la respuesta en `sink`.

    Devuelve el bloque de headers leído. Los errores de transporte y de
    decodificación se propagan; lo que ya llegó al sink se queda ahí.
    """

    flags = flags or HttpFlags()
    settings = settings or AppSettings()

    target = parse_url(url)
    request = build_request(target, [*settings.default_headers, *flags.custom_headers])

    with open_connection(target, settings) as connection:
        logger.debug("Connected to %s:%s", target.host, target.port)
        send_request(connection, request)
        with connection.makefile("rb") as stream:
            head = transfer_response(
                stream,
                sink,
                flags,
                buffer_size=settings.recv_buffer_size,
            )

    logger.debug("Response: %s", head.status_line)
    return head
