"""Construcción y envío de la petición GET.

Por qué bytes crudos:
- No hay librería HTTP: la request-line y los headers se escriben a mano.
- Los headers custom se envían tal cual; si están mal formados, es problema
  de quien los pasa (el servidor decidirá).
"""

from __future__ import annotations

import logging
import socket
from typing import Iterable

from core.domain.models import RequestTarget
from core.errors import TransportError

logger = logging.getLogger(__name__)

HTTP_VERSION = "HTTP/1.1"
CRLF = "\r\n"


def build_request(target: RequestTarget, custom_headers: Iterable[str] = ()) -> bytes:
    """Ensambla la petición completa, línea vacía final incluida."""

    lines = [
        f"GET {target.path} {HTTP_VERSION}",
        f"Host: {target.host}",
    ]
    lines.extend(custom_headers)
    lines.append("Connection: close")

    payload = CRLF.join(lines) + CRLF + CRLF
    return payload.encode("utf-8")


def send_request(connection: socket.socket, request: bytes) -> None:
    """Escribe la petición en una sola llamada; sin reintentos."""

    try:
        connection.sendall(request)
    except OSError as exc:
        raise TransportError(f"failed to send request: {exc}") from exc
    logger.debug("Sent request (%d bytes)", len(request))
