"""Partido de URL best-effort.

No es un parser de URLs: solo separa host, puerto y path para poder abrir
el socket y escribir la request-line.
"""

from __future__ import annotations

import logging

from core.domain.models import RequestTarget
from core.errors import InvalidURLError

logger = logging.getLogger(__name__)

DEFAULT_PORT = "80"


def parse_url(url: str) -> RequestTarget:
    """Parte `url` en (host, port, path).

    - `http://example.com` -> ("example.com", "80", "/")
    - `http://example.com:8080/a/b` -> ("example.com", "8080", "/a/b")
    - El esquema es opcional y no se valida.
    """

    rest = url.strip()
    if "://" in rest:
        rest = rest.split("://", 1)[1]

    host_part, _, remainder = rest.partition("/")
    host, sep, port = host_part.partition(":")
    if not sep:
        port = DEFAULT_PORT

    if not host:
        raise InvalidURLError(f"missing host in URL: {url!r}")
    if not (port.isascii() and port.isdigit()):
        raise InvalidURLError(f"invalid port {port!r} in URL: {url!r}")

    target = RequestTarget(host=host, port=port, path="/" + remainder)
    logger.debug("Split %s into host=%s port=%s path=%s", url, target.host, target.port, target.path)
    return target
