"""Framing de la respuesta: headers, cuerpo identity y cuerpo chunked.

Por qué un único cursor:
- Headers y cuerpo viajan intercalados en el mismo stream. Quien abre la
  conexión crea un solo lector con buffer (`socket.makefile("rb")`) y lo pasa
  a `read_headers` y después al framer del cuerpo. Envolver el socket otra vez
  perdería los bytes que ya estaban en el buffer.

Simplificación conocida:
- Tras el chunk de tamaño cero no se leen los trailer headers. La conexión se
  cierra justo después, así que esos bytes nunca se consumen.
"""

from __future__ import annotations

import io
import logging
import re

from core.domain.models import HttpFlags, ResponseHead
from core.errors import (
    ChunkDataError,
    ChunkedDecodeError,
    ChunkSizeError,
    HeaderBlockError,
    TransportError,
)
from core.interfaces.sink import OutputSink

logger = logging.getLogger(__name__)

RECV_BUFFER_SIZE = 4096
HEADER_TERMINATOR = b"\r\n"
CHUNK_TRAILER_SIZE = 2

_CHUNKED_PREFIX = b"Transfer-Encoding: chunked"
_HEX_SIZE = re.compile(rb"[0-9A-Fa-f]+")


def read_headers(stream: io.BufferedIOBase) -> ResponseHead:
    """Consume el bloque de headers, línea vacía incluida.

    Devuelve el bloque crudo y si la respuesta viene en modo chunked. El
    stream queda posicionado en el primer byte del cuerpo.
    """

    block = bytearray()
    chunked = False
    while True:
        try:
            line = stream.readline()
        except OSError as exc:
            raise TransportError(f"failed to read response headers: {exc}") from exc

        if not line.endswith(b"\n"):
            raise HeaderBlockError(
                f"connection closed before end of headers ({len(block) + len(line)} bytes read)"
            )

        block += line
        if line == HEADER_TERMINATOR:
            break
        if line.startswith(_CHUNKED_PREFIX):
            chunked = True

    logger.debug("Read header block (%d bytes, chunked=%s)", len(block), chunked)
    return ResponseHead(raw=bytes(block), chunked=chunked)


def read_identity_body(
    stream: io.BufferedIOBase,
    sink: OutputSink,
    *,
    buffer_size: int = RECV_BUFFER_SIZE,
) -> int:
    """Copia el cuerpo hasta EOF, segmento a segmento.

    Sin Content-Length: el final del cuerpo es el cierre de la conexión. Un
    error de lectura se registra y corta la copia; lo ya escrito se queda.
    """

    total = 0
    while True:
        try:
            data = stream.read1(buffer_size)
        except OSError as exc:
            logger.error("read error after %d body bytes: %s", total, exc)
            break
        if not data:
            break
        sink.write(data)
        total += len(data)

    logger.debug("Identity body done (%d bytes)", total)
    return total


def _read_exact(stream: io.BufferedIOBase, size: int) -> bytes:
    parts: list[bytes] = []
    remaining = size
    while remaining > 0:
        try:
            data = stream.read(remaining)
        except OSError as exc:
            raise TransportError(f"failed to read chunk: {exc}") from exc
        if not data:
            break
        parts.append(data)
        remaining -= len(data)
    return b"".join(parts)


def _read_chunk_size(stream: io.BufferedIOBase) -> int:
    """ReadSize: 0 significa fin del cuerpo (chunk cero o línea vacía)."""

    try:
        line = stream.readline()
    except OSError as exc:
        raise TransportError(f"failed to read chunk size: {exc}") from exc

    if not line.endswith(b"\n"):
        raise ChunkedDecodeError("connection closed while reading chunk size")

    size_text = line.strip()
    if not size_text:
        # Línea vacía en lugar de "0": se acepta como fin del cuerpo.
        return 0
    if _HEX_SIZE.fullmatch(size_text) is None:
        raise ChunkSizeError(f"invalid chunk size line: {size_text!r}")
    return int(size_text, 16)


def read_chunked_body(stream: io.BufferedIOBase, sink: OutputSink) -> int:
    """Decodifica `Transfer-Encoding: chunked` hacia `sink`.

    Cada chunk se escribe entero en cuanto se termina de leer. Cualquier
    tamaño inválido o lectura incompleta aborta sin intentar resincronizar.
    """

    total = 0
    chunks = 0
    while True:
        size = _read_chunk_size(stream)
        if size == 0:
            break

        data = _read_exact(stream, size)
        if len(data) < size:
            raise ChunkDataError(
                f"chunk {chunks} truncated: expected {size} bytes, got {len(data)}"
            )
        sink.write(data)
        total += size
        chunks += 1

        # CRLF tras los datos: se descarta sin mirarlo.
        if len(_read_exact(stream, CHUNK_TRAILER_SIZE)) < CHUNK_TRAILER_SIZE:
            raise ChunkDataError(f"missing line terminator after chunk {chunks - 1}")

    logger.debug("Chunked body done (%d chunks, %d bytes)", chunks, total)
    return total


def transfer_response(
    stream: io.BufferedIOBase,
    sink: OutputSink,
    flags: HttpFlags,
    *,
    buffer_size: int = RECV_BUFFER_SIZE,
) -> ResponseHead:
    """Lee headers y, según los flags, los muestra y/o decodifica el cuerpo.

    Con `show_only_headers` no se lee ni un byte del cuerpo.
    """

    head = read_headers(stream)

    if flags.show_headers or flags.show_only_headers:
        sink.write(head.raw)
        if flags.show_only_headers:
            return head

    if head.chunked:
        read_chunked_body(stream, sink)
    else:
        read_identity_body(stream, sink, buffer_size=buffer_size)
    return head
