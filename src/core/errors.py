"""Errores del cliente.

Por qué una jerarquía propia:
- La CLI captura una sola base (`TinyHttpError`) y decide el código de salida.
- Los adaptadores distinguen fallos de transporte de fallos de decodificación
  sin inspeccionar mensajes.
"""

from __future__ import annotations


class TinyHttpError(Exception):
    """Base de todos los errores reportables al usuario."""


class InvalidURLError(TinyHttpError, ValueError):
    """La URL no se puede partir en host/puerto/path utilizables."""


class TransportError(TinyHttpError):
    """Fallo al conectar, leer o escribir en el socket."""


class HeaderBlockError(TinyHttpError):
    """La conexión terminó antes de la línea vacía que cierra los headers."""


class ChunkedDecodeError(TinyHttpError):
    """Cuerpo chunked mal formado o truncado."""


class ChunkSizeError(ChunkedDecodeError):
    """La línea de tamaño no es un entero hexadecimal sin signo."""


class ChunkDataError(ChunkedDecodeError):
    """Faltan bytes de datos o el CRLF final de un chunk."""


class OutputSinkError(TinyHttpError):
    """No se pudo crear o escribir el destino de salida."""
