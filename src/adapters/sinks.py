"""Destinos de salida (consola, fichero, memoria).

Por qué están en adapters:
- Abrir ficheros y tocar `sys.stdout` son detalles de infraestructura.
- El Core solo conoce el contrato `OutputSink`.
"""

from __future__ import annotations

import sys
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Iterator

from core.errors import OutputSinkError
from core.interfaces.sink import OutputSink


class ConsoleSink(OutputSink):
    """Escribe en la capa binaria de `sys.stdout`.

    `sys.stdout` se resuelve en cada escritura para respetar redirecciones
    (tests, CliRunner).
    """

    def write(self, data: bytes) -> None:
        out = getattr(sys.stdout, "buffer", None)
        try:
            if out is None:
                sys.stdout.write(data.decode("utf-8", errors="replace"))
                sys.stdout.flush()
                return
            out.write(data)
            out.flush()
        except OSError as exc:
            raise OutputSinkError(f"failed to write to stdout: {exc}") from exc


class FileSink(OutputSink):
    """Fichero abierto en modo truncado/creación."""

    def __init__(self, file: BinaryIO, path: Path | None = None) -> None:
        self._file = file
        self.path = path

    @classmethod
    def create(cls, path: Path | str) -> "FileSink":
        if not str(path).strip():
            raise OutputSinkError("output file name is empty")
        path = Path(path)
        try:
            file = open(path, "wb")
        except OSError as exc:
            raise OutputSinkError(f"failed to create output file: {exc}") from exc
        return cls(file, path)

    def write(self, data: bytes) -> None:
        try:
            self._file.write(data)
            self._file.flush()
        except OSError as exc:
            raise OutputSinkError(f"failed to write to {self.path}: {exc}") from exc

    def close(self) -> None:
        self._file.close()


class BufferSink(OutputSink):
    """Acumula en memoria; útil para uso como librería y tests."""

    def __init__(self) -> None:
        self._data = bytearray()
        self.writes = 0

    def write(self, data: bytes) -> None:
        self._data += data
        self.writes += 1

    def getvalue(self) -> bytes:
        return bytes(self._data)


@contextmanager
def open_sink(output_file: Path | str | None = None) -> Iterator[OutputSink]:
    """Sink de fichero si hay path, consola si no. El fichero siempre se cierra."""

    if output_file is None:
        yield ConsoleSink()
        return

    sink = FileSink.create(output_file)
    try:
        yield sink
    finally:
        sink.close()
