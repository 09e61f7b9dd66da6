"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validación en el borde (flags de CLI, URL ya partida) sin acoplar el Core
  a sockets ni a la terminal.
- Los modelos describen *qué* se pide y *qué* llegó, no *cómo* se transporta.

Nota:
- Todo vive un único ciclo request/response; nada se persiste.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class RequestTarget(BaseModel):
    """Destino de la petición tras partir la URL."""

    model_config = ConfigDict(frozen=True)

    host: str = Field(
        ...,
        min_length=1,
        description="Host al que se abre la conexión TCP y que va en `Host:`.",
    )
    port: str = Field(
        default="80",
        pattern=r"^[0-9]+$",
        description="Puerto TCP en texto (solo dígitos).",
    )
    path: str = Field(
        default="/",
        description="Path de la request-line, siempre empieza por '/'.",
    )

    @property
    def address(self) -> tuple[str, int]:
        return self.host, int(self.port)


class HttpFlags(BaseModel):
    """Superficie de configuración que llega desde la CLI."""

    show_headers: bool = Field(
        default=False,
        description="Escribir el bloque de headers antes del cuerpo.",
    )
    show_only_headers: bool = Field(
        default=False,
        description="Escribir solo los headers y no leer el cuerpo.",
    )
    custom_headers: list[str] = Field(
        default_factory=list,
        description="Líneas 'Name: Value' que se envían tal cual, en orden.",
    )
    output_file: Path | None = Field(
        default=None,
        description="Si se define, la salida va a este fichero (truncado).",
    )


class ResponseHead(BaseModel):
    """Bloque de headers crudo y modo de framing detectado.

    El bloque incluye la línea de estado y la línea vacía final; se reenvía
    tal cual cuando se pide mostrar headers.
    """

    model_config = ConfigDict(frozen=True)

    raw: bytes = Field(
        ...,
        description="Bytes del bloque de headers, terminador incluido.",
    )
    chunked: bool = Field(
        default=False,
        description="True si hay una línea 'Transfer-Encoding: chunked'.",
    )

    @property
    def text(self) -> str:
        return self.raw.decode("latin-1")

    @property
    def status_line(self) -> str:
        return self.text.split("\r\n", 1)[0]
