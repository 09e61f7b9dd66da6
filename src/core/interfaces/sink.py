"""Contrato del destino de salida.

Por qué Protocol:
- Consola, fichero o buffer en memoria son intercambiables sin herencia.
- El framer recibe el sink como parámetro explícito: no hay salida global.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class OutputSink(Protocol):
    """Consumidor de bytes en orden de decodificación.

    Reglas:
    - Acepta cualquier granularidad (un byte o un chunk entero).
    - Lo escrito es visible antes de que `write` retorne.
    """

    def write(self, data: bytes) -> None:
        """Entrega `data` al destino."""

        ...
