"""Contratos del Core.

Por qué:
- El framer escribe en un `OutputSink` sin saber si detrás hay consola,
  fichero o un buffer en memoria.
- Los adaptadores concretos viven en `adapters/sinks.py`.
"""
