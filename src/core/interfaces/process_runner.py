"""Contrato para lanzar procesos externos.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite sustituir el runner real (asyncio) por uno falso en tests sin
  acoplar el Invoker a `asyncio.subprocess`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, Sequence, runtime_checkable

from core.domain.models import InvocationResult


@runtime_checkable
class ProcessRunner(Protocol):
    """Contrato mínimo para ejecutar un proceso.

    Reglas de diseño:
    - `run` es asíncrono: bloquea al llamador hasta que el proceso termina.
    - Un exit code distinto de cero se devuelve en el resultado, nunca como
      excepción.
    """

    async def run(self, argv: Sequence[str], *, cwd: Path) -> InvocationResult:
        """Ejecuta `argv` en `cwd` y devuelve el resultado capturado."""

        ...
