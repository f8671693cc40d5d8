"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validación estricta en el borde: la lista de argumentos llega desde la CLI
  o desde código Python arbitrario.
- El resultado es estructurado (código + streams) en lugar de señalizar un
  exit code distinto de cero con excepciones.

Nota:
- Estos modelos describen *qué* se ejecuta y *qué* devolvió, no *cómo*.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class InvocationRequest(BaseModel):
    """Argumentos que se pasan tal cual al verificador."""

    model_config = ConfigDict(frozen=True, strict=True)

    args: list[str] = Field(
        ...,
        min_length=1,
        description="Rutas de archivo (o ya expandidas por el shell), en orden.",
    )


class InvocationResult(BaseModel):
    """Resultado de una ejecución del verificador.

    Por qué `launched`:
    - Distingue "el verificador rechazó los assets" (exit != 0) de "no se pudo
      lanzar el proceso" (intérprete ausente, permisos en exec).
    """

    model_config = ConfigDict(frozen=True)

    exit_code: int = Field(
        ...,
        ge=0,
        description="Código de salida a propagar al sistema operativo.",
    )
    stdout: bytes = Field(
        default=b"",
        description="Bytes crudos escritos por el verificador en stdout.",
    )
    stderr: bytes = Field(
        default=b"",
        description="Bytes crudos escritos por el verificador en stderr.",
    )
    launched: bool = Field(
        default=True,
        description="False si el proceso no llegó a arrancar.",
    )
    error: str | None = Field(
        default=None,
        description="Mensaje del fallo de arranque, si lo hubo.",
    )

    @property
    def ok(self) -> bool:
        return self.exit_code == 0
