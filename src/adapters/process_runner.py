"""Runner de procesos basado en asyncio.

Por qué asyncio.subprocess:
- El punto de entrada programático es asíncrono (`await verify([...])`).
- `communicate()` captura stdout/stderr completos y espera a que el proceso
  termine, sin relay incremental.
"""

from __future__ import annotations

import asyncio
import logging
import os
from pathlib import Path
from typing import Sequence

from core.domain.models import InvocationResult

logger = logging.getLogger(__name__)

# Código usado cuando el proceso no aporta uno numérico (no arrancó, o murió por señal).
FALLBACK_EXIT_CODE = 1


class AsyncioProcessRunner:
    """Implementación de `ProcessRunner` con `asyncio.create_subprocess_exec`."""

    def __init__(self, *, env: dict[str, str] | None = None) -> None:
        self._env = env

    async def run(self, argv: Sequence[str], *, cwd: Path) -> InvocationResult:
        if not argv:
            raise ValueError("argv must contain at least the executable")

        logger.debug("Spawning %s in %s", list(argv), cwd)
        try:
            process = await asyncio.create_subprocess_exec(
                *argv,
                cwd=os.fspath(cwd),
                env=self._env,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as exc:
            # exc.filename is the script even when the shebang interpreter is what is missing.
            message = f"{argv[0]} or its interpreter could not be executed: {exc.strerror or exc}"
            logger.warning("%s", message)
            return InvocationResult(
                exit_code=FALLBACK_EXIT_CODE,
                launched=False,
                error=message,
            )

        stdout, stderr = await process.communicate()
        returncode = process.returncode

        if returncode is None or returncode < 0:
            logger.warning("%s terminated without an exit code (returncode=%s)", argv[0], returncode)
            exit_code = FALLBACK_EXIT_CODE
        else:
            exit_code = returncode

        logger.debug("%s exited with %s", argv[0], exit_code)
        return InvocationResult(exit_code=exit_code, stdout=stdout or b"", stderr=stderr or b"")
