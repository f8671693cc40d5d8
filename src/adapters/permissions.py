"""Ajuste best-effort de permisos del verificador."""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path

logger = logging.getLogger(__name__)


def make_executable(path: Path) -> bool:
    """Equivalente a `chmod +x`: añade bits de ejecución donde hay de lectura.

    Devuelve False si el chmod falla (p.ej. el archivo pertenece a otro
    usuario); el error se registra en debug y se descarta.
    """

    try:
        mode = path.stat().st_mode
        wanted = mode | ((mode & 0o444) >> 2)
        if wanted != mode:
            os.chmod(path, stat.S_IMODE(wanted))
    except OSError as exc:
        logger.debug("chmod +x %s failed: %s", path, exc)
        return False
    return True


def is_executable(path: Path) -> bool:
    return path.is_file() and os.access(path, os.X_OK)
