"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- El Invoker recibe rutas explícitas (project root, verifier) en vez de
  derivarlas de constantes globales, así los tests pueden sustituirlas.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_VERIFIER_PATH = Path("tools") / "verify_assets.sh"


def get_project_root() -> Path:
    # core/config.py -> core -> src -> <project_root>
    return Path(__file__).resolve().parents[2]


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "asset-verify"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "asset-verify"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "asset-verify"
    return Path.home() / ".config" / "asset-verify"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str | None], env_path: Path | None = None) -> Path:
    """Escribe/actualiza variables en el .env global del usuario."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# asset-verify user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class VerifierSettings(BaseSettings):
    """Configuración del wrapper del verificador.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Invoker.
    - Un único contrato de configuración para CLI, doctor y uso programático.
    """

    model_config = SettingsConfigDict(
        env_prefix="ASSET_VERIFY_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    project_root: Path = Field(
        default_factory=get_project_root,
        description="Directorio raíz del proyecto; cwd del verificador.",
    )
    verifier_path: Path = Field(
        default=DEFAULT_VERIFIER_PATH,
        description="Ruta al verificador (relativa al project root o absoluta).",
    )
    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging de la CLI (DEBUG, INFO, WARNING, ERROR).",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level: {value!r}")
        return level

    def resolved_root(self) -> Path:
        return self.project_root.expanduser().resolve()

    def resolved_verifier(self) -> Path:
        """Ruta absoluta del verificador.

        Rutas relativas se resuelven contra `project_root`, nunca contra el cwd
        del proceso que invoca.
        """

        path = self.verifier_path.expanduser()
        if not path.is_absolute():
            path = self.resolved_root() / path
        return path
