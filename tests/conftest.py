"""Shared fixtures: throwaway shell verifiers under tmp_path."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import pytest

from core.config import VerifierSettings

if sys.platform == "win32":
    collect_ignore_glob = ["test_*.py"]


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep developer config (.env, ASSET_VERIFY_*) out of the tests."""

    for name in ("ASSET_VERIFY_PROJECT_ROOT", "ASSET_VERIFY_VERIFIER_PATH", "ASSET_VERIFY_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    # env_file is fixed at import time and includes the real per-user .env.
    monkeypatch.setitem(VerifierSettings.model_config, "env_file", (".env",))
    workdir = tmp_path / "caller"
    workdir.mkdir()
    monkeypatch.chdir(workdir)


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    root = tmp_path / "project"
    (root / "tools").mkdir(parents=True)
    return root


@pytest.fixture
def make_verifier(project_root: Path) -> Callable[..., Path]:
    """Write `tools/verify_assets.sh` with the given shell body."""

    def _make(body: str, *, mode: int = 0o755, shebang: str = "#!/bin/sh") -> Path:
        script = project_root / "tools" / "verify_assets.sh"
        script.write_text(f"{shebang}\n{body}\n", encoding="utf-8")
        script.chmod(mode)
        return script

    return _make


@pytest.fixture
def settings(project_root: Path) -> VerifierSettings:
    return VerifierSettings(project_root=project_root)
