"""Tests for adapters.permissions."""

import os
import stat
from pathlib import Path

import pytest

from adapters import permissions
from adapters.permissions import is_executable, make_executable


def test_make_executable_mirrors_read_bits(tmp_path: Path) -> None:
    script = tmp_path / "verify.sh"
    script.write_text("#!/bin/sh\n", encoding="utf-8")
    script.chmod(0o640)

    assert make_executable(script) is True
    assert stat.S_IMODE(script.stat().st_mode) == 0o750


def test_make_executable_leaves_executable_file_alone(tmp_path: Path) -> None:
    script = tmp_path / "verify.sh"
    script.write_text("#!/bin/sh\n", encoding="utf-8")
    script.chmod(0o755)

    assert make_executable(script) is True
    assert stat.S_IMODE(script.stat().st_mode) == 0o755


def test_make_executable_reports_failure(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    script = tmp_path / "verify.sh"
    script.write_text("#!/bin/sh\n", encoding="utf-8")
    script.chmod(0o644)

    def deny(*args, **kwargs):
        raise PermissionError("operation not permitted")

    monkeypatch.setattr(permissions.os, "chmod", deny)

    assert make_executable(script) is False


def test_make_executable_missing_file(tmp_path: Path) -> None:
    assert make_executable(tmp_path / "nope.sh") is False


def test_is_executable(tmp_path: Path) -> None:
    script = tmp_path / "verify.sh"
    script.write_text("#!/bin/sh\n", encoding="utf-8")
    script.chmod(0o644)
    assert is_executable(script) is False

    script.chmod(0o755)
    assert is_executable(script) is True
    assert is_executable(tmp_path) is False
    assert os.access(script, os.X_OK)
