"""Doctor command for environment diagnostics."""

from __future__ import annotations

import shutil
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console

from adapters.permissions import is_executable
from cli.ui_components import build_doctor_table, print_error, status_label
from core.config import VerifierSettings, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def read_interpreter(script: Path) -> str | None:
    """Return the interpreter named in the script's shebang, if any."""

    try:
        with script.open("rb") as fh:
            first = fh.readline(256)
    except OSError:
        return None
    if not first.startswith(b"#!"):
        return None
    parts = first[2:].decode("utf-8", errors="replace").split()
    if not parts:
        return None
    if Path(parts[0]).name == "env" and len(parts) > 1:
        return parts[1]
    return parts[0]


def _interpreter_available(interpreter: str) -> bool:
    if Path(interpreter).is_absolute():
        return Path(interpreter).exists()
    return shutil.which(interpreter) is not None


def _load_settings() -> VerifierSettings:
    try:
        return VerifierSettings()
    except ValidationError as exc:
        print_error(f"Invalid configuration: {exc}")
        raise typer.Exit(code=1) from exc


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes.

    Exits 1 unless `asset-verify` would be able to start the verifier.
    """

    settings = _load_settings()
    root = settings.resolved_root()
    verifier = settings.resolved_verifier()

    table = build_doctor_table()
    table.add_row("Project root", status_label(root.is_dir()), str(root))

    found = verifier.is_file()
    table.add_row("Verifier", status_label(found), str(verifier))

    executable = found and is_executable(verifier)
    table.add_row(
        "Executable",
        status_label(executable, optional=found),
        "OK" if executable else "Will be chmod +x on first run",
    )

    interpreter = read_interpreter(verifier) if found else None
    if interpreter is None:
        interpreter_ok = False
        table.add_row("Interpreter", status_label(False), "No shebang found")
    else:
        interpreter_ok = _interpreter_available(interpreter)
        table.add_row("Interpreter", status_label(interpreter_ok), interpreter)

    _console.print(table)

    if not found:
        _console.print(
            "\n[yellow]Note:[/yellow] Move your verify_assets.sh into tools/ "
            "or set ASSET_VERIFY_VERIFIER_PATH."
        )
    elif not interpreter_ok:
        _console.print(
            "\n[yellow]Note:[/yellow] The verifier needs a shebang line naming an "
            "installed interpreter, e.g. #!/bin/sh."
        )

    if not (found and interpreter_ok):
        raise typer.Exit(code=1)


@app.command()
def setup() -> None:
    """Interactive setup (stores paths in the user config .env)."""

    defaults = _load_settings()

    root = typer.prompt("Project root", default=str(defaults.resolved_root()), show_default=True).strip()
    verifier = typer.prompt(
        "Verifier path (relative to project root or absolute)",
        default=str(defaults.verifier_path),
        show_default=True,
    ).strip()

    if not root or not verifier:
        raise typer.BadParameter("project root and verifier path are required")

    env_path = write_user_env_vars(
        {
            "ASSET_VERIFY_PROJECT_ROOT": root,
            "ASSET_VERIFY_VERIFIER_PATH": verifier,
        }
    )

    _console.print(f"[green]Saved verifier config to:[/green] {env_path}")
