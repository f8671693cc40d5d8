"""Pass-through CLI: `asset-verify <file-or-glob>...`.

Arguments are not interpreted: everything after the program name goes to the
verifier untouched (globs are expanded by the calling shell) and the process
exits with the verifier's exit code.
"""

from __future__ import annotations

import asyncio
from typing import List, Optional

import typer
from pydantic import ValidationError

from cli.ui_components import configure_logging, print_error
from core.config import VerifierSettings
from core.errors import ConfigurationError, InvalidArgumentError
from core.services.invoker import Invoker

app = typer.Typer(
    add_completion=False,
    help="Run tools/verify_assets.sh on media files and relay its verdict.",
)


@app.command(context_settings={"ignore_unknown_options": True})
def verify(
    paths: Optional[List[str]] = typer.Argument(
        None,
        metavar="FILE...",
        help="Files to verify, passed to the verifier as-is.",
        show_default=False,
    ),
) -> None:
    """Verify media assets with the project verifier."""

    try:
        settings = VerifierSettings()
    except ValidationError as exc:
        print_error(f"Invalid configuration: {exc}")
        raise typer.Exit(code=1) from exc

    configure_logging(settings.log_level)

    try:
        code = asyncio.run(Invoker(settings).verify(list(paths or [])))
    except InvalidArgumentError as exc:
        raise typer.BadParameter(str(exc), param_hint="FILE...") from exc
    except ConfigurationError as exc:
        print_error(str(exc))
        raise typer.Exit(code=1) from exc

    raise typer.Exit(code=code)


def run() -> None:
    app()
