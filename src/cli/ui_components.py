"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Todo lo que no es salida del verificador va a stderr, para que stdout sea
  exactamente lo que imprimió el script.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.text import Text

err_console = Console(stderr=True)


def configure_logging(level: str) -> None:
    """Instala un `RichHandler` en el root logger (stderr)."""

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False, rich_tracebacks=True)],
        force=True,
    )


def print_error(message: str, console: Console | None = None) -> None:
    (console or err_console).print(Text(message, style="bold red"))


def build_doctor_table() -> Table:
    table = Table(title="asset-verify doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    return table


def status_label(ok: bool, *, optional: bool = False) -> Text:
    if ok:
        return Text("OK", style="green")
    if optional:
        return Text("OPTIONAL", style="yellow")
    return Text("FAIL", style="red")
