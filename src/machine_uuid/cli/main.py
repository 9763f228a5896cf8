"""CLI principal (Typer).

Comandos:
- `show`: imprime el identificador de la máquina.
- `doctor run`: diagnóstico del entorno.
"""

from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from machine_uuid.cli import doctor
from machine_uuid.cli.ui_components import NO_OUTPUT, build_report_panel, print_error
from machine_uuid.core.config import load_settings
from machine_uuid.core.domain.platform import Platform
from machine_uuid.core.errors import MachineIdError
from machine_uuid.core.services.machine_id import get_report

app = typer.Typer(no_args_is_help=True, help="Retrieve the machine identifier (UUID) of this host.")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=_err_console, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    try:
        settings = load_settings()
    except MachineIdError as exc:
        print_error(_err_console, exc)
        raise typer.Exit(code=1)
    _configure_logging("DEBUG" if verbose else settings.log_level)


@app.command()
def show(
    platform: Optional[Platform] = typer.Option(
        None,
        "--platform",
        "-p",
        case_sensitive=False,
        help="Query a specific platform instead of detecting it.",
    ),
    raw: bool = typer.Option(False, "--raw", help="Print the command output verbatim."),
    as_json: bool = typer.Option(False, "--json", help="Print a JSON report."),
    pretty: bool = typer.Option(False, "--pretty", help="Print a Rich panel."),
) -> None:
    """Print the machine identifier."""

    try:
        report = get_report(platform=platform)
    except MachineIdError as exc:
        print_error(_err_console, exc)
        raise typer.Exit(code=1)

    if not report.machine_id:
        print_error(_err_console, NO_OUTPUT)
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(report.model_dump_json(indent=2))
    elif raw:
        typer.echo(report.raw, nl=False)
    elif pretty:
        _console.print(build_report_panel(report))
    else:
        typer.echo(report.machine_id)


def run() -> None:
    app()
