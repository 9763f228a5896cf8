"""Doctor command for environment diagnostics."""

from __future__ import annotations

import shutil

import typer
from rich.console import Console

from machine_uuid.cli.ui_components import NO_OUTPUT, build_doctor_table, print_error
from machine_uuid.core.config import AppSettings, get_user_env_file, load_settings
from machine_uuid.core.domain.platform import Platform
from machine_uuid.core.errors import MachineIdError
from machine_uuid.core.services.machine_id import build_source, get_report, resolve_platform

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_retrieval(platform: Platform, settings: AppSettings) -> tuple[bool, str]:
    try:
        report = get_report(platform=platform, settings=settings)
    except MachineIdError as exc:
        return False, str(exc)
    if not report.machine_id:
        return False, NO_OUTPUT
    return True, report.machine_id


@app.command()
def run() -> None:
    """Run baseline diagnostics for the identifier commands."""

    try:
        settings = load_settings()
    except MachineIdError as exc:
        print_error(_console, exc)
        raise typer.Exit(code=1)

    table = build_doctor_table()

    try:
        platform = resolve_platform(settings=settings)
    except MachineIdError as exc:
        table.add_row("Platform", "FAIL", str(exc))
        _console.print(table)
        raise typer.Exit(code=1)

    origin = "forced by MACHINE_UUID_PLATFORM" if settings.platform else "detected"
    table.add_row("Platform", "OK", f"{platform.label()} ({origin})")

    source = build_source(platform, settings=settings)
    table.add_row("Command", "OK", " ".join(source.argv))

    program = source.argv[0]
    located = shutil.which(program)
    table.add_row("Program on PATH", "OK" if located else "FAIL", located or f"{program} not found")

    if settings.command_timeout_seconds is None:
        table.add_row("Timeout", "OPTIONAL", "Not set -> a hung command blocks indefinitely")
    else:
        table.add_row("Timeout", "OK", f"{settings.command_timeout_seconds:g}s")

    table.add_row("User config", "OK", str(get_user_env_file()))

    ok, detail = _check_retrieval(platform, settings)
    table.add_row("Retrieval", "OK" if ok else "FAIL", detail)

    _console.print(table)

    if not ok:
        raise typer.Exit(code=1)
