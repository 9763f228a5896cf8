"""Componentes de UI para CLI (Rich).

Separa los detalles visuales (tablas, paneles) de la lógica de los comandos.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from machine_uuid.core.domain.models import MachineIdReport


NO_OUTPUT = "Command produced no output"


def print_error(console: Console, exc: BaseException | str) -> None:
    console.print(f"[red]Error:[/red] {escape(str(exc))}")


def build_doctor_table() -> Table:
    """Crea la tabla vacía del comando `doctor`."""

    table = Table(title="machine-uuid Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    return table


def build_report_panel(report: MachineIdReport) -> Panel:
    """Panel con el identificador y el comando que lo produjo."""

    body = Text()
    body.append(report.machine_id + "\n", style="bold")
    body.append(f"\nPlatform: {report.platform.label()}", style="dim")
    if report.command:
        body.append(f"\nCommand: {' '.join(report.command)}", style="dim")
    return Panel(body, title=Text("Machine ID", style="bold cyan"), border_style="cyan")
