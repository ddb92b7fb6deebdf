"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en `validate` y `batch`.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import BatchReport, DocumentCheck


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida.

    Se desactiva con `--no-banner` o en modos no interactivos (JSON).
    """

    title = Text("RD-DOCS", style="bold cyan")
    subtitle = Text("Cédula • Pasaporte • RNC", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def _type_label(check: DocumentCheck) -> Text:
    return Text(check.document_type.label() if check.document_type else "?")


def verdict_text(check: DocumentCheck) -> Text:
    if check.is_valid:
        return Text("VALID", style="bold green")
    return Text("INVALID", style="bold red")


def build_results_table(report: BatchReport, *, only_invalid: bool = False) -> Table:
    """Tabla de resultados; las celdas van como `Text` para no interpretar markup."""

    table = Table(title="Document checks")
    table.add_column("Line", style="dim", justify="right")
    table.add_column("Type", style="cyan", no_wrap=True)
    table.add_column("Number", style="white")
    table.add_column("Result")
    table.add_column("Reason", style="red")
    for check in report.checks:
        if only_invalid and check.is_valid:
            continue
        table.add_row(
            Text(str(check.line) if check.line is not None else ""),
            _type_label(check),
            Text(check.document_number),
            verdict_text(check),
            Text(check.reason or ""),
        )
    return table


def build_summary_panel(report: BatchReport) -> Panel:
    body = Text()
    body.append(f"Total: {report.total}\n")
    body.append(f"Valid: {report.valid_count}\n", style="green")
    body.append(f"Invalid: {report.invalid_count}", style="red")
    border = "green" if report.invalid_count == 0 else "yellow"
    return Panel(body, title="Summary", border_style=border)
