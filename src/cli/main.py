"""CLI principal (Typer).

Por qué Typer:
- Tipado de argumentos y ayuda autogenerada sin boilerplate.
- Rich se encarga de la presentación; la lógica vive en `core/`.

Códigos de salida:
- 0: documento(s) válido(s)
- 1: al menos un documento inválido
- 2: error de uso (tipo desconocido, archivo ilegible, ...)
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from adapters.batch_loader import load_batch_entries
from adapters.json_exporter import export_report_json
from cli import config_cmd
from cli.ui_components import build_results_table, build_summary_panel, print_banner, verdict_text
from core.config import AppSettings, load_settings
from core.domain.document_type import DocumentType
from core.logging_config import configure_logging
from core.services.batch_pipeline import explain_document, run_batch
from core.services.checksums import dni_check_digit, rnc_check_digit

app = typer.Typer(
    no_args_is_help=True,
    help="Validate Dominican Republic document numbers (cédula, passport, RNC).",
)
app.add_typer(config_cmd.app, name="config")

_console = Console()
_err_console = Console(stderr=True)


@dataclass
class CliState:
    settings: AppSettings
    show_banner: bool


def _require_type(value: str) -> DocumentType:
    resolved = DocumentType.parse(value)
    if resolved is None:
        raise typer.BadParameter(
            f"Unknown document type: {value!r} (expected dni, passport or rnc)"
        )
    return resolved


def _state(ctx: typer.Context) -> CliState:
    if isinstance(ctx.obj, CliState):
        return ctx.obj
    settings = load_settings()
    return CliState(settings=settings, show_banner=settings.show_banner)


@app.callback()
def main(
    ctx: typer.Context,
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="Override the configured log level (DEBUG, INFO, WARNING, ERROR).",
    ),
    no_banner: bool = typer.Option(False, "--no-banner", help="Do not print the banner."),
) -> None:
    try:
        settings = load_settings()
    except ValidationError as exc:
        fields = ", ".join(sorted({str(err["loc"][0]) for err in exc.errors() if err["loc"]}))
        raise typer.BadParameter(f"Invalid configuration for: {fields}") from exc
    try:
        configure_logging(log_level or settings.log_level)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--log-level") from exc
    ctx.obj = CliState(settings=settings, show_banner=settings.show_banner and not no_banner)


@app.command()
def validate(
    document_type: str = typer.Argument(..., help="dni, passport or rnc."),
    number: str = typer.Argument(..., help="Document number, exactly as written."),
    json_output: bool = typer.Option(False, "--json", help="Print the result as JSON."),
    explain: bool = typer.Option(False, "--explain", help="Show the rule that rejected the number."),
) -> None:
    """Validate a single document number."""

    resolved = _require_type(document_type)
    check = explain_document(resolved, number)

    if json_output:
        typer.echo(check.model_dump_json())
    else:
        line = verdict_text(check)
        line.append(f"  {resolved.label()} {number}", style="white")
        if explain and check.reason:
            line.append(f"  ({check.reason})", style="dim")
        _console.print(line)

    raise typer.Exit(code=0 if check.is_valid else 1)


@app.command(name="check-digit")
def check_digit(
    document_type: str = typer.Argument(..., help="dni or rnc."),
    payload: str = typer.Argument(..., help="DNI: first 10 digits. RNC: first 8 digits."),
) -> None:
    """Compute the check digit that completes a DNI or RNC payload."""

    resolved = _require_type(document_type)

    if resolved is DocumentType.DNI:
        digit = dni_check_digit(payload)
        if digit is None:
            raise typer.BadParameter("DNI payload must be exactly 10 digits", param_hint="PAYLOAD")
    elif resolved is DocumentType.RNC:
        digit = rnc_check_digit(payload)
        if digit is None:
            raise typer.BadParameter("RNC payload must be exactly 8 digits", param_hint="PAYLOAD")
        if digit > 9:
            _console.print(f"[yellow]No valid RNC exists for prefix {payload}[/yellow]")
            raise typer.Exit(code=1)
    else:
        raise typer.BadParameter(f"{resolved.label()} numbers have no check digit")

    _console.print(f"{digit}  ->  {payload}{digit}")


@app.command()
def batch(
    ctx: typer.Context,
    file: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        readable=True,
        help="Text file with one `type,number` (or bare number) per line.",
    ),
    document_type: str | None = typer.Option(
        None,
        "--type",
        "-t",
        help="Type for rows without one (defaults to RD_DOCS_DEFAULT_DOCUMENT_TYPE).",
    ),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write the report as JSON."),
    only_invalid: bool = typer.Option(False, "--only-invalid", help="List invalid rows only."),
) -> None:
    """Validate every document listed in FILE."""

    state = _state(ctx)
    default_type = (
        _require_type(document_type) if document_type else state.settings.default_document_type
    )

    try:
        entries = load_batch_entries(file, delimiter=state.settings.batch_delimiter)
    except (OSError, UnicodeDecodeError) as exc:
        _err_console.print(f"[red]Cannot read {escape(str(file))}:[/red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc

    report = run_batch(entries, default_type=default_type)

    if state.show_banner:
        print_banner(_console)
    _console.print(build_results_table(report, only_invalid=only_invalid))
    _console.print(build_summary_panel(report))

    if output is not None:
        path = export_report_json(report=report, output_path=output)
        _console.print(f"[green]Report saved to:[/green] {escape(str(path))}")

    raise typer.Exit(code=0 if report.invalid_count == 0 else 1)


def run() -> None:
    app()
