"""Config commands: inspect and persist settings."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from core.config import (
    ENV_PREFIX,
    get_user_env_file,
    load_settings,
    read_user_env_vars,
    write_user_env_vars,
)
from core.domain.document_type import DocumentType

app = typer.Typer(no_args_is_help=True, help="Inspect and persist rd-docs settings.")

_console = Console()


@app.command()
def show() -> None:
    """Show the effective settings and where they are read from."""

    settings = load_settings()

    table = Table(title="rd-docs config")
    table.add_column("Setting", style="bright_green", no_wrap=True)
    table.add_column("Value", style="white")

    default_type = settings.default_document_type
    rows = [
        ("log_level", settings.log_level),
        ("default_document_type", default_type.value if default_type else "(none)"),
        ("batch_delimiter", repr(settings.batch_delimiter)),
        ("show_banner", str(settings.show_banner)),
        ("user .env", str(get_user_env_file())),
        ("user .env keys", ", ".join(sorted(read_user_env_vars())) or "(none)"),
    ]
    # values come from env files, never render them as markup
    for name, value in rows:
        table.add_row(name, Text(value))

    _console.print(table)


@app.command(name="set-default-type")
def set_default_type(
    document_type: str = typer.Argument(..., help="dni, passport or rnc."),
) -> None:
    """Persist the default document type for batch rows without a type."""

    resolved = DocumentType.parse(document_type)
    if resolved is None:
        raise typer.BadParameter(f"Unknown document type: {document_type}")

    env_path = write_user_env_vars({f"{ENV_PREFIX}DEFAULT_DOCUMENT_TYPE": resolved.value})
    _console.print(f"[green]Saved default type to:[/green] {escape(str(env_path))}")
