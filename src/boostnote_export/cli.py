"""Command-line interface for boostnote-export using Typer and Rich."""

from pathlib import Path
from typing import NoReturn, Optional

import polars as pl
import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from boostnote_export.config import Settings, load_settings, setup_logging
from boostnote_export.errors import VaultError
from boostnote_export.tables import folders_frame, notes_frame
from boostnote_export.vault import Vault

app = typer.Typer(
    name="boostnote-export",
    help="Export a Boostnote vault to Markdown files with attachments.",
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)


def _print_frame(df: pl.DataFrame, title: str) -> None:
    table = Table(title=title, show_header=True, header_style="bold cyan")
    for column in df.columns:
        table.add_column(column)
    for row in df.iter_rows():
        table.add_row(*("" if value is None else str(value) for value in row))
    console.print(table)


def _abort(exc: Exception) -> NoReturn:
    err_console.print(f"[red]Error: {escape(str(exc))}[/red]")
    raise typer.Exit(1)


def _open_vault(ctx: typer.Context) -> Vault:
    settings: Settings = ctx.obj
    return Vault(settings.vault_dir, settings.export_dir)


@app.callback()
def main(
    ctx: typer.Context,
    vault: Optional[Path] = typer.Option(
        None,
        "--vault",
        "-v",
        help="Boostnote vault directory (default: $BOOSTNOTE_DIR or cwd)",
    ),
    export_dir: Optional[Path] = typer.Option(
        None,
        "--export-dir",
        "-e",
        help="Export root directory (default: $BOOSTNOTE_EXPORT_DIR or cwd)",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Logging level (default: $LOG_LEVEL or INFO)",
    ),
):
    """Export a Boostnote vault to Markdown files with attachments."""
    settings = load_settings(vault, export_dir, log_level)
    setup_logging(settings.log_level)
    ctx.obj = settings


@app.command("list-folders")
def list_folders(ctx: typer.Context):
    """List available folders."""
    try:
        vault = _open_vault(ctx)
        df = folders_frame(vault.catalog)
    except (VaultError, OSError) as exc:
        _abort(exc)
    _print_frame(df, "List of available folders")


@app.command("list-notes")
def list_notes(
    ctx: typer.Context,
    folder: Optional[str] = typer.Option(None, "--folder", "-f", help="Filter notes by folder name"),
):
    """List all notes."""
    try:
        vault = _open_vault(ctx)
        notes = vault.read_notes()
        if folder:
            notes = vault.notes_in_folder(notes, folder)
        df = notes_frame(notes, vault.catalog)
    except (VaultError, OSError) as exc:
        _abort(exc)
    _print_frame(df, f"Notes for folder: {folder}" if folder else "List of all notes")


@app.command("export-notes")
def export_notes(
    ctx: typer.Context,
    folder: Optional[str] = typer.Option(None, "--folder", "-f", help="Export notes for the specified folder"),
    add_tags: Optional[str] = typer.Option(None, "--add-tags", "-t", help="Add YAML tags to the exported note"),
    clear_export_dirs: bool = typer.Option(
        False, "--clear-export-dirs", help="Remove previously exported notes first"
    ),
    archive: bool = typer.Option(False, "--archive", help="Move each exported note into the archive"),
    folder_metadata: bool = typer.Option(
        True, "--folder-metadata/--no-folder-metadata", help="Write the folder name into the header"
    ),
):
    """Export notes."""
    if add_tags:
        err_console.print("[red]Error: --add-tags is not supported yet[/red]")
        raise typer.Exit(1)

    try:
        vault = _open_vault(ctx)
        notes = vault.read_notes()
        if folder:
            notes = vault.notes_in_folder(notes, folder)
            console.print(f"Export notes for folder: {folder}")
        else:
            console.print("Export all notes")

        if clear_export_dirs:
            vault.clear_export_dirs()
        written = vault.export(notes, archive=archive, include_folder=folder_metadata)
    except (VaultError, OSError) as exc:
        _abort(exc)

    console.print(f"[green]Exported {len(written)} notes to {vault.paths.export_notes_dir}[/green]")


if __name__ == "__main__":
    app()
