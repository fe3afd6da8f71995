# src/vamsa_gedcom/cli/commands/import_.py

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from vamsa_gedcom.cli.utils import console, err_console, run_pipeline, write_json
from vamsa_gedcom.config import get_config
from vamsa_gedcom.exporter import result_to_dict
from vamsa_gedcom.mapping.diagnostics import MappingResult
from vamsa_gedcom.mapping.options import MapOptions


def _print_diagnostics(result: MappingResult) -> None:
    if not result.errors and not result.warnings:
        err_console.print("[green]No mapping errors or warnings[/green]")
        return

    table = Table(title="Import diagnostics")
    table.add_column("Level", style="bold")
    table.add_column("Type")
    table.add_column("Record")
    table.add_column("Field")
    table.add_column("Message")

    for e in result.errors:
        table.add_row("[red]error[/red]", e.type, f"{e.source} {e.id or ''}", e.field or "", e.message)
    for w in result.warnings:
        table.add_row("[yellow]warning[/yellow]", "", f"{w.source} {w.id or ''}", w.field or "", w.message)

    err_console.print(table)


def import_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write JSON to file instead of stdout",
    ),
    pretty: bool = typer.Option(
        False,
        "--pretty",
        help="Pretty-print JSON",
    ),
    media_dir: Optional[Path] = typer.Option(
        None,
        "--media-dir",
        help="Directory media file paths are checked against",
    ),
    strict_paths: bool = typer.Option(
        False,
        "--strict-paths",
        help="Treat absolute media paths as errors",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Map a GEDCOM file to Vamsa entities and print them as JSON.

    Exits with code 1 when the mapping reported errors.
    """
    options = MapOptions.from_config(
        get_config(),
        media_base_dir=media_dir,
        absolute_path_is_error=True if strict_paths else None,
    )
    result = run_pipeline(gedcom, options=options, verbose=verbose).result

    write_json(result_to_dict(result), out=out, pretty=pretty)
    _print_diagnostics(result)

    if verbose:
        console.log(f"Mapped {len(result.people)} people, {len(result.relationships)} relationships")

    if result.errors:
        raise typer.Exit(code=1)
