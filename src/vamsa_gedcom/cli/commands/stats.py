# src/vamsa_gedcom/cli/commands/stats.py

from __future__ import annotations

from pathlib import Path

import typer
from rich.table import Table

from vamsa_gedcom.cli.utils import console, load_gedcom
from vamsa_gedcom.extraction import header_submitter


def stats_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Show record counts for a GEDCOM file.
    """
    file = load_gedcom(gedcom, verbose=verbose)

    submitter = header_submitter(file)
    caption = f"Submitted by {submitter.name}" if submitter and submitter.name else None

    table = Table(title=f"GEDCOM {file.version} Statistics", caption=caption)
    table.add_column("Record", style="bold")
    table.add_column("Count", justify="right")

    table.add_row("Individuals", str(len(file.individuals)))
    table.add_row("Families", str(len(file.families)))
    table.add_row("Sources", str(len(file.sources)))
    table.add_row("Media Objects", str(len(file.objects)))
    table.add_row("Repositories", str(len(file.repositories)))
    table.add_row("Submitters", str(len(file.submitters)))
    table.add_row("Other", str(len(file.others)))

    console.print(table)
