# src/vamsa_gedcom/cli/commands/export.py

from __future__ import annotations

from pathlib import Path

import typer

from vamsa_gedcom.cli.utils import console, run_pipeline


def export_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    out: Path = typer.Option(
        ...,
        "--out",
        "-o",
        help="Where to write the regenerated GEDCOM",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Re-generate GEDCOM 5.5.1 from the mapped people and relationships.
    """
    pipeline = run_pipeline(gedcom, verbose=verbose)
    pipeline.export_gedcom(out)

    written = pipeline.ctx.stats["export"]
    console.print(f"Wrote {written['individuals']} individuals and {written['families']} families to {out}")
