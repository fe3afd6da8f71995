# src/vamsa_gedcom/cli/commands/validate.py

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from vamsa_gedcom.cli.utils import console, load_gedcom
from vamsa_gedcom.config import get_config
from vamsa_gedcom.extraction.media_object import extract_object
from vamsa_gedcom.validation.objects import validate_object
from vamsa_gedcom.validation.structure import ERROR, WARNING, StructureIssue, validate_structure


def validate_command(
    gedcom: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
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
):
    """
    Report structural problems and media object issues.

    Exits with code 1 when any error was found.
    """
    file = load_gedcom(gedcom)
    cfg = get_config()

    issues = list(validate_structure(file))

    base_dir = media_dir or cfg.validation.get("media_base_dir")
    strict = strict_paths or bool(cfg.validation.get("absolute_path_is_error", False))
    for record in file.objects:
        check = validate_object(extract_object(record), base_dir, absolute_path_is_error=strict)
        for message in check.errors:
            issues.append(StructureIssue(ERROR, "object", message, "OBJE", record.id, "FILE", lineno=record.lineno))
        for message in check.warnings:
            issues.append(StructureIssue(WARNING, "object", message, "OBJE", record.id, "FILE", lineno=record.lineno))

    if not issues:
        console.print(f"[green]{gedcom.name}: no problems found[/green]")
        return

    table = Table(title=f"Validation report: {gedcom.name}")
    table.add_column("Severity", style="bold")
    table.add_column("Line", justify="right")
    table.add_column("Record")
    table.add_column("Message")

    for issue in issues:
        style = "red" if issue.severity == ERROR else "yellow"
        table.add_row(
            f"[{style}]{issue.severity}[/{style}]",
            str(issue.lineno or ""),
            f"{issue.record_tag or ''} {issue.record_id or ''}".strip(),
            issue.message,
        )

    console.print(table)

    errors = sum(1 for i in issues if i.severity == ERROR)
    console.print(f"{errors} error(s), {len(issues) - errors} warning(s)")
    if errors:
        raise typer.Exit(code=1)
