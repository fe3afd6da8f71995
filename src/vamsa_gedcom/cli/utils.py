# src/vamsa_gedcom/cli/utils.py

from __future__ import annotations

import json
import time
from pathlib import Path
from typing import Any, Dict, Optional

import typer
from rich.console import Console

from vamsa_gedcom.config import get_config
from vamsa_gedcom.core.context import ParseContext
from vamsa_gedcom.core.exceptions import ParseError
from vamsa_gedcom.core.pipeline import Pipeline
from vamsa_gedcom.loader.assembler import GedcomFile
from vamsa_gedcom.logging import get_logger
from vamsa_gedcom.mapping.options import MapOptions
from vamsa_gedcom.parser_core import GedcomParser

console = Console()
err_console = Console(stderr=True)


def load_gedcom(path: Path, *, verbose: bool = False) -> GedcomFile:
    """
    Parse a GEDCOM file for a command.

    A ParseError is reported with its line number and ends the command
    with exit code 2.
    """
    t0 = time.perf_counter()

    try:
        file = GedcomParser().parse_file(path)
    except ParseError as exc:
        err_console.print(f"[bold red]Parse error[/bold red] in {path}: {exc}")
        raise typer.Exit(code=2) from exc

    elapsed = time.perf_counter() - t0

    if verbose:
        console.log(f"Loaded GEDCOM in {elapsed:.2f}s")

    return file


def run_pipeline(
    path: Path,
    *,
    options: Optional[MapOptions] = None,
    verbose: bool = False,
) -> Pipeline:
    """
    Parse and map a GEDCOM file through the Pipeline.

    Parse errors end the command with exit code 2, as in load_gedcom.
    """
    ctx = ParseContext(
        config=get_config(),
        logger=get_logger("cli"),
        input_path=str(path),
        debug=verbose,
    )
    pipeline = Pipeline(ctx, options)

    try:
        pipeline.run()
    except ParseError as exc:
        err_console.print(f"[bold red]Parse error[/bold red] in {path}: {exc}")
        raise typer.Exit(code=2) from exc

    return pipeline


def write_json(
    data: Dict[str, Any],
    *,
    out: Optional[Path],
    pretty: bool,
) -> None:
    """
    Write JSON to stdout or file.
    """
    if pretty:
        payload = json.dumps(data, indent=2, ensure_ascii=False)
    else:
        payload = json.dumps(data, separators=(",", ":"), ensure_ascii=False)

    if out:
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(payload, encoding="utf-8")
    else:
        print(payload)
